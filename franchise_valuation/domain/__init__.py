"""Domain types for the franchise valuation framework."""

from franchise_valuation.domain.types import ValuationInput
from franchise_valuation.domain.types import ValuationResult
from franchise_valuation.domain.types import YearlyProjection

__all__ = [
    'ValuationInput',
    'ValuationResult',
    'YearlyProjection',
]

'''DCF calculation engine with pure math functions.'''

from franchise_valuation.engine.dcf import (
    compute_present_value,
    compute_restaurant_valuation,
    project_year,
)

__all__ = [
    'compute_present_value',
    'compute_restaurant_valuation',
    'project_year',
]

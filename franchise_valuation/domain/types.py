'''
Domain types for the franchise valuation framework.

These dataclasses are the plain input/output records exchanged with the
DCF engine. The engine only reads a ValuationInput and returns a fresh
ValuationResult; nothing here holds state across calls.
'''

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List

import pandas as pd

# Keys used by the form layer, mapped to field names.
_CAMEL_CASE_KEYS = {
    'initialSales': 'initial_sales',
    'salesGrowthRate': 'sales_growth_rate',
    'inflationRate': 'inflation_rate',
    'discountRate': 'discount_rate',
    'yearsRemaining': 'years_remaining',
    'pacPercentage': 'pac_percentage',
    'rentPercentage': 'rent_percentage',
    'serviceFeesPercentage': 'service_fees_percentage',
    'depreciation': 'depreciation',
    'interest': 'interest',
    'rentIndex': 'rent_index',
    'miscellaneous': 'miscellaneous',
    'loanPayment': 'loan_payment',
    'baseYear': 'base_year',
}


@dataclass
class ValuationInput:
  '''
  Financial assumptions for a single restaurant valuation.

  All rates and percentages are whole numbers (30 means 30%).

  Attributes:
    initial_sales: Year-0 revenue base
    sales_growth_rate: Annual sales growth (%), compounding
    inflation_rate: Annual inflation (%) applied to rent index and misc
    discount_rate: Annual discount rate (%) for present value
    years_remaining: Number of projection years (N)
    pac_percentage: PAC as % of sales
    rent_percentage: Rent as % of sales
    service_fees_percentage: Service fees as % of sales
    depreciation: Fixed annual depreciation (not inflated)
    interest: Fixed annual interest (not inflated)
    rent_index: Annual indexed rent base (inflated)
    miscellaneous: Annual miscellaneous cost base (inflated)
    loan_payment: Added to cash flow each year (negative for outflow)
    base_year: Calendar year of projection year 1
  '''
  initial_sales: float
  sales_growth_rate: float
  inflation_rate: float
  discount_rate: float
  years_remaining: int
  pac_percentage: float
  rent_percentage: float
  service_fees_percentage: float
  depreciation: float
  interest: float
  rent_index: float
  miscellaneous: float
  loan_payment: float
  base_year: int

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to dictionary with snake_case keys.'''
    return asdict(self)

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'ValuationInput':
    '''
    Create from dictionary.

    Accepts snake_case field names as well as the camelCase keys used by
    the valuation form (e.g. 'initialSales', 'yearsRemaining').

    Raises:
      ValueError: If a key is unknown or a required field is missing
    '''
    field_names = {f.name for f in fields(cls)}
    kwargs: Dict[str, Any] = {}
    for key, value in data.items():
      name = _CAMEL_CASE_KEYS.get(key, key)
      if name not in field_names:
        raise ValueError(f'Unknown valuation input: {key!r}')
      kwargs[name] = value

    missing = sorted(field_names - kwargs.keys())
    if missing:
      raise ValueError(f'Missing valuation inputs: {missing}')
    return cls(**kwargs)


@dataclass
class YearlyProjection:
  '''
  Breakdown of one projected year.

  Attributes:
    year: Calendar year
    sales: Projected sales
    pac: PAC cost
    rent: Rent (% of sales)
    service_fees: Service fees (% of sales)
    rent_index: Inflated rent index for the year
    miscellaneous: Inflated miscellaneous costs for the year
    total_non_controllables: Sum of all non-controllable costs
    soi: Store operating income
    cashflow: SOI plus loan payment
    free_cash_flow: Cash flow plus depreciation
  '''
  year: int
  sales: float
  pac: float
  rent: float
  service_fees: float
  rent_index: float
  miscellaneous: float
  total_non_controllables: float
  soi: float
  cashflow: float
  free_cash_flow: float


@dataclass
class ValuationResult:
  '''
  DCF valuation output.

  Attributes:
    final_valuation: Sum of discounted free cash flows
    projected_cash_flows: Undiscounted free cash flow per year (index 0 =
      year 1)
    yearly_projections: Per-year breakdown, ascending by year
  '''
  final_valuation: float
  projected_cash_flows: List[float] = field(default_factory=list)
  yearly_projections: List[YearlyProjection] = field(default_factory=list)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to nested dictionary.'''
    return asdict(self)

  def to_frame(self) -> pd.DataFrame:
    '''Yearly projections as a DataFrame indexed by calendar year.'''
    columns = [f.name for f in fields(YearlyProjection)]
    df = pd.DataFrame([asdict(p) for p in self.yearly_projections],
                      columns=columns)
    return df.set_index('year')

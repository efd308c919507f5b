"""
Pure DCF math engine for restaurant valuation.

This module contains pure functions for the restaurant cash-flow projection.
No pandas, no I/O, no validation: inputs must be checked by the caller
before calling these. Non-finite inputs propagate as NaN.

Key functions:
  compute_restaurant_valuation: Main entry point, projection plus valuation
  project_year: Breakdown of a single projected year
  compute_present_value: Discounted sum of a cash flow sequence
"""

from collections.abc import Sequence
import math

from franchise_valuation.domain.types import ValuationInput
from franchise_valuation.domain.types import ValuationResult
from franchise_valuation.domain.types import YearlyProjection


def _compound(base: float, years: int) -> float:
  """base**years, saturating to a signed infinity on overflow."""
  try:
    return base**years
  except OverflowError:
    if base < 0 and years % 2:
      return -math.inf
    return math.inf


def _discount(cf: float, factor: float) -> float:
  """cf / factor with IEEE semantics for a zero factor."""
  if factor == 0:
    if cf == 0 or math.isnan(cf):
      return math.nan
    return math.copysign(math.inf, cf)
  return cf / factor


def _year_count(years_remaining: float) -> int:
  """Loop bound for the projection; non-finite counts project nothing."""
  if not math.isfinite(years_remaining):
    return 0
  return int(years_remaining)


def project_year(inputs: ValuationInput, year_index: int) -> YearlyProjection:
  """
  Project sales, costs and cash flow for one year.

  Variable costs (PAC, rent, service fees) scale with sales. Rent index and
  miscellaneous inflate each year; depreciation and interest stay constant.

  Args:
    inputs: Restaurant assumptions
    year_index: 1-based projection year

  Returns:
    YearlyProjection for calendar year base_year + year_index - 1
  """
  growth = 1.0 + inputs.sales_growth_rate / 100.0
  sales = inputs.initial_sales * _compound(growth, year_index)

  pac = sales * inputs.pac_percentage / 100.0
  rent = sales * inputs.rent_percentage / 100.0
  service_fees = sales * inputs.service_fees_percentage / 100.0

  inflation_factor = _compound(1.0 + inputs.inflation_rate / 100.0,
                               year_index)
  rent_index = inputs.rent_index * inflation_factor
  miscellaneous = inputs.miscellaneous * inflation_factor

  total_non_controllables = (rent + service_fees + inputs.depreciation +
                             inputs.interest + rent_index + miscellaneous)

  soi = sales - pac - total_non_controllables
  cashflow = soi + inputs.loan_payment
  # Depreciation is a non-cash charge.
  free_cash_flow = cashflow + inputs.depreciation

  return YearlyProjection(
      year=inputs.base_year + year_index - 1,
      sales=sales,
      pac=pac,
      rent=rent,
      service_fees=service_fees,
      rent_index=rent_index,
      miscellaneous=miscellaneous,
      total_non_controllables=total_non_controllables,
      soi=soi,
      cashflow=cashflow,
      free_cash_flow=free_cash_flow,
  )


def compute_present_value(
    cash_flows: Sequence[float],
    discount_rate: float,
) -> float:
  """
  Discount a cash flow sequence to present value.

  Args:
    cash_flows: Yearly cash flows [cf1, cf2, ..., cfN]
    discount_rate: Annual discount rate in percent (10 means 10%)

  Returns:
    Sum of cf_t / (1 + r)^t with t starting at 1
  """
  r = discount_rate / 100.0
  pv = 0.0
  for t, cf in enumerate(cash_flows, start=1):
    pv += _discount(cf, _compound(1.0 + r, t))
  return pv


def compute_restaurant_valuation(inputs: ValuationInput) -> ValuationResult:
  """
  Compute the DCF valuation of a restaurant.

  Projects years 1..years_remaining, collects each year's free cash flow,
  then discounts them at discount_rate.

  Args:
    inputs: Restaurant assumptions (never modified)

  Returns:
    ValuationResult with final valuation, undiscounted free cash flows and
    the yearly breakdown. years_remaining <= 0 yields empty sequences and a
    valuation of 0.0.
  """
  projected_cash_flows = []
  yearly_projections = []

  for y in range(1, _year_count(inputs.years_remaining) + 1):
    projection = project_year(inputs, y)
    projected_cash_flows.append(projection.free_cash_flow)
    yearly_projections.append(projection)

  final_valuation = compute_present_value(projected_cash_flows,
                                          inputs.discount_rate)

  return ValuationResult(
      final_valuation=final_valuation,
      projected_cash_flows=projected_cash_flows,
      yearly_projections=yearly_projections,
  )

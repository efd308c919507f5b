"""
Input validation at the caller edge.

The DCF engine accepts any numeric input and lets NaN propagate. Callers
that take assumptions from users or files run these checks first and reject
out-of-domain values with a typed error.
"""
from dataclasses import dataclass, fields, replace
import logging
from math import isfinite
from numbers import Integral, Real
from typing import List

from franchise_valuation.domain.types import ValuationInput

logger = logging.getLogger(__name__)

_PERCENTAGE_FIELDS = (
    'pac_percentage',
    'rent_percentage',
    'service_fees_percentage',
)


@dataclass(frozen=True)
class CheckResult:
  """Result of a single validation check."""

  name: str
  ok: bool
  details: str

  def __str__(self) -> str:
    status = '✓' if self.ok else '✗'
    return f'{status} {self.name}: {self.details}'


def pass_result(name: str, details: str) -> CheckResult:
  """Create a passing CheckResult."""
  return CheckResult(name=name, ok=True, details=details)


def fail_result(name: str, details: str) -> CheckResult:
  """Create a failing CheckResult."""
  return CheckResult(name=name, ok=False, details=details)


class ValuationInputError(ValueError):
  """Raised when valuation inputs fail validation."""

  def __init__(self, failures: List[CheckResult]):
    self.failures = failures
    details = '; '.join(f'{r.name}: {r.details}' for r in failures)
    super().__init__(f'Invalid valuation inputs: {details}')


def _is_integer(value) -> bool:
  if isinstance(value, bool):
    return False
  if isinstance(value, Integral):
    return True
  # Whole-valued floats arrive from JSON forms (e.g. 10.0).
  return isinstance(value, float) and value.is_integer()


def check_finite(inputs: ValuationInput) -> CheckResult:
  """All numeric fields must be finite real numbers."""
  bad = []
  for f in fields(inputs):
    value = getattr(inputs, f.name)
    if isinstance(value, bool) or not isinstance(value, Real):
      bad.append(f.name)
    elif not isfinite(value):
      bad.append(f.name)

  if bad:
    return fail_result('finite', f'non-finite or non-numeric: {bad}')
  return pass_result('finite', 'all fields finite')


def check_initial_sales(inputs: ValuationInput) -> CheckResult:
  if inputs.initial_sales < 0:
    return fail_result('initial_sales',
                       f'must be >= 0, got {inputs.initial_sales}')
  return pass_result('initial_sales', f'{inputs.initial_sales}')


def check_years_remaining(inputs: ValuationInput) -> CheckResult:
  years = inputs.years_remaining
  if not _is_integer(years) or years < 1:
    return fail_result('years_remaining',
                       f'must be a positive integer, got {years!r}')
  return pass_result('years_remaining', f'{years}')


def check_discount_rate(inputs: ValuationInput) -> CheckResult:
  # (1 + r/100) must stay positive.
  if inputs.discount_rate <= -100:
    return fail_result('discount_rate',
                       f'must be > -100, got {inputs.discount_rate}')
  return pass_result('discount_rate', f'{inputs.discount_rate}')


def check_base_year(inputs: ValuationInput) -> CheckResult:
  if not _is_integer(inputs.base_year):
    return fail_result('base_year',
                       f'must be an integer, got {inputs.base_year!r}')
  return pass_result('base_year', f'{inputs.base_year}')


def validate_inputs(inputs: ValuationInput) -> List[CheckResult]:
  """
  Run all checks on a ValuationInput.

  Percentages outside 0-100 are logged as warnings but not failed.

  Args:
    inputs: Assumptions to check

  Returns:
    One CheckResult per check, in a stable order
  """
  finite = check_finite(inputs)
  if not finite.ok:
    # Range checks are meaningless on non-numeric fields.
    return [finite]

  for name in _PERCENTAGE_FIELDS:
    value = getattr(inputs, name)
    if not 0 <= value <= 100:
      logger.warning('%s outside 0-100: %s', name, value)

  return [
      finite,
      check_initial_sales(inputs),
      check_years_remaining(inputs),
      check_discount_rate(inputs),
      check_base_year(inputs),
  ]


def ensure_valid(inputs: ValuationInput) -> ValuationInput:
  """
  Validate inputs, raising on the first failing batch of checks.

  Whole-valued float year fields are converted to int.

  Returns:
    The inputs, or a copy with integer year fields if any were converted

  Raises:
    ValuationInputError: If any check fails
  """
  results = validate_inputs(inputs)
  failures = [r for r in results if not r.ok]
  if failures:
    raise ValuationInputError(failures)

  for r in results:
    logger.debug('%s', r)

  if not isinstance(inputs.years_remaining, int) or not isinstance(
      inputs.base_year, int):
    inputs = replace(inputs,
                     years_remaining=int(inputs.years_remaining),
                     base_year=int(inputs.base_year))
  return inputs

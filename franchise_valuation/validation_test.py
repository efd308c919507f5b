import logging

import pytest

from franchise_valuation.validation import CheckResult
from franchise_valuation.validation import ensure_valid
from franchise_valuation.validation import validate_inputs
from franchise_valuation.validation import ValuationInputError


def _failed(results):
  return {r.name for r in results if not r.ok}


class TestValidateInputs:
  """Tests for validate_inputs function."""

  def test_valid_inputs(self, restaurant_inputs):
    """Realistic inputs pass every check."""
    results = validate_inputs(restaurant_inputs)

    assert all(isinstance(r, CheckResult) for r in results)
    assert all(r.ok for r in results)
    assert [r.name for r in results] == [
        'finite', 'initial_sales', 'years_remaining', 'discount_rate',
        'base_year'
    ]

  @pytest.mark.parametrize('value', [float('nan'), float('inf'), None, '10'])
  def test_non_finite(self, make_inputs, value):
    """NaN, infinity and non-numbers fail the finite check."""
    results = validate_inputs(make_inputs(inflation_rate=value))

    assert len(results) == 1
    assert _failed(results) == {'finite'}
    assert 'inflation_rate' in results[0].details

  def test_negative_sales(self, make_inputs):
    """Negative sales are rejected."""
    results = validate_inputs(make_inputs(initial_sales=-1.0))

    assert _failed(results) == {'initial_sales'}

  @pytest.mark.parametrize('years', [0, -1, 2.5, True])
  def test_bad_years(self, make_inputs, years):
    """Years must be a positive integer."""
    results = validate_inputs(make_inputs(years_remaining=years))

    assert 'years_remaining' in _failed(results) or 'finite' in _failed(
        results)

  @pytest.mark.parametrize('rate', [-100.0, -150.0])
  def test_discount_rate_floor(self, make_inputs, rate):
    """Discount base (1 + r/100) must stay positive."""
    results = validate_inputs(make_inputs(discount_rate=rate))

    assert _failed(results) == {'discount_rate'}

  def test_discount_rate_near_floor_ok(self, make_inputs):
    """Just above -100 is accepted."""
    results = validate_inputs(make_inputs(discount_rate=-99.9))

    assert not _failed(results)

  def test_float_base_year(self, make_inputs):
    """Calendar year must be a whole number."""
    results = validate_inputs(make_inputs(base_year=2024.5))

    assert _failed(results) == {'base_year'}

  def test_whole_float_years_accepted(self, make_inputs):
    """JSON forms may send 10.0 for an integer field."""
    results = validate_inputs(
        make_inputs(years_remaining=10.0, base_year=2024.0))

    assert _failed(results) == set()

  def test_percentage_out_of_range_warns(self, make_inputs, caplog):
    """Out-of-range percentages only warn."""
    with caplog.at_level(logging.WARNING):
      results = validate_inputs(make_inputs(pac_percentage=130.0))

    assert not _failed(results)
    assert 'pac_percentage outside 0-100' in caplog.text


class TestEnsureValid:
  """Tests for ensure_valid function."""

  def test_returns_inputs(self, flat_inputs):
    """Valid inputs are passed through."""
    assert ensure_valid(flat_inputs) is flat_inputs

  def test_converts_whole_float_years(self, make_inputs):
    inputs = make_inputs(years_remaining=10.0, base_year=2024.0)
    checked = ensure_valid(inputs)

    assert isinstance(checked.years_remaining, int)
    assert isinstance(checked.base_year, int)
    assert checked.years_remaining == 10
    assert checked.base_year == 2024
    assert inputs.years_remaining == 10.0

  def test_raises_with_failures(self, make_inputs):
    """Failures are collected on the error."""
    with pytest.raises(ValuationInputError, match='discount_rate') as exc:
      ensure_valid(make_inputs(discount_rate=-200.0, initial_sales=-5.0))

    assert {r.name for r in exc.value.failures} == {
        'initial_sales', 'discount_rate'
    }

  def test_is_value_error(self, make_inputs):
    """Typed error is still a ValueError."""
    with pytest.raises(ValueError):
      ensure_valid(make_inputs(years_remaining=0))


class TestCheckResult:

  def test_str(self):
    assert str(CheckResult('finite', True, 'ok')) == '✓ finite: ok'
    assert str(CheckResult('finite', False, 'bad')) == '✗ finite: bad'

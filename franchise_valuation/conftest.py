import pytest

from franchise_valuation.domain.types import ValuationInput


def _make_inputs(**overrides) -> ValuationInput:
  """Helper to create ValuationInput with zeroed costs by default."""
  values = dict(
      initial_sales=1_000_000.0,
      sales_growth_rate=0.0,
      inflation_rate=0.0,
      discount_rate=10.0,
      years_remaining=2,
      pac_percentage=30.0,
      rent_percentage=10.0,
      service_fees_percentage=5.0,
      depreciation=0.0,
      interest=0.0,
      rent_index=0.0,
      miscellaneous=0.0,
      loan_payment=0.0,
      base_year=2024,
  )
  values.update(overrides)
  return ValuationInput(**values)


@pytest.fixture
def make_inputs():
  """Factory fixture for ValuationInput with keyword overrides."""
  return _make_inputs


@pytest.fixture
def flat_inputs() -> ValuationInput:
  """Two years, no growth or inflation, only percentage costs."""
  return _make_inputs()


@pytest.fixture
def restaurant_inputs() -> ValuationInput:
  """Realistic restaurant assumptions with every cost line populated."""
  return _make_inputs(
      initial_sales=2_454_919.0,
      sales_growth_rate=3.0,
      inflation_rate=1.5,
      discount_rate=21.0,
      years_remaining=10,
      pac_percentage=32.59,
      rent_percentage=11.47,
      service_fees_percentage=5.0,
      depreciation=72_092.0,
      interest=19_997.0,
      rent_index=75_925.0,
      miscellaneous=85_521.0,
      loan_payment=-31_478.0,
      base_year=2025,
  )

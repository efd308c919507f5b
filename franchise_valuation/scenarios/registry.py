"""
Scenario registry for mapping string names to scenario factories.

This lets CLIs and saved comparisons refer to scenarios by name while
still producing fresh ScenarioConfig instances.

To add a new scenario:
1. Add a classmethod preset to ScenarioConfig (or a lambda building one)
2. Register it in SCENARIOS

Example:
  SCENARIOS['high_inflation'] = lambda: ScenarioConfig(
      name='high_inflation', inflation_rate_modifier=3.0)
"""

from collections.abc import Callable

from franchise_valuation.scenarios.config import ScenarioConfig

SCENARIOS: dict[str, Callable[[], ScenarioConfig]] = {
    'base': ScenarioConfig.base,
    'optimistic': ScenarioConfig.optimistic,
    'pessimistic': ScenarioConfig.pessimistic,
}


def get_scenario(name: str) -> ScenarioConfig:
  """
  Create a scenario by name.

  Args:
    name: Registered scenario name

  Returns:
    New ScenarioConfig instance

  Raises:
    KeyError: If the name is not registered
  """
  try:
    factory = SCENARIOS[name]
  except KeyError as e:
    raise KeyError(f"Unknown scenario: '{name}'. "
                   f'Available: {list(SCENARIOS.keys())}') from e
  return factory()


def list_scenarios() -> list[str]:
  """List registered scenario names."""
  return list(SCENARIOS.keys())

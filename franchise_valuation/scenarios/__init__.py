"""Scenario configuration and registry."""

from franchise_valuation.scenarios.config import ScenarioConfig
from franchise_valuation.scenarios.registry import get_scenario
from franchise_valuation.scenarios.registry import list_scenarios
from franchise_valuation.scenarios.registry import SCENARIOS

__all__ = [
  'ScenarioConfig',
  'SCENARIOS',
  'get_scenario',
  'list_scenarios',
]

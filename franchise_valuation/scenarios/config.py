"""
Scenario configuration for valuation experiments.

ScenarioConfig is a serializable (JSON-friendly) configuration class that
shifts the base assumptions of a valuation by fixed rate modifiers, so one
set of restaurant inputs can be valued under base, optimistic and
pessimistic views.
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import replace
import json
from typing import Any

from franchise_valuation.domain.types import ValuationInput


@dataclass
class ScenarioConfig:
  """
  Configuration for a valuation scenario.

  Modifiers are percentage points added to the corresponding base rate
  (a growth_rate_modifier of 2.0 turns 3% growth into 5%).

  Attributes:
    name: Scenario name
    description: Human-readable description
    growth_rate_modifier: Added to sales_growth_rate
    discount_rate_modifier: Added to discount_rate
    inflation_rate_modifier: Added to inflation_rate
  """
  name: str = 'base'
  description: str = ''
  growth_rate_modifier: float = 0.0
  discount_rate_modifier: float = 0.0
  inflation_rate_modifier: float = 0.0

  @classmethod
  def base(cls) -> 'ScenarioConfig':
    """Base scenario: assumptions used as entered."""
    return cls(
        name='base',
        description='Assumptions as entered',
    )

  @classmethod
  def optimistic(cls) -> 'ScenarioConfig':
    """Faster sales growth and a lower required return."""
    return cls(
        name='optimistic',
        description='Accelerated growth with operating improvements',
        growth_rate_modifier=2.0,
        discount_rate_modifier=-2.0,
        inflation_rate_modifier=0.0,
    )

  @classmethod
  def pessimistic(cls) -> 'ScenarioConfig':
    """Slower growth, higher required return, higher cost inflation."""
    return cls(
        name='pessimistic',
        description='Slow growth under competitive pressure',
        growth_rate_modifier=-2.0,
        discount_rate_modifier=3.0,
        inflation_rate_modifier=1.0,
    )

  def apply(self, inputs: ValuationInput) -> ValuationInput:
    """
    Return a copy of inputs with this scenario's modifiers applied.

    Args:
      inputs: Base assumptions (not modified)

    Returns:
      New ValuationInput with shifted rates
    """
    return replace(
        inputs,
        sales_growth_rate=inputs.sales_growth_rate +
        self.growth_rate_modifier,
        discount_rate=inputs.discount_rate + self.discount_rate_modifier,
        inflation_rate=inputs.inflation_rate + self.inflation_rate_modifier,
    )

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ScenarioConfig':
    """Create from dictionary."""
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ScenarioConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

import json
import math
import sys
from unittest import mock

import pandas as pd
import pytest

from franchise_valuation.analysis.comparison import compare_scenarios
from franchise_valuation.analysis.comparison import main
from franchise_valuation.analysis.comparison import summarize
from franchise_valuation.scenarios.config import ScenarioConfig


class TestCompareScenarios:
  """Tests for compare_scenarios function."""

  def test_default_presets(self, restaurant_inputs):
    df = compare_scenarios(restaurant_inputs, [
        ScenarioConfig.base(),
        ScenarioConfig.optimistic(),
        ScenarioConfig.pessimistic(),
    ])

    assert list(df['scenario']) == ['base', 'optimistic', 'pessimistic']
    assert df.loc[0, 'variance_from_base'] == 0.0
    assert df.loc[0, 'variance_percentage'] == 0.0
    assert df.loc[1, 'final_valuation'] > df.loc[0, 'final_valuation']
    assert df.loc[2, 'final_valuation'] < df.loc[0, 'final_valuation']
    assert df.loc[1, 'discount_rate'] == pytest.approx(19.0)

  def test_variance_percentage(self, flat_inputs):
    """Variance relative to the first scenario.

    Base: 954,545.45 at 10%
    0% discount: 1,100,000 -> +145,454.55 = +15.24%
    """
    df = compare_scenarios(flat_inputs, [
        ScenarioConfig.base(),
        ScenarioConfig(name='no_discount', discount_rate_modifier=-10.0),
    ])

    assert df.loc[1, 'final_valuation'] == pytest.approx(1_100_000.0)
    assert df.loc[1, 'variance_from_base'] == pytest.approx(145_454.55,
                                                            abs=0.01)
    assert df.loc[1, 'variance_percentage'] == pytest.approx(15.238, abs=1e-3)

  def test_zero_base_value(self, make_inputs):
    """Zero reference valuation leaves percentage undefined."""
    inputs = make_inputs(initial_sales=0.0)
    df = compare_scenarios(inputs, [
        ScenarioConfig.base(),
        ScenarioConfig.optimistic(),
    ])

    assert df['variance_percentage'].isna().all()

  def test_empty(self, flat_inputs):
    with pytest.raises(ValueError, match='scenarios cannot be empty'):
      compare_scenarios(flat_inputs, [])


class TestSummarize:

  def test_stats(self):
    df = pd.DataFrame({'final_valuation': [100.0, 300.0, 200.0]})
    stats = summarize(df)

    assert stats == {
        'max_valuation': 300.0,
        'min_valuation': 100.0,
        'mean_valuation': 200.0,
    }


class TestMain:

  def test_exports_csv(self, flat_inputs, tmp_path):
    inputs_path = tmp_path / 'restaurant.json'
    inputs_path.write_text(json.dumps(flat_inputs.to_dict()),
                           encoding='utf-8')
    output = tmp_path / 'out' / 'comparison.csv'

    argv = [
        'comparison', '--inputs',
        str(inputs_path), '--scenarios', 'base', 'pessimistic', '--output',
        str(output)
    ]
    with mock.patch.object(sys, 'argv', argv):
      main()

    df = pd.read_csv(output)
    assert list(df['scenario']) == ['base', 'pessimistic']
    assert not math.isnan(df.loc[1, 'variance_percentage'])

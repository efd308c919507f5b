'''
Scenario comparison for a single restaurant.

This module provides tools to:
1. Value one restaurant under several scenarios at once
2. Measure each scenario's variance against the first (base) scenario
3. Export the comparison to CSV

Usage (CLI):
  python -m franchise_valuation.analysis.comparison \
    --inputs restaurant.json \
    --scenarios base optimistic pessimistic \
    --output results/comparison.csv

Usage (Python API):
  from franchise_valuation.analysis.comparison import compare_scenarios
  from franchise_valuation.scenarios.config import ScenarioConfig

  df = compare_scenarios(
    inputs,
    [ScenarioConfig.base(), ScenarioConfig.optimistic()],
  )
  df.to_csv('comparison.csv', index=False)
'''

import argparse
import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from franchise_valuation.domain.types import ValuationInput
from franchise_valuation.run import load_inputs
from franchise_valuation.run import run_valuation
from franchise_valuation.scenarios.config import ScenarioConfig
from franchise_valuation.scenarios.registry import get_scenario
from franchise_valuation.scenarios.registry import list_scenarios

logger = logging.getLogger(__name__)


def compare_scenarios(
    inputs: ValuationInput,
    scenarios: List[ScenarioConfig],
) -> pd.DataFrame:
  '''
  Value the same restaurant under each scenario.

  Args:
    inputs: Base restaurant assumptions
    scenarios: Scenarios to compare; the first is the reference

  Returns:
    DataFrame with columns:
    - scenario, description
    - sales_growth_rate, discount_rate, inflation_rate: rates used
    - final_valuation
    - variance_from_base: final_valuation minus the reference valuation
    - variance_percentage: variance as % of the reference (NaN if the
      reference valuation is 0)

  Raises:
    ValueError: If scenarios is empty
  '''
  if not scenarios:
    raise ValueError('scenarios cannot be empty')

  rows = []
  for config in scenarios:
    applied = config.apply(inputs)
    result = run_valuation(inputs, scenario=config)
    rows.append({
        'scenario': config.name,
        'description': config.description,
        'sales_growth_rate': applied.sales_growth_rate,
        'discount_rate': applied.discount_rate,
        'inflation_rate': applied.inflation_rate,
        'final_valuation': result.final_valuation,
    })

  df = pd.DataFrame(rows)
  base_value = df['final_valuation'].iloc[0]
  df['variance_from_base'] = df['final_valuation'] - base_value
  if base_value == 0:
    df['variance_percentage'] = float('nan')
  else:
    df['variance_percentage'] = (df['variance_from_base'] / abs(base_value) *
                                 100.0)
  return df


def summarize(df: pd.DataFrame) -> Dict[str, float]:
  '''Max, min and mean valuation across compared scenarios.'''
  values = df['final_valuation']
  return {
      'max_valuation': float(values.max()),
      'min_valuation': float(values.min()),
      'mean_valuation': float(values.mean()),
  }


def _print_summary(df: pd.DataFrame) -> None:
  '''Log comparison table and summary statistics.'''
  stats = summarize(df)

  logger.info('')
  logger.info('=' * 70)
  logger.info('Scenario Comparison')
  logger.info('=' * 70)
  for _, row in df.iterrows():
    logger.info('  %-12s %15s  (%+.1f%%)', row['scenario'],
                f'{row["final_valuation"]:,.0f}', row['variance_percentage'])
  logger.info('')
  logger.info('  Max:  %s', f'{stats["max_valuation"]:,.0f}')
  logger.info('  Min:  %s', f'{stats["min_valuation"]:,.0f}')
  logger.info('  Mean: %s', f'{stats["mean_valuation"]:,.0f}')
  logger.info('=' * 70)


def main() -> None:
  '''CLI entrypoint for scenario comparison.'''
  parser = argparse.ArgumentParser(
      description='Compare restaurant valuation across scenarios',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog=__doc__,
  )
  parser.add_argument('--inputs',
                      type=Path,
                      required=True,
                      help='JSON file with restaurant assumptions')
  parser.add_argument('--scenarios',
                      nargs='+',
                      default=list_scenarios(),
                      help='Scenario names; the first is the reference')
  parser.add_argument('--output', type=Path, help='Output CSV file path')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(asctime)s [%(levelname)s] %(message)s',
      datefmt='%Y-%m-%d %H:%M:%S',
  )

  inputs = load_inputs(args.inputs)
  scenarios = [get_scenario(name) for name in args.scenarios]

  df = compare_scenarios(inputs, scenarios)
  _print_summary(df)

  if args.output:
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    logger.info('Saved to: %s', args.output)


if __name__ == '__main__':
  main()

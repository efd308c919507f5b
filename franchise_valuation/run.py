'''
Single-restaurant valuation entrypoint.

This module provides the main entry point for running valuations. It:
1. Loads restaurant assumptions (JSON)
2. Applies a scenario's rate modifiers
3. Validates the inputs at the edge
4. Runs the DCF engine and returns the ValuationResult

Usage:
  from franchise_valuation.run import load_inputs, run_valuation
  from franchise_valuation.scenarios.config import ScenarioConfig

  inputs = load_inputs(Path('restaurant.json'))
  result = run_valuation(inputs, scenario=ScenarioConfig.optimistic())
  print(f"Valuation: {result.final_valuation:,.2f}")

CLI:
  python -m franchise_valuation.run --inputs restaurant.json \\
      --scenario pessimistic --valuation-date 2025-03-01 \\
      --output projections.csv
'''

import argparse
import json
import logging
from pathlib import Path
from typing import Optional

from franchise_valuation.dates import base_year_from_valuation_date
from franchise_valuation.domain.types import ValuationInput
from franchise_valuation.domain.types import ValuationResult
from franchise_valuation.engine.dcf import compute_restaurant_valuation
from franchise_valuation.scenarios.config import ScenarioConfig
from franchise_valuation.scenarios.registry import get_scenario
from franchise_valuation.scenarios.registry import list_scenarios
from franchise_valuation.validation import ensure_valid

logger = logging.getLogger(__name__)


def load_inputs(path: Path, base_year: Optional[int] = None) -> ValuationInput:
  '''
  Load restaurant assumptions from a JSON file.

  The file holds a single object keyed by ValuationInput field names
  (snake_case or the form's camelCase).

  Args:
    path: JSON file
    base_year: Calendar year of projection year 1; overrides any value in
      the file and is required when the file has none

  Raises:
    FileNotFoundError: If the file does not exist
    ValueError: If keys are missing or unknown
  '''
  if not path.exists():
    raise FileNotFoundError(f'Inputs file not found: {path}')

  with open(path, 'r', encoding='utf-8') as f:
    data = json.load(f)

  if base_year is not None:
    data.pop('baseYear', None)
    data['base_year'] = base_year
  return ValuationInput.from_dict(data)


def run_valuation(
    inputs: ValuationInput,
    scenario: Optional[ScenarioConfig] = None,
    validate: bool = True,
) -> ValuationResult:
  '''
  Value one restaurant under a scenario.

  Args:
    inputs: Base restaurant assumptions
    scenario: Rate modifiers to apply (default: none)
    validate: Whether to reject invalid inputs before computing

  Returns:
    ValuationResult from the DCF engine

  Raises:
    ValuationInputError: If validate is set and inputs are invalid
  '''
  if scenario is not None:
    inputs = scenario.apply(inputs)

  if validate:
    inputs = ensure_valid(inputs)

  result = compute_restaurant_valuation(inputs)

  logger.debug('Scenario %s: %d years at %.2f%% discount -> %.2f',
               scenario.name if scenario else 'none', inputs.years_remaining,
               inputs.discount_rate, result.final_valuation)
  return result


def main() -> None:
  '''CLI entrypoint.'''
  parser = argparse.ArgumentParser(description='Run restaurant DCF valuation')
  parser.add_argument('--inputs',
                      type=Path,
                      required=True,
                      help='JSON file with restaurant assumptions')
  parser.add_argument('--scenario',
                      type=str,
                      default='base',
                      choices=list_scenarios(),
                      help='Scenario preset')
  year_group = parser.add_mutually_exclusive_group()
  year_group.add_argument('--base-year',
                          type=int,
                          help='Calendar year of projection year 1')
  year_group.add_argument('--valuation-date',
                          type=str,
                          help='Valuation date (YYYY-MM-DD); its year is '
                          'used as projection year 1')
  parser.add_argument('--output',
                      type=Path,
                      help='Output CSV path for yearly projections')
  parser.add_argument('--verbose',
                      '-v',
                      action='store_true',
                      help='Verbose output')
  args = parser.parse_args()

  logging.basicConfig(
      level=logging.DEBUG if args.verbose else logging.INFO,
      format='%(message)s',
  )

  base_year = args.base_year
  if base_year is None and args.valuation_date:
    base_year = base_year_from_valuation_date(args.valuation_date)
  inputs = load_inputs(args.inputs, base_year=base_year)

  config = get_scenario(args.scenario)
  result = run_valuation(inputs, scenario=config)
  table = result.to_frame()

  separator = '=' * 70
  logger.info('\n%s', separator)
  logger.info('Restaurant DCF Valuation - %s', args.inputs.name)
  logger.info('Scenario: %s', config.name)
  logger.info(separator)

  applied = config.apply(inputs)
  logger.info('\nAssumptions:')
  logger.info('  Initial Sales: %s', f'{applied.initial_sales:,.0f}')
  logger.info('  Sales Growth: %.2f%%', applied.sales_growth_rate)
  logger.info('  Inflation: %.2f%%', applied.inflation_rate)
  logger.info('  Discount Rate: %.2f%%', applied.discount_rate)
  logger.info('  Years: %d (from %d)', applied.years_remaining,
              applied.base_year)

  logger.info('\nProjections:')
  logger.info('%s', table.to_string(float_format=lambda x: f'{x:,.0f}'))

  logger.info('\nValuation: %s', f'{result.final_valuation:,.2f}')
  logger.info('%s\n', separator)

  if args.output:
    table.to_csv(args.output)
    logger.info('Saved to: %s', args.output)


if __name__ == '__main__':
  main()

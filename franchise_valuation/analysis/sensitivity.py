"""
Sensitivity analysis for restaurant DCF valuation.

This module provides tools to generate 2D sensitivity tables that show
how the final valuation varies across different discount rates and
sales growth rates, holding every other assumption fixed.

CLI Usage:
  python -m franchise_valuation.analysis.sensitivity \\
      --inputs restaurant.json \\
      --discount-rates 8,10,12,14,16 \\
      --growth-rates 2,4,6,8,10
"""

import argparse
from dataclasses import replace
import logging
from pathlib import Path

import pandas as pd

from franchise_valuation.domain.types import ValuationInput
from franchise_valuation.engine.dcf import compute_restaurant_valuation
from franchise_valuation.run import load_inputs
from franchise_valuation.validation import ensure_valid

logger = logging.getLogger(__name__)


class SensitivityTableBuilder:
  """
  Build 2D sensitivity tables for restaurant valuation.

  Varies discount rate and sales growth rate while keeping costs, inflation
  and projection length from the base inputs.
  """

  def __init__(self, inputs: ValuationInput):
    """
    Initialize sensitivity table builder.

    Args:
        inputs: Base restaurant assumptions (validated here)
    """
    self.inputs = ensure_valid(inputs)

    logger.info('Initialized SensitivityTableBuilder')
    logger.info('  Initial sales: %.2f', inputs.initial_sales)
    logger.info('  Inflation: %.2f%%', inputs.inflation_rate)
    logger.info('  Years: %d', inputs.years_remaining)

  def build(
      self,
      discount_rates: list[float],
      growth_rates: list[float],
  ) -> pd.DataFrame:
    """
    Build 2D sensitivity table.

    Args:
        discount_rates: Discount rates in percent (e.g., [8, 10, 12])
        growth_rates: Sales growth rates in percent (e.g., [2, 4, 6])

    Returns:
        DataFrame with discount rates as index, growth rates as columns,
        and final valuations as cell values
    """
    if not discount_rates:
      raise ValueError('discount_rates cannot be empty')
    if not growth_rates:
      raise ValueError('growth_rates cannot be empty')

    logger.info('Building sensitivity table: %d x %d', len(discount_rates),
                len(growth_rates))

    data_rows = []

    for r in discount_rates:
      row_data = []
      for g in growth_rates:
        scenario_inputs = replace(self.inputs,
                                  discount_rate=r,
                                  sales_growth_rate=g)
        result = compute_restaurant_valuation(scenario_inputs)
        row_data.append(result.final_valuation)
      data_rows.append(row_data)

    df = pd.DataFrame(data_rows, index=discount_rates, columns=growth_rates)
    df.index.name = 'Discount Rate (%)'
    df.columns.name = 'Sales Growth (%)'

    logger.info('Sensitivity table built successfully')
    return df


def _parse_float_list(s: str) -> list[float]:
  """Parse comma-separated float list."""
  return [float(x.strip()) for x in s.split(',')]


def _frange(start: float, stop: float, step: float) -> list[float]:
  """
  Inclusive float range with rounding.

  Args:
      start: Start value
      stop: Stop value (inclusive)
      step: Step size

  Returns:
      List of floats from start to stop (inclusive)
  """
  if step <= 0:
    raise ValueError('step must be > 0')
  n = int(round((stop - start) / step))
  if n < 0:
    return []
  return [round(start + k * step, 12) for k in range(n + 1)]


def main() -> None:
  """CLI entrypoint for sensitivity analysis."""
  parser = argparse.ArgumentParser(
      description='Restaurant DCF Sensitivity Analysis',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  # Explicit rates
  python -m franchise_valuation.analysis.sensitivity \\
      --inputs restaurant.json \\
      --discount-rates 8,10,12 --growth-rates 2,4,6

  # Range specification
  python -m franchise_valuation.analysis.sensitivity \\
      --inputs restaurant.json \\
      --discount-min 8 --discount-max 16 --discount-step 2 \\
      --growth-min 0 --growth-max 10 --growth-step 2
      """)

  parser.add_argument('--inputs',
                      type=Path,
                      required=True,
                      help='JSON file with restaurant assumptions')

  # Option 1: Explicit lists
  parser.add_argument('--discount-rates',
                      type=str,
                      help='Comma-separated discount rates (e.g., 8,10,12)')
  parser.add_argument('--growth-rates',
                      type=str,
                      help='Comma-separated growth rates (e.g., 2,4,6)')

  # Option 2: Range specification
  parser.add_argument('--discount-min',
                      type=float,
                      help='Minimum discount rate')
  parser.add_argument('--discount-max',
                      type=float,
                      help='Maximum discount rate')
  parser.add_argument('--discount-step',
                      type=float,
                      default=1.0,
                      help='Discount rate step (default: 1)')

  parser.add_argument('--growth-min', type=float, help='Minimum growth rate')
  parser.add_argument('--growth-max', type=float, help='Maximum growth rate')
  parser.add_argument('--growth-step',
                      type=float,
                      default=1.0,
                      help='Growth rate step (default: 1)')

  parser.add_argument('--output', type=Path, help='Output CSV path (optional)')

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

  logger.info('Loading inputs from: %s', args.inputs)
  inputs = load_inputs(args.inputs)

  if args.discount_rates:
    discount_rates = _parse_float_list(args.discount_rates)
  elif args.discount_min is not None and args.discount_max is not None:
    discount_rates = _frange(args.discount_min, args.discount_max,
                             args.discount_step)
  else:
    discount_rates = [8.0, 10.0, 12.0, 14.0, 16.0]
    logger.warning('No discount rates specified, using default: %s',
                   discount_rates)

  if args.growth_rates:
    growth_rates = _parse_float_list(args.growth_rates)
  elif args.growth_min is not None and args.growth_max is not None:
    growth_rates = _frange(args.growth_min, args.growth_max, args.growth_step)
  else:
    growth_rates = [2.0, 4.0, 6.0, 8.0, 10.0]
    logger.warning('No growth rates specified, using default: %s', growth_rates)

  builder = SensitivityTableBuilder(inputs)
  table = builder.build(discount_rates=discount_rates,
                        growth_rates=growth_rates)

  print('\n' + '=' * 80)
  print(f'Sensitivity Analysis: {args.inputs.name}')
  print('=' * 80)
  print(f'Initial Sales: {inputs.initial_sales:,.0f}')
  print(f'Inflation: {inputs.inflation_rate:.2f}%')
  print(f'Projection Years: {inputs.years_remaining}')
  print('\n' + '=' * 80)
  print('Final Valuation')
  print('=' * 80)
  print(table.to_string(float_format=lambda x: f'{x:,.0f}'))
  print('=' * 80 + '\n')

  if args.output:
    table.to_csv(args.output)
    logger.info('Saved to: %s', args.output)


if __name__ == '__main__':
  main()

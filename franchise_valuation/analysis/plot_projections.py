'''
Chart the yearly projection of a restaurant valuation.

Plots sales, store operating income and free cash flow per year, with the
final valuation in a summary box.

Usage:
  python -m franchise_valuation.analysis.plot_projections \\
      --inputs restaurant.json --scenario base \\
      --output charts/restaurant.png
'''

import argparse
import logging
from pathlib import Path

import matplotlib.pyplot as plt

from franchise_valuation.domain.types import ValuationResult
from franchise_valuation.run import load_inputs
from franchise_valuation.run import run_valuation
from franchise_valuation.scenarios.registry import get_scenario
from franchise_valuation.scenarios.registry import list_scenarios

logger = logging.getLogger(__name__)


def plot_projections(
    result: ValuationResult,
    output_path: Path,
    title: str = 'Restaurant Projection',
) -> None:
  '''
  Save a line chart of the yearly projection.

  Args:
      result: Valuation to plot
      output_path: PNG destination
      title: Chart title

  Raises:
      ValueError: If the result has no projected years
  '''
  if not result.yearly_projections:
    raise ValueError('No projected years to plot')

  table = result.to_frame()

  _, ax = plt.subplots(figsize=(14, 8))

  ax.plot(table.index,
          table['sales'],
          'o-',
          label='Sales',
          linewidth=2,
          markersize=6,
          alpha=0.8)
  ax.plot(table.index,
          table['soi'],
          's-',
          label='S.O.I.',
          linewidth=2,
          markersize=6,
          alpha=0.8)
  ax.plot(table.index,
          table['free_cash_flow'],
          'D-',
          label='Free Cash Flow',
          linewidth=2.5,
          markersize=7,
          color='red',
          alpha=0.9)

  ax.set_xlabel('Year', fontsize=12, fontweight='bold')
  ax.set_ylabel('Amount', fontsize=12, fontweight='bold')
  ax.set_title(title, fontsize=14, fontweight='bold', pad=20)
  ax.legend(loc='best', fontsize=11, framealpha=0.9)
  ax.grid(True, alpha=0.3, linestyle='--')

  first_year = int(table.index[0])
  last_year = int(table.index[-1])
  stats_text = (f'{first_year}-{last_year}:\n'
                f'  Total FCF:  {sum(result.projected_cash_flows):,.0f}\n'
                f'  Valuation:  {result.final_valuation:,.0f}')

  ax.text(0.02,
          0.98,
          stats_text,
          transform=ax.transAxes,
          verticalalignment='top',
          fontsize=10,
          bbox=dict(boxstyle='round', facecolor='lightblue', alpha=0.8))

  plt.tight_layout()

  output_path.parent.mkdir(parents=True, exist_ok=True)
  plt.savefig(output_path, dpi=150, bbox_inches='tight')
  logger.info('Saved: %s', output_path)

  plt.close()


def main() -> None:
  '''CLI entrypoint for projection charts.'''
  parser = argparse.ArgumentParser(
      description='Plot restaurant valuation projections')
  parser.add_argument('--inputs',
                      type=Path,
                      required=True,
                      help='JSON file with restaurant assumptions')
  parser.add_argument('--scenario',
                      default='base',
                      choices=list_scenarios(),
                      help='Scenario preset')
  parser.add_argument('--output',
                      type=Path,
                      default=Path('output/charts/projection.png'),
                      help='Output PNG path')
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
  config = get_scenario(args.scenario)
  result = run_valuation(inputs, scenario=config)

  plot_projections(result,
                   args.output,
                   title=f'{args.inputs.stem} - {config.name} scenario')


if __name__ == '__main__':
  main()

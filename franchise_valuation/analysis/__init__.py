'''
Valuation analysis utilities.

Note: To avoid RuntimeWarning when using -m flag, import directly:
  from franchise_valuation.analysis.comparison import compare_scenarios
  from franchise_valuation.analysis.plot_projections import plot_projections
  from franchise_valuation.analysis.sensitivity import SensitivityTableBuilder
'''

__all__ = [
    'compare_scenarios',
    'plot_projections',
    'SensitivityTableBuilder',
]

# Direct imports for convenience (may cause RuntimeWarning with -m flag)
from franchise_valuation.analysis.comparison import compare_scenarios
from franchise_valuation.analysis.plot_projections import plot_projections
from franchise_valuation.analysis.sensitivity import SensitivityTableBuilder

'''
Franchise restaurant valuation framework.

This package values a franchise restaurant with a multi-year discounted
cash flow projection of store operating income. The engine is a pure
function; scenarios, validation, sensitivity tables and charts are built
around it.

Usage:
  from franchise_valuation.run import load_inputs, run_valuation
  from franchise_valuation.scenarios.config import ScenarioConfig

  inputs = load_inputs(Path('restaurant.json'))
  result = run_valuation(inputs, scenario=ScenarioConfig.base())
  print(result.to_frame())
'''

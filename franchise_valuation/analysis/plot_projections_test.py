import pytest

from franchise_valuation.analysis.plot_projections import plot_projections
from franchise_valuation.domain.types import ValuationResult
from franchise_valuation.engine.dcf import compute_restaurant_valuation


class TestPlotProjections:

  def test_saves_png(self, restaurant_inputs, tmp_path):
    result = compute_restaurant_valuation(restaurant_inputs)
    output = tmp_path / 'charts' / 'projection.png'

    plot_projections(result, output, title='Test')

    assert output.exists()
    assert output.stat().st_size > 0

  def test_empty_result(self, tmp_path):
    with pytest.raises(ValueError, match='No projected years'):
      plot_projections(ValuationResult(final_valuation=0.0),
                       tmp_path / 'empty.png')

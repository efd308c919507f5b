'''
Franchise date helpers.

Converts the franchise change date and end date into the number of years
left on the franchise, and a valuation date into the calendar year that
anchors the projection.
'''

import math
from typing import Optional, Union

import pandas as pd

DateLike = Union[str, pd.Timestamp]

DAYS_PER_YEAR = 365.25


def calculate_remaining_years(
    change_date: Optional[DateLike],
    franchise_end_date: Optional[DateLike],
) -> float:
  '''
  Years between the change date and the franchise end date.

  Args:
    change_date: Date the restaurant changes hands (YYYY-MM-DD)
    franchise_end_date: Date the franchise agreement ends (YYYY-MM-DD)

  Returns:
    Fractional years rounded to 4 decimals, or 0.0 if either date is
    missing or the end date is not after the change date
  '''
  if not change_date or not franchise_end_date:
    return 0.0

  start = pd.Timestamp(change_date)
  end = pd.Timestamp(franchise_end_date)
  if end <= start:
    return 0.0

  diff_days = (end - start) / pd.Timedelta(days=1)
  return round(diff_days / DAYS_PER_YEAR, 4)


def projection_years(remaining_years: float) -> int:
  '''Whole projection years covered by the remaining franchise term.'''
  if not remaining_years > 0:
    return 0
  return int(math.floor(remaining_years))


def base_year_from_valuation_date(valuation_date: DateLike) -> int:
  '''Calendar year of the valuation date, used as projection year 1.'''
  return pd.Timestamp(valuation_date).year

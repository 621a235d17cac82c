# =============================================================================
# utils/charts.py
# =============================================================================
# PURPOSE:
#   Builds the data behind the performance charts as pandas DataFrames:
#   - Daily earnings for every day of the browsed month (bar chart)
#   - Monthly earnings for the last 12 months (line chart)
#
#   Drawing the charts is someone else's job. These functions only produce
#   the numbers, one row per bar/point.
# =============================================================================

from datetime import date

import pandas as pd

from config import CHART_MONTHS, MONTH_ABBREVIATIONS, PERIOD_MONTH
from .calculations import calculate_entry_total
from .periods import calculate_window_totals, get_month_key, period_days


def _shift_month(year, month, offset):
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def month_label(year, month):
    """Short label like 'mar/24'."""
    return f"{MONTH_ABBREVIATIONS[month - 1]}/{year % 100:02d}"


def daily_earnings_series(all_data, ref_date):
    """
    Earnings per day of ref_date's month.

    RETURNS:
        pd.DataFrame with columns day, earnings; one row for each calendar
        day (28-31 rows). Days without an entry show 0.
    """
    month_data = (all_data or {}).get(get_month_key(ref_date), {})
    rows = []
    for day in period_days(ref_date, PERIOD_MONTH):
        entry = month_data.get(day, month_data.get(str(day)))
        rows.append({"day": day, "earnings": calculate_entry_total(entry).earnings})
    return pd.DataFrame(rows, columns=["day", "earnings"])


def monthly_earnings_series(all_data, ref_date, months=CHART_MONTHS):
    """
    Total earnings per month, oldest first, ending with ref_date's month.

    RETURNS:
        pd.DataFrame with columns month_key, label, earnings
    """
    all_data = all_data or {}
    rows = []
    for offset in range(-(months - 1), 1):
        year, month = _shift_month(ref_date.year, ref_date.month, offset)
        key = f"{year}-{month}"
        # Same days 1..last-day window as the month summary
        earnings = calculate_window_totals(all_data, date(year, month, 1), PERIOD_MONTH).total.earnings
        rows.append({"month_key": key, "label": month_label(year, month), "earnings": earnings})
    return pd.DataFrame(rows, columns=["month_key", "label", "earnings"])

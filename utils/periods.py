# =============================================================================
# utils/periods.py
# =============================================================================
# PURPOSE:
#   Decides which stored days belong to a period and totals them.
#   Every view (day summary, quinzena summary, month total, history list)
#   goes through the functions here so they all cut the calendar the same way.
#
# PERIODS:
#   - day:         the single day of the reference date
#   - quinzena 1:  days 1..15
#   - quinzena 2:  days 16..last day of the month (28-31)
#   - month:       days 1..last day of the month
#
# KEYS:
#   month key:     "YYYY-M"    (month NOT zero padded, 1 = January)
#   quinzena key:  "YYYY-M-Q"  (Q is 1 or 2)
#
# DATA IN:
#   all_data is {month_key: {day: record}}. It is only read, never changed.
# =============================================================================

import calendar
import logging
from datetime import date

import pandas as pd

from config import (
    PERIOD_DAY,
    PERIOD_KINDS,
    PERIOD_MONTH,
    PERIOD_QUINZENA_1,
    PERIOD_QUINZENA_2,
    QUINZENA_ORDERS,
    QUINZENA_SPLIT_DAY,
)
from .calculations import calculate_period_totals
from .records import HistoryRow

logger = logging.getLogger(__name__)


# =============================================================================
# KEYS AND CALENDAR HELPERS
# =============================================================================

def get_month_key(d):
    return f"{d.year}-{d.month}"


def parse_month_key(key):
    """
    Split "YYYY-M" into (year, month) integers.

    Raises ValueError if the key is not two integers joined by "-" or the
    month is outside 1..12.
    """
    parts = str(key).split("-")
    if len(parts) != 2:
        raise ValueError(f"Invalid month key: {key!r}")
    try:
        year, month = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid month key: {key!r}") from None
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month in key: {key!r}")
    return year, month


def get_quinzena(d):
    return 1 if d.day <= QUINZENA_SPLIT_DAY else 2


def get_quinzena_key(year, month, quinzena):
    _check_quinzena(quinzena)
    return f"{year}-{month}-{quinzena}"


def days_in_month(year, month):
    return calendar.monthrange(year, month)[1]


def _check_quinzena(quinzena):
    if quinzena not in (1, 2):
        raise ValueError(f"Quinzena must be 1 or 2, got {quinzena!r}")


def quinzena_days(year, month, quinzena):
    _check_quinzena(quinzena)
    if quinzena == 1:
        return range(1, QUINZENA_SPLIT_DAY + 1)
    return range(QUINZENA_SPLIT_DAY + 1, days_in_month(year, month) + 1)


def period_days(ref_date, period):
    """
    Day numbers inside a period window around ref_date.

    EXAMPLE:
        period_days(date(2024, 2, 10), "quinzena_2") → range(16, 30)   (leap year)
        period_days(date(2024, 4, 10), "month")      → range(1, 31)
    """
    if period not in PERIOD_KINDS:
        raise ValueError(f"Unknown period kind: {period!r}, expected one of {PERIOD_KINDS}")
    year, month = ref_date.year, ref_date.month
    if period == PERIOD_DAY:
        return range(ref_date.day, ref_date.day + 1)
    if period == PERIOD_QUINZENA_1:
        return quinzena_days(year, month, 1)
    if period == PERIOD_QUINZENA_2:
        return quinzena_days(year, month, 2)
    return range(1, days_in_month(year, month) + 1)


def quinzena_period(quinzena):
    _check_quinzena(quinzena)
    return PERIOD_QUINZENA_1 if quinzena == 1 else PERIOD_QUINZENA_2


# =============================================================================
# SLICING
# =============================================================================

def _entries_for_days(month_data, days):
    # Day keys may be int or the string form of an int (how JSON stores them).
    month_data = month_data or {}
    entries = []
    for day in days:
        entry = month_data.get(day, month_data.get(str(day)))
        if entry is not None:
            entries.append(entry)
    return entries


def slice_period(month_data, ref_date, period):
    """
    Records of one month that fall inside the window, in day order.
    Days without an entry are skipped.
    """
    return _entries_for_days(month_data, period_days(ref_date, period))


def get_period_entries(all_data, ref_date, period):
    month_data = (all_data or {}).get(get_month_key(ref_date), {})
    return slice_period(month_data, ref_date, period)


def calculate_window_totals(all_data, ref_date, period):
    return calculate_period_totals(get_period_entries(all_data, ref_date, period))


def summarize_date(all_data, ref_date):
    """
    Day, quinzena and month breakdowns for the date being browsed.

    RETURNS:
        dict with:
            - daily: DetailedTotal for ref_date
            - quinzena: DetailedTotal for the quinzena ref_date falls in
            - quinzena_number: 1 or 2
            - monthly: DetailedTotal for the whole month
    """
    quinzena = get_quinzena(ref_date)
    return {
        "daily": calculate_window_totals(all_data, ref_date, PERIOD_DAY),
        "quinzena": calculate_window_totals(all_data, ref_date, quinzena_period(quinzena)),
        "quinzena_number": quinzena,
        "monthly": calculate_window_totals(all_data, ref_date, PERIOD_MONTH),
    }


# =============================================================================
# HISTORY
# =============================================================================

def is_quinzena_closed(year, month, quinzena, today=None):
    """
    Has this quinzena ended before today?

    RULES:
        - Any month before today's month: both quinzenas closed
        - Today's month: quinzena 1 closed once today is past day 15,
          quinzena 2 never
        - Future months: open

    `today` is the wall-clock date, not the date being browsed.
    """
    _check_quinzena(quinzena)
    today = today or date.today()
    if (year, month) < (today.year, today.month):
        return True
    if (year, month) == (today.year, today.month):
        return quinzena == 1 and today.day > QUINZENA_SPLIT_DAY
    return False


def build_history(all_data, today=None, expenses=None, quinzena_order="desc"):
    """
    List of closed quinzenas that have deliveries, newest month first.

    PARAMETERS:
        all_data (dict): {month_key: {day: record}}
        today (date): wall-clock date used for the "closed" test
                      (defaults to date.today())
        expenses (dict): optional {quinzena_key: amount}; when given each row
                         carries its expense and net = earnings - expense
        quinzena_order (str): "desc" lists quinzena 2 before 1 inside a month,
                              "asc" lists 1 before 2

    RETURNS:
        list[HistoryRow]

    HOW IT WORKS:
        1. Parse month keys and sort by (year, month), newest first.
           Keys are not zero padded, so string order would put "2024-9"
           before "2024-10".
        2. For each closed quinzena total the days.
        3. Drop quinzenas with zero deliveries.
    """
    if quinzena_order not in QUINZENA_ORDERS:
        raise ValueError(f"quinzena_order must be one of {QUINZENA_ORDERS}, got {quinzena_order!r}")
    today = today or date.today()

    months = []
    for key, month_data in (all_data or {}).items():
        try:
            year, month = parse_month_key(key)
        except ValueError:
            logger.warning("Skipping unparseable month key %r", key)
            continue
        months.append((year, month, key, month_data or {}))
    months.sort(key=lambda m: (m[0], m[1]), reverse=True)

    order = (2, 1) if quinzena_order == "desc" else (1, 2)
    rows = []
    for year, month, key, month_data in months:
        for quinzena in order:
            if not is_quinzena_closed(year, month, quinzena, today):
                continue
            entries = _entries_for_days(month_data, quinzena_days(year, month, quinzena))
            total = calculate_period_totals(entries).total
            earnings, count = total.earnings, total.count
            if count <= 0:
                continue
            quinzena_key = get_quinzena_key(year, month, quinzena)
            expense = 0.0
            if expenses is not None:
                expense = expenses.get(quinzena_key, 0.0) or 0.0
            rows.append(HistoryRow(
                month_key=key,
                year=year,
                month=month,
                quinzena=quinzena,
                quinzena_key=quinzena_key,
                label=f"{quinzena}ª Quinzena {month}/{year}",
                count=count,
                earnings=earnings,
                expense=expense,
                net=earnings - expense,
            ))
    return rows


def history_to_frame(rows):
    """History rows as a DataFrame (one row per quinzena, same order)."""
    columns = [
        "month_key", "year", "month", "quinzena", "quinzena_key",
        "label", "count", "earnings", "expense", "net",
    ]
    if not rows:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([row.to_dict() for row in rows], columns=columns)

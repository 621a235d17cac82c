# =============================================================================
# utils/snapshots.py
# =============================================================================
# PURPOSE:
#   Builds NEW snapshots of the stored data after a user edit.
#   Nothing here changes the dictionaries it is given: every function returns
#   a fresh copy with the change applied, which the caller then saves.
#
# WHAT LIVES HERE:
#   - Input clamping for the entry form (negative / junk → 0)
#   - Which tiers a carrier's form exposes
#   - Saving or deleting one day
#   - Setting the expense of one quinzena
# =============================================================================

from config import SINGLE_TIER_CARRIERS, TIER_NORMAL, TIERS
from .calculations import migrate_entry
from .periods import get_month_key, get_quinzena_key
from .records import DailyEntry


def clamp_count(value):
    """
    Coerce a typed-in count to a non-negative int.

    EXAMPLE:
        clamp_count("12")  → 12
        clamp_count("-3")  → 0
        clamp_count("abc") → 0
        clamp_count(None)  → 0
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return 0
    return max(0, number)


def editable_tiers(carrier):
    if carrier in SINGLE_TIER_CARRIERS:
        return (TIER_NORMAL,)
    return TIERS


def apply_form_value(entry, carrier, tier, value):
    """
    Return a copy of the day with one field replaced by the clamped value.

    The day is migrated first, so a legacy day comes back in the current
    shape. Editing "express" on a single-tier carrier raises ValueError.
    """
    if tier not in editable_tiers(carrier):
        raise ValueError(f"{carrier!r} has no editable {tier!r} tier")
    day = migrate_entry(entry)
    counts = dict(day.counts)
    counts[carrier] = day.get(carrier).replace(tier, clamp_count(value))
    return DailyEntry(counts)


def upsert_day_entry(all_data, d, entry):
    """New all_data with the record for date d replaced (or added)."""
    key = get_month_key(d)
    new_data = dict(all_data or {})
    month_data = {
        k: v for k, v in new_data.get(key, {}).items()
        if k != d.day and k != str(d.day)
    }
    month_data[d.day] = entry
    new_data[key] = month_data
    return new_data


def delete_day_entry(all_data, d):
    """
    New all_data without the record for date d.

    If that was the month's last day, the month key goes too.
    """
    key = get_month_key(d)
    new_data = dict(all_data or {})
    if key not in new_data:
        return new_data
    month_data = {
        k: v for k, v in new_data[key].items()
        if k != d.day and k != str(d.day)
    }
    if month_data:
        new_data[key] = month_data
    else:
        del new_data[key]
    return new_data


def set_expense(expenses, year, month, quinzena, amount):
    new_expenses = dict(expenses or {})
    new_expenses[get_quinzena_key(year, month, quinzena)] = amount
    return new_expenses

# =============================================================================
# importers/snapshot_importer.py
# =============================================================================
# PURPOSE:
#   Reads the stored JSON blob of the app into typed snapshots.
#
# STORED FORMAT:
#   {
#     "allData":     {"2024-3": {"20": {"flash": {"normal": 10, "express": 0}, ...}}},
#     "expenseData": {"2024-3-2": 85.5}
#   }
#   A file holding only the "allData" mapping (no wrapper) is accepted too.
#
# WHAT THIS IMPORTER DOES:
#   1. Loads the JSON (file path or file-like object)
#   2. Checks month keys ("YYYY-M") and day keys (1..31)
#      - "2024-03" is stored as "2024-3" (same for expense keys)
#      - a day or expense seen twice keeps the first one and is reported
#   3. Coerces counts to numbers (numeric strings allowed, junk → 0)
#   4. Decides legacy vs current shape for each day (utils.parse_entry)
#   5. Reports errors and skipped entries instead of failing
#
#   Nothing is written back; export_snapshot() builds the JSON-ready dict
#   for whoever stores it.
# =============================================================================

import json
import logging
from collections.abc import Mapping

from config import CARRIERS, TIERS
from utils.periods import days_in_month, get_quinzena_key, parse_month_key
from utils.records import LEGACY_FLAG, entry_to_raw, parse_entry

logger = logging.getLogger(__name__)

ALL_DATA_KEY = "allData"
EXPENSE_DATA_KEY = "expenseData"


def _safe_number(value, default=0):
    """
    Convert a stored value to int/float.
    Returns (number, ok). ok is False when the default had to be used.
    """
    if value is None:
        return default, True
    if isinstance(value, bool):
        return default, False
    if isinstance(value, (int, float)):
        return value, True
    try:
        cleaned = str(value).replace(",", ".").strip()
        if cleaned == "":
            return default, True
        number = float(cleaned)
        return (int(number) if number.is_integer() else number), True
    except (ValueError, TypeError):
        return default, False


class SnapshotImporter:
    """
    Loads an earnings snapshot from JSON.

    USAGE:
        importer = SnapshotImporter("earnings.json")
        success, message, count = importer.import_snapshot()
        if success:
            all_data = importer.all_data
            expenses = importer.expenses

    ATTRIBUTES:
        source: file path or file-like object
        all_data: {month_key: {day (int): DailyEntry | LegacyDailyEntry}}
        expenses: {quinzena_key: amount}
        errors: values that could not be read (kept as 0)
        skipped: keys that were dropped, with the reason
    """

    def __init__(self, source):
        self.source = source
        self.all_data = {}
        self.expenses = {}
        self.errors = []
        self.skipped = []

    def import_snapshot(self):
        """
        Parse the blob.

        RETURNS:
            tuple: (success: bool, message: str, count: int)
            - count is the number of day records read
        """
        try:
            blob = self._load_json()
        except (OSError, ValueError) as e:
            logger.error("Could not read snapshot %r: %s", self.source, e)
            return False, f"Could not read snapshot: {e}", 0

        if not isinstance(blob, Mapping):
            return False, "Snapshot must be a JSON object", 0

        if ALL_DATA_KEY in blob or EXPENSE_DATA_KEY in blob:
            raw_data = blob.get(ALL_DATA_KEY) or {}
            raw_expenses = blob.get(EXPENSE_DATA_KEY) or {}
        else:
            raw_data = blob
            raw_expenses = {}

        self.all_data = self._parse_all_data(raw_data)
        self.expenses = self._parse_expenses(raw_expenses)

        count = sum(len(days) for days in self.all_data.values())
        logger.info(
            "Read %d day(s) across %d month(s), %d expense(s)",
            count, len(self.all_data), len(self.expenses),
        )

        message_parts = [f"Read {count} day(s) in {len(self.all_data)} month(s)"]
        if self.errors:
            message_parts.append(f"{len(self.errors)} errors")
        if self.skipped:
            message_parts.append(f"{len(self.skipped)} skipped")
        return True, ", ".join(message_parts), count

    # -------------------------------------------------------------------------
    # PARSING
    # -------------------------------------------------------------------------

    def _load_json(self):
        if hasattr(self.source, "read"):
            return json.load(self.source)
        with open(self.source, "r", encoding="utf-8") as f:
            return json.load(f)

    def _parse_all_data(self, raw_data):
        all_data = {}
        if not isinstance(raw_data, Mapping):
            self.skipped.append(f"{ALL_DATA_KEY}: not an object")
            return all_data

        for month_key, raw_month in raw_data.items():
            try:
                year, month = parse_month_key(month_key)
            except ValueError as e:
                self.skipped.append(f"{month_key}: {e}")
                logger.warning("Skipping month %r: %s", month_key, e)
                continue
            if not isinstance(raw_month, Mapping):
                self.skipped.append(f"{month_key}: month is not an object")
                continue

            # "2024-03" and "2024-3" are the same month; keep the unpadded key
            # every lookup uses and merge the days into it.
            canonical_key = f"{year}-{month}"
            if canonical_key != month_key:
                logger.info("Month key %r stored as %r", month_key, canonical_key)

            last_day = days_in_month(year, month)
            month_data = all_data.get(canonical_key, {})
            for day_key, raw_entry in raw_month.items():
                day = self._parse_day(month_key, day_key, last_day)
                if day is None:
                    continue
                if not isinstance(raw_entry, Mapping):
                    self.skipped.append(f"{month_key}/{day_key}: entry is not an object")
                    continue
                if day in month_data:
                    self.skipped.append(f"{month_key}/{day_key}: day {day} already read, duplicate ignored")
                    logger.warning("Duplicate day %s/%s ignored", canonical_key, day)
                    continue
                cleaned = self._clean_entry(f"{canonical_key}/{day}", raw_entry)
                month_data[day] = parse_entry(cleaned)

            if month_data:
                all_data[canonical_key] = month_data
        return all_data

    def _parse_day(self, month_key, day_key, last_day):
        try:
            day = int(day_key)
        except (TypeError, ValueError):
            self.skipped.append(f"{month_key}/{day_key}: day is not a number")
            return None
        if not 1 <= day <= last_day:
            self.skipped.append(f"{month_key}/{day_key}: day outside the month")
            return None
        return day

    def _clean_entry(self, where, raw_entry):
        """Copy of the stored day with every count coerced to a number."""
        cleaned = {}
        is_legacy = isinstance(raw_entry.get(LEGACY_FLAG), bool)
        if is_legacy:
            cleaned[LEGACY_FLAG] = raw_entry[LEGACY_FLAG]

        for carrier in CARRIERS:
            if carrier not in raw_entry:
                continue
            value = raw_entry[carrier]
            if is_legacy:
                cleaned[carrier] = self._number(f"{where}/{carrier}", value)
                continue
            if not isinstance(value, Mapping):
                self.errors.append(f"{where}/{carrier}: expected tier counts, got {value!r}")
                logger.warning("Bad tier counts at %s/%s: %r", where, carrier, value)
                continue
            cleaned[carrier] = {
                tier: self._number(f"{where}/{carrier}/{tier}", value.get(tier))
                for tier in TIERS
            }
        return cleaned

    def _number(self, where, value):
        number, ok = _safe_number(value)
        if not ok:
            self.errors.append(f"{where}: {value!r} is not a number")
            logger.warning("Non-numeric value at %s: %r", where, value)
        return number

    def _parse_expenses(self, raw_expenses):
        expenses = {}
        if not isinstance(raw_expenses, Mapping):
            self.skipped.append(f"{EXPENSE_DATA_KEY}: not an object")
            return expenses
        for key, value in raw_expenses.items():
            parts = str(key).split("-")
            if len(parts) != 3 or parts[2] not in ("1", "2"):
                self.skipped.append(f"{key}: not a quinzena key")
                continue
            try:
                year, month = parse_month_key(f"{parts[0]}-{parts[1]}")
            except ValueError as e:
                self.skipped.append(f"{key}: {e}")
                continue
            canonical_key = get_quinzena_key(year, month, int(parts[2]))
            if canonical_key in expenses:
                self.skipped.append(f"{key}: quinzena {canonical_key} already read, duplicate ignored")
                logger.warning("Duplicate expense %s ignored", canonical_key)
                continue
            expenses[canonical_key] = self._number(f"{EXPENSE_DATA_KEY}/{key}", value)
        return expenses


def export_snapshot(all_data, expenses=None):
    """
    JSON-ready dict for storage. Day keys become strings, records go back
    to their stored shape (legacy days stay legacy).
    """
    raw_data = {}
    for month_key, month_data in (all_data or {}).items():
        raw_data[month_key] = {
            str(day): entry_to_raw(parse_entry(entry))
            for day, entry in month_data.items()
            if entry is not None
        }
    return {ALL_DATA_KEY: raw_data, EXPENSE_DATA_KEY: dict(expenses or {})}

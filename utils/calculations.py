# =============================================================================
# utils/calculations.py
# =============================================================================
# PURPOSE:
#   Turns delivery counts into money. These functions decide:
#   - What a stored day looks like in the current shape (migration)
#   - How much one day earned
#   - How much a set of days earned, split into normal vs express
#
# BUSINESS RULES:
#   earnings = sum over carriers and tiers of (count x RATES[tier][carrier])
#   Rates come from config.RATES. Change a rate there and every total moves.
#
# NO VALIDATION HERE:
#   Negative or odd counts are clamped where the user types them
#   (see utils/snapshots.py), not here. These functions do the arithmetic on
#   whatever they are given and never raise on data.
# =============================================================================

from typing import NamedTuple

from config import CARRIERS, RATES, TIER_EXPRESS, TIER_NORMAL, TIERS
from .records import (
    DailyEntry,
    DeliveryCount,
    DetailedTotal,
    LegacyDailyEntry,
    TierTotal,
    empty_entry,
    parse_entry,
)


class EntryTotal(NamedTuple):
    earnings: float
    count: int


def get_rate(carrier, tier):
    """Rate per delivery for a (carrier, tier) pair."""
    return RATES[tier.upper()][carrier]


def migrate_entry(entry):
    """
    Bring a stored day into the current shape.

    PARAMETERS:
        entry: DailyEntry, LegacyDailyEntry, a raw stored mapping, or None

    RETURNS:
        DailyEntry with every carrier present

    RULES:
        - None / current shape: laid over an all-zero skeleton so every
          carrier exists. Counts are kept exactly as given.
        - Legacy shape: each carrier's count goes to "express" when the day
          was flagged express, otherwise to "normal". The other tier is 0.

    Migrating a current record again returns an equal record.

    EXAMPLE:
        migrate_entry({"flash": 5, "interlog": 3, "ecommerce": 0, "isExpress": True})
        → flash express=5, interlog express=3, ecommerce 0/0
    """
    record = parse_entry(entry)
    skeleton = empty_entry()

    if record is None:
        return skeleton

    if isinstance(record, LegacyDailyEntry):
        counts = {}
        for carrier in CARRIERS:
            value = record.get(carrier)
            if record.is_express:
                counts[carrier] = DeliveryCount(normal=0, express=value)
            else:
                counts[carrier] = DeliveryCount(normal=value, express=0)
        return DailyEntry(counts)

    counts = dict(skeleton.counts)
    counts.update(record.counts)
    return DailyEntry(counts)


def calculate_entry_total(entry):
    """
    Earnings and delivery count for a single day.

    RETURNS:
        EntryTotal(earnings, count); (0, 0) for an absent day

    EXAMPLE:
        With flash at 1.50 normal / 2.00 express:
        {"flash": {"normal": 10, "express": 2}} → EntryTotal(19.0, 12)
    """
    if entry is None:
        return EntryTotal(0, 0)

    day = migrate_entry(entry)
    earnings = 0
    count = 0
    for carrier in CARRIERS:
        counts = day.get(carrier)
        for tier in TIERS:
            earnings += counts.get(tier) * get_rate(carrier, tier)
            count += counts.get(tier)
    return EntryTotal(earnings, count)


def calculate_period_totals(entries):
    """
    Totals for any set of days, split by tier.

    PARAMETERS:
        entries: iterable of day records (either shape). None items are skipped.

    RETURNS:
        DetailedTotal with normal, express and total buckets.
        An empty input gives all zeros.

    Money is summed as float, so reordering the input can move the last
    decimal place of a very long sum. Counts are exact.
    """
    normal_count = express_count = 0
    normal_earnings = express_earnings = 0

    for entry in entries:
        if entry is None:
            continue
        day = migrate_entry(entry)
        for carrier in CARRIERS:
            counts = day.get(carrier)
            normal_count += counts.normal
            normal_earnings += counts.normal * get_rate(carrier, TIER_NORMAL)
            express_count += counts.express
            express_earnings += counts.express * get_rate(carrier, TIER_EXPRESS)

    return DetailedTotal(
        normal=TierTotal(normal_count, normal_earnings),
        express=TierTotal(express_count, express_earnings),
        total=TierTotal(normal_count + express_count, normal_earnings + express_earnings),
    )

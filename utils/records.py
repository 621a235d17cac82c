# =============================================================================
# utils/records.py
# =============================================================================
# PURPOSE:
#   The data shapes the calculators work with.
#
# TWO SHAPES OF DAY RECORD:
#   Stored days come in two shapes:
#     - CURRENT:  {"flash": {"normal": 10, "express": 2}, "interlog": {...}, ...}
#     - LEGACY:   {"flash": 5, "interlog": 3, "ecommerce": 0, "isExpress": true}
#   The legacy shape applies one tier to every carrier of the day.
#
#   parse_entry() decides which shape a stored mapping is, ONCE, when the data
#   is read. After that every record carries its own `kind` tag and nobody
#   needs to sniff dictionaries again.
#
# DISCRIMINANT:
#   A mapping is legacy if and only if its "isExpress" value is a bool.
#   Nothing else (field count, value types) is checked.
# =============================================================================

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field

from config import CARRIERS, TIER_EXPRESS, TIER_NORMAL

LEGACY_FLAG = "isExpress"


def _count_or_zero(value):
    # Missing and null counts read as zero; anything else passes through as-is.
    return 0 if value is None else value


@dataclass(frozen=True)
class DeliveryCount:
    normal: int | float = 0
    express: int | float = 0

    def get(self, tier):
        if tier == TIER_NORMAL:
            return self.normal
        if tier == TIER_EXPRESS:
            return self.express
        raise ValueError(f"Unknown tier: {tier!r}")

    def replace(self, tier, value):
        if tier == TIER_NORMAL:
            return DeliveryCount(normal=value, express=self.express)
        if tier == TIER_EXPRESS:
            return DeliveryCount(normal=self.normal, express=value)
        raise ValueError(f"Unknown tier: {tier!r}")


@dataclass(frozen=True)
class DailyEntry:
    """
    A day in the current shape: one DeliveryCount per carrier.

    Carriers missing from `counts` read as zero through get().
    """
    counts: dict = field(default_factory=dict)
    kind: str = field(default="current", init=False)

    def get(self, carrier):
        return self.counts.get(carrier, DeliveryCount())


@dataclass(frozen=True)
class LegacyDailyEntry:
    """A day in the legacy shape: one count per carrier plus a day-wide tier flag."""
    counts: dict = field(default_factory=dict)
    is_express: bool = False
    kind: str = field(default="legacy", init=False)

    def get(self, carrier):
        return _count_or_zero(self.counts.get(carrier))


def empty_entry():
    """All carriers present, every count zero."""
    return DailyEntry({carrier: DeliveryCount() for carrier in CARRIERS})


def is_legacy_mapping(raw):
    return isinstance(raw, Mapping) and isinstance(raw.get(LEGACY_FLAG), bool)


def parse_entry(raw):
    """
    Turn a stored day mapping into a typed record.

    PARAMETERS:
        raw: a mapping as read from storage, an already-typed record, or None

    RETURNS:
        DailyEntry | LegacyDailyEntry | None

    EXAMPLE:
        parse_entry({"flash": 5, "interlog": 3, "isExpress": True})
        → LegacyDailyEntry(counts={"flash": 5, "interlog": 3}, is_express=True)
    """
    if raw is None:
        return None
    if isinstance(raw, (DailyEntry, LegacyDailyEntry)):
        return raw
    if not isinstance(raw, Mapping):
        return DailyEntry()

    if is_legacy_mapping(raw):
        counts = {c: raw[c] for c in CARRIERS if c in raw}
        return LegacyDailyEntry(counts=counts, is_express=raw[LEGACY_FLAG])

    counts = {}
    for carrier in CARRIERS:
        tiers = raw.get(carrier)
        if not isinstance(tiers, Mapping):
            continue
        counts[carrier] = DeliveryCount(
            normal=_count_or_zero(tiers.get(TIER_NORMAL)),
            express=_count_or_zero(tiers.get(TIER_EXPRESS)),
        )
    return DailyEntry(counts)


def entry_to_raw(entry):
    """Serialize a typed record back to its stored mapping."""
    if isinstance(entry, LegacyDailyEntry):
        raw = {carrier: count for carrier, count in entry.counts.items()}
        raw[LEGACY_FLAG] = entry.is_express
        return raw
    return {
        carrier: {TIER_NORMAL: count.normal, TIER_EXPRESS: count.express}
        for carrier, count in entry.counts.items()
    }


# -----------------------------------------------------------------------------
# RESULTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TierTotal:
    count: int | float = 0
    earnings: float = 0.0

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class DetailedTotal:
    normal: TierTotal
    express: TierTotal
    total: TierTotal

    @classmethod
    def zero(cls):
        return cls(TierTotal(), TierTotal(), TierTotal())

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class HistoryRow:
    """One closed quinzena in the history list."""
    month_key: str
    year: int
    month: int
    quinzena: int
    quinzena_key: str
    label: str
    count: int | float
    earnings: float
    expense: float = 0.0
    net: float = 0.0

    def to_dict(self):
        return asdict(self)

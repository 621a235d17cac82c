"""Tests for form input clamping and snapshot updates."""

import copy
from datetime import date

import pytest

from utils import (
    DailyEntry,
    DeliveryCount,
    apply_form_value,
    clamp_count,
    delete_day_entry,
    editable_tiers,
    set_expense,
    upsert_day_entry,
)


@pytest.mark.parametrize(
    "value, expected",
    [("12", 12), (7, 7), ("-3", 0), (-1, 0), ("abc", 0), ("", 0), (None, 0)],
)
def test_clamp_count(value, expected) -> None:
    assert clamp_count(value) == expected


def test_single_tier_carrier_only_exposes_normal() -> None:
    assert editable_tiers("ecommerce") == ("normal",)
    assert editable_tiers("flash") == ("normal", "express")


def test_apply_form_value_migrates_legacy_day(legacy_express_entry) -> None:
    updated = apply_form_value(legacy_express_entry, "flash", "normal", "4")
    assert isinstance(updated, DailyEntry)
    assert updated.get("flash") == DeliveryCount(normal=4, express=5)
    assert updated.get("interlog") == DeliveryCount(normal=0, express=3)


def test_apply_form_value_clamps_negative() -> None:
    updated = apply_form_value(None, "interlog", "express", "-8")
    assert updated.get("interlog") == DeliveryCount(0, 0)


def test_apply_form_value_rejects_hidden_tier() -> None:
    with pytest.raises(ValueError):
        apply_form_value(None, "ecommerce", "express", 3)


def test_upsert_does_not_mutate_input(march_data) -> None:
    original = copy.deepcopy(march_data)
    new_data = upsert_day_entry(march_data, date(2024, 3, 21), {"flash": {"normal": 1, "express": 0}})
    assert march_data == original
    assert set(new_data["2024-3"]) == {20, 21}


def test_upsert_replaces_string_keyed_day() -> None:
    data = {"2024-3": {"20": {"flash": {"normal": 1, "express": 0}}}}
    new_data = upsert_day_entry(data, date(2024, 3, 20), {"flash": {"normal": 9, "express": 0}})
    assert list(new_data["2024-3"]) == [20]
    assert new_data["2024-3"][20]["flash"]["normal"] == 9


def test_upsert_creates_month() -> None:
    new_data = upsert_day_entry({}, date(2024, 5, 2), {"flash": {"normal": 1, "express": 0}})
    assert list(new_data) == ["2024-5"]


def test_delete_last_day_removes_month(march_data) -> None:
    new_data = delete_day_entry(march_data, date(2024, 3, 20))
    assert "2024-3" not in new_data
    assert 20 in march_data["2024-3"]


def test_delete_keeps_other_days() -> None:
    data = {"2024-3": {1: {}, 2: {}}}
    assert list(delete_day_entry(data, date(2024, 3, 1))["2024-3"]) == [2]


def test_delete_missing_month_is_noop(march_data) -> None:
    assert delete_day_entry(march_data, date(2025, 1, 1)) == march_data


def test_set_expense() -> None:
    expenses = {"2024-3-1": 10.0}
    updated = set_expense(expenses, 2024, 3, 2, 42.5)
    assert updated == {"2024-3-1": 10.0, "2024-3-2": 42.5}
    assert expenses == {"2024-3-1": 10.0}

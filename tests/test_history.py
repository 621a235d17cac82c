"""Tests for the closed-quinzena history list."""

from datetime import date

import pytest

from utils import build_history, history_to_frame


def _flash_day(normal):
    return {"flash": {"normal": normal, "express": 0}}


@pytest.fixture
def three_months():
    return {
        "2024-9": {5: _flash_day(1), 20: _flash_day(2)},
        "2024-10": {5: _flash_day(3), 20: _flash_day(4)},
        "2023-12": {5: _flash_day(5), 20: _flash_day(6)},
    }


def test_only_populated_quinzena_is_listed(march_data, after_march) -> None:
    rows = build_history(march_data, today=after_march)
    assert len(rows) == 1
    row = rows[0]
    assert row.month_key == "2024-3"
    assert row.quinzena == 2
    assert row.quinzena_key == "2024-3-2"
    assert row.count == 10
    assert row.earnings == pytest.approx(15.0)
    assert row.label == "2ª Quinzena 3/2024"


def test_months_sorted_numerically_newest_first(three_months) -> None:
    rows = build_history(three_months, today=date(2025, 1, 1))
    assert [r.month_key for r in rows] == ["2024-10", "2024-10", "2024-9", "2024-9", "2023-12", "2023-12"]
    assert [r.quinzena for r in rows] == [2, 1, 2, 1, 2, 1]
    assert [r.count for r in rows] == [4, 3, 2, 1, 6, 5]


def test_ascending_quinzena_order(three_months) -> None:
    rows = build_history(three_months, today=date(2025, 1, 1), quinzena_order="asc")
    assert [r.quinzena for r in rows] == [1, 2, 1, 2, 1, 2]
    assert rows[0].month_key == "2024-10"


def test_invalid_order_raises(three_months) -> None:
    with pytest.raises(ValueError):
        build_history(three_months, today=date(2025, 1, 1), quinzena_order="newest")


def test_current_month_only_lists_first_quinzena_after_day_15() -> None:
    data = {"2024-3": {5: _flash_day(2), 20: _flash_day(4)}}
    assert build_history(data, today=date(2024, 3, 15)) == []

    rows = build_history(data, today=date(2024, 3, 20))
    assert [(r.quinzena, r.count) for r in rows] == [(1, 2)]


def test_future_months_are_not_listed() -> None:
    data = {"2024-4": {5: _flash_day(2)}}
    assert build_history(data, today=date(2024, 3, 20)) == []


def test_expense_netting(march_data, after_march) -> None:
    rows = build_history(march_data, today=after_march, expenses={"2024-3-2": 5.0, "2024-3-1": 99.0})
    assert rows[0].expense == pytest.approx(5.0)
    assert rows[0].net == pytest.approx(10.0)


def test_missing_expense_counts_as_zero(march_data, after_march) -> None:
    rows = build_history(march_data, today=after_march, expenses={})
    assert rows[0].expense == 0
    assert rows[0].net == pytest.approx(rows[0].earnings)


def test_without_expenses_net_equals_earnings(march_data, after_march) -> None:
    row = build_history(march_data, today=after_march)[0]
    assert row.expense == 0
    assert row.net == row.earnings


def test_legacy_days_count_in_history(after_march) -> None:
    data = {"2024-3": {2: {"flash": 4, "interlog": 0, "ecommerce": 1, "isExpress": True}}}
    row = build_history(data, today=after_march)[0]
    assert row.quinzena == 1
    assert row.count == 5
    assert row.earnings == pytest.approx(4 * 2.0 + 1 * 1.0)


def test_unparseable_month_keys_are_skipped(march_data, after_march, caplog) -> None:
    data = dict(march_data)
    data["garbage"] = {1: _flash_day(3)}
    rows = build_history(data, today=after_march)
    assert [r.month_key for r in rows] == ["2024-3"]
    assert "garbage" in caplog.text


def test_history_to_frame(three_months) -> None:
    rows = build_history(three_months, today=date(2025, 1, 1))
    frame = history_to_frame(rows)
    assert len(frame) == 6
    assert list(frame["quinzena_key"][:2]) == ["2024-10-2", "2024-10-1"]
    assert frame["count"].sum() == 21


def test_history_to_frame_empty() -> None:
    frame = history_to_frame([])
    assert frame.empty
    assert "net" in frame.columns

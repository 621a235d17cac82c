"""Tests for the command-line report."""

import json

import pytest

import app


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "earnings.json"
    path.write_text(json.dumps({
        "allData": {
            "2024-3": {
                "5": {"flash": 2, "interlog": 0, "ecommerce": 0, "isExpress": True},
                "20": {"flash": {"normal": 10, "express": 0}},
            },
        },
        "expenseData": {"2024-3-2": 5},
    }), encoding="utf-8")
    return path


def test_report_prints_summary_and_history(snapshot_file, capsys) -> None:
    code = app.main([str(snapshot_file), "--date", "2024-03-20", "--today", "2024-05-01"])
    out = capsys.readouterr().out

    assert code == 0
    assert "Resumo do dia 20/03/2024" in out
    assert "2ª Quinzena" in out
    assert "Total de Março de 2024" in out
    assert "R$ 19,00" in out
    assert "2ª Quinzena 3/2024" in out
    assert "1ª Quinzena 3/2024" in out
    assert out.index("2ª Quinzena 3/2024") < out.index("1ª Quinzena 3/2024")
    assert "líquido" not in out


def test_report_with_expenses_and_ascending_order(snapshot_file, capsys) -> None:
    code = app.main([
        str(snapshot_file), "--date", "2024-03-20", "--today", "2024-05-01",
        "--with-expenses", "--order", "asc",
    ])
    out = capsys.readouterr().out

    assert code == 0
    assert "líquido" in out
    assert "R$ 10,00" in out
    assert out.index("1ª Quinzena 3/2024") < out.index("2ª Quinzena 3/2024")


def test_report_without_closed_quinzenas(snapshot_file, capsys) -> None:
    app.main([str(snapshot_file), "--date", "2024-03-20", "--today", "2024-03-10"])
    assert "Nenhum histórico" in capsys.readouterr().out


def test_report_fails_on_missing_snapshot(tmp_path, capsys) -> None:
    code = app.main([str(tmp_path / "nope.json")])
    assert code == 1
    assert "ERROR" in capsys.readouterr().err


def test_invalid_date_is_rejected(snapshot_file) -> None:
    with pytest.raises(SystemExit):
        app.main([str(snapshot_file), "--date", "20/03/2024"])


def test_report_lists_carrier_counts_for_the_day(snapshot_file, capsys) -> None:
    app.main([str(snapshot_file), "--date", "2024-03-20", "--today", "2024-05-01"])
    out = capsys.readouterr().out

    assert "Flash       10 normais, 0 expressas" in out
    assert "Interlog    0 normais, 0 expressas" in out
    assert "E-commerce  0 normais\n" in out


def test_carrier_counts_show_legacy_express_on_single_tier_carrier() -> None:
    text = app.format_carrier_counts({"flash": 0, "interlog": 0, "ecommerce": 3, "isExpress": True})
    assert "E-commerce  0 normais, 3 expressas" in text

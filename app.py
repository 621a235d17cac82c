# =============================================================================
# app.py - MAIN ENTRY POINT
# =============================================================================
# PURPOSE:
#   Prints an earnings report from a stored snapshot:
#     1. Day, quinzena and month breakdowns for a date
#     2. The history of closed quinzenas (optionally net of expenses)
#
# TO RUN:
#   python app.py earnings.json --date 2024-03-20
#   python app.py earnings.json --with-expenses --order asc
# =============================================================================

import argparse
import sys
from datetime import date

from config import (
    CARRIER_NAMES,
    CARRIERS,
    DEFAULT_SNAPSHOT_PATH,
    PERIOD_DAY,
    TIER_EXPRESS,
    configure_logging,
)
from importers import SnapshotImporter
from utils import (
    build_history,
    editable_tiers,
    format_currency,
    format_month_name,
    get_period_entries,
    migrate_entry,
    summarize_date,
)


def _parse_date(value):
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a YYYY-MM-DD date: {value!r}") from None


def build_parser():
    parser = argparse.ArgumentParser(
        description="Delivery earnings report (day / quinzena / month + history)."
    )
    parser.add_argument(
        "snapshot",
        nargs="?",
        default=DEFAULT_SNAPSHOT_PATH,
        help=f"JSON snapshot file (default: {DEFAULT_SNAPSHOT_PATH})",
    )
    parser.add_argument(
        "--date",
        type=_parse_date,
        default=None,
        help="Date to summarize, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "--today",
        type=_parse_date,
        default=None,
        help="Override today's date for the closed-quinzena test",
    )
    parser.add_argument(
        "--with-expenses",
        action="store_true",
        help="Show expenses and net earnings in the history",
    )
    parser.add_argument(
        "--order",
        choices=["desc", "asc"],
        default="desc",
        help="Quinzena order inside a month in the history (default: desc)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at INFO level")
    return parser


def format_breakdown(title, totals):
    lines = [title]
    lines.append(f"  Normais:   {totals.normal.count} entregas ({format_currency(totals.normal.earnings)})")
    lines.append(f"  Expressas: {totals.express.count} entregas ({format_currency(totals.express.earnings)})")
    lines.append(f"  Total:     {format_currency(totals.total.earnings)} / {totals.total.count} entregas")
    return "\n".join(lines)


def format_carrier_counts(entry):
    """One line per carrier with the day's counts, as the entry form lays them out."""
    day = migrate_entry(entry)
    lines = []
    for carrier in CARRIERS:
        counts = day.get(carrier)
        parts = [f"{counts.normal} normais"]
        # single-tier carriers only show express when legacy data put it there
        if TIER_EXPRESS in editable_tiers(carrier) or counts.express:
            parts.append(f"{counts.express} expressas")
        lines.append(f"  {CARRIER_NAMES[carrier]:<11} " + ", ".join(parts))
    return "\n".join(lines)


def format_history(rows, with_expenses=False):
    if not rows:
        return "Nenhum histórico de quinzena fechada ainda."
    lines = []
    for row in rows:
        line = f"  {row.label:<24} {row.count:>5} entregas  {format_currency(row.earnings):>14}"
        if with_expenses:
            line += f"  despesas {format_currency(row.expense):>12}  líquido {format_currency(row.net):>14}"
        lines.append(line)
    return "\n".join(lines)


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging("INFO" if args.verbose else None)

    importer = SnapshotImporter(args.snapshot)
    success, message, _count = importer.import_snapshot()
    if not success:
        print(f"ERROR: {message}", file=sys.stderr)
        return 1

    ref_date = args.date or date.today()
    summary = summarize_date(importer.all_data, ref_date)

    print(format_breakdown(f"Resumo do dia {ref_date.strftime('%d/%m/%Y')}", summary["daily"]))
    day_entries = get_period_entries(importer.all_data, ref_date, PERIOD_DAY)
    if day_entries:
        print(format_carrier_counts(day_entries[0]))
    print()
    print(format_breakdown(f"{summary['quinzena_number']}ª Quinzena", summary["quinzena"]))
    print()
    print(format_breakdown(f"Total de {format_month_name(ref_date)}", summary["monthly"]))
    print()

    rows = build_history(
        importer.all_data,
        today=args.today,
        expenses=importer.expenses if args.with_expenses else None,
        quinzena_order=args.order,
    )
    print("Histórico")
    print(format_history(rows, with_expenses=args.with_expenses))
    return 0


if __name__ == "__main__":
    sys.exit(main())

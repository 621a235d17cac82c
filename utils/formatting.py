# =============================================================================
# utils/formatting.py
# =============================================================================
# PURPOSE:
#   Turns numbers and dates into the text the reports show (pt-BR).
# =============================================================================

from config import CURRENCY_SYMBOL, MONTH_NAMES


def format_currency(value):
    """
    Format a BRL amount: 1234.5 → 'R$ 1.234,50', -3 → '-R$ 3,00'.
    """
    value = value or 0
    sign = "-" if value < 0 else ""
    formatted = f"{abs(value):,.2f}"
    # 1,234.50 → 1.234,50
    formatted = formatted.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{sign}{CURRENCY_SYMBOL} {formatted}"


def format_month_name(d):
    """Full month and year: date(2024, 3, 1) → 'Março de 2024'."""
    return f"{MONTH_NAMES[d.month - 1]} de {d.year}"

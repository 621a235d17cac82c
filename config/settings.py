# =============================================================================
# config/settings.py
# =============================================================================
# PURPOSE:
#   Central configuration file for the earnings tracker.
#   All "magic numbers", rates and labels live here.
#   Change a rate once here and every total in the app follows.
#
# NOTE ON RATES:
#   Rates are NOT versioned by date. Changing a value below changes the
#   earnings of every stored day, past ones included.
# =============================================================================

import logging
import os

# -----------------------------------------------------------------------------
# CARRIERS
# -----------------------------------------------------------------------------
# Closed set of delivery providers. Adding one means adding it to RATES
# and CARRIER_NAMES as well.
CARRIERS = ("flash", "interlog", "ecommerce")

CARRIER_NAMES = {
    "flash": "Flash",
    "interlog": "Interlog",
    "ecommerce": "E-commerce",
}

# Carriers whose entry form only has a "normal" field.
# Their records still carry both tiers (legacy express days land there).
SINGLE_TIER_CARRIERS = ("ecommerce",)

# -----------------------------------------------------------------------------
# SERVICE TIERS
# -----------------------------------------------------------------------------
TIER_NORMAL = "normal"
TIER_EXPRESS = "express"
TIERS = (TIER_NORMAL, TIER_EXPRESS)

# -----------------------------------------------------------------------------
# RATE TABLE (BRL per delivery)
# -----------------------------------------------------------------------------
# Shape: {TIER: {carrier: rate}}, tier names upper-cased.
RATES = {
    "NORMAL": {
        "flash": 1.50,
        "interlog": 1.50,
        "ecommerce": 1.00,
    },
    "EXPRESS": {
        "flash": 2.00,
        "interlog": 2.00,
        "ecommerce": 1.00,
    },
}

CURRENCY_SYMBOL = "R$"

# -----------------------------------------------------------------------------
# PERIODS
# -----------------------------------------------------------------------------
# A month splits in two "quinzenas": days 1-15 and 16-end of month.
QUINZENA_SPLIT_DAY = 15

PERIOD_DAY = "day"
PERIOD_QUINZENA_1 = "quinzena_1"
PERIOD_QUINZENA_2 = "quinzena_2"
PERIOD_MONTH = "month"
PERIOD_KINDS = (PERIOD_DAY, PERIOD_QUINZENA_1, PERIOD_QUINZENA_2, PERIOD_MONTH)

# History listing order inside one month
QUINZENA_ORDERS = ("desc", "asc")   # desc = 2nd quinzena first

# Number of months in the monthly earnings chart
CHART_MONTHS = 12

MONTH_NAMES = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]

MONTH_ABBREVIATIONS = [
    "jan", "fev", "mar", "abr", "mai", "jun",
    "jul", "ago", "set", "out", "nov", "dez",
]

# -----------------------------------------------------------------------------
# STORAGE
# -----------------------------------------------------------------------------
# JSON blob holding {"allData": {...}, "expenseData": {...}}
DEFAULT_SNAPSHOT_PATH = os.getenv("EARNINGS_SNAPSHOT", "earnings.json")

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------
LOG_LEVEL = os.getenv("EARNINGS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None):
    """Configure short, timestamped logging once. Safe to call repeatedly."""
    root = logging.getLogger()
    resolved = level or LOG_LEVEL
    if root.handlers:
        root.setLevel(resolved)
        return
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt="%H:%M:%S")

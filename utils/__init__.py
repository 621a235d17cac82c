# =============================================================================
# utils/__init__.py
# =============================================================================
# PURPOSE:
#   Makes the utils folder a package and re-exports the functions the rest
#   of the app uses, so callers can write:
#       from utils import calculate_period_totals, build_history
# =============================================================================

from .records import (
    DailyEntry,
    DeliveryCount,
    DetailedTotal,
    HistoryRow,
    LegacyDailyEntry,
    TierTotal,
    empty_entry,
    entry_to_raw,
    parse_entry,
)

from .calculations import (
    EntryTotal,
    get_rate,
    migrate_entry,
    calculate_entry_total,
    calculate_period_totals,
)

from .periods import (
    get_month_key,
    parse_month_key,
    get_quinzena,
    get_quinzena_key,
    days_in_month,
    period_days,
    slice_period,
    get_period_entries,
    calculate_window_totals,
    summarize_date,
    is_quinzena_closed,
    build_history,
    history_to_frame,
)

from .charts import (
    daily_earnings_series,
    monthly_earnings_series,
)

from .snapshots import (
    clamp_count,
    editable_tiers,
    apply_form_value,
    upsert_day_entry,
    delete_day_entry,
    set_expense,
)

from .formatting import format_currency, format_month_name

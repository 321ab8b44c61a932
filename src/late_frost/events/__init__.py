"""Late-frost event engine.

Turns a canonical day table into the late-frost report: daily heat units,
a frost indicator, maximal runs of equal indicator, and one classified
summary row per run.

Public API:
  - engine: frost_indicator, run_ids, classify_run, summarize_runs,
            series_events, late_frost_events, empty_report
  - serialization: to_records, events_to_dicts
"""

from late_frost.events.engine import (
    DAY_COLUMNS,
    EVENT_DTYPE,
    REPORT_COLUMNS,
    classify_run,
    empty_report,
    frost_indicator,
    late_frost_events,
    run_ids,
    series_events,
    summarize_runs,
)
from late_frost.events.serialization import events_to_dicts, to_records

__all__ = [
    "DAY_COLUMNS",
    "EVENT_DTYPE",
    "REPORT_COLUMNS",
    "classify_run",
    "empty_report",
    "events_to_dicts",
    "frost_indicator",
    "late_frost_events",
    "run_ids",
    "series_events",
    "summarize_runs",
    "to_records",
]

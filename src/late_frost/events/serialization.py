"""JSON serialization helpers for late-frost reports."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pandas as pd

from late_frost.schemas import EventKind, FrostEvent

if TYPE_CHECKING:
    from collections.abc import Iterable


def to_records(report: pd.DataFrame) -> list[FrostEvent]:
    """Convert a report DataFrame into validated :class:`FrostEvent` rows.

    Args:
        report: Output of :func:`~late_frost.events.late_frost_events`.

    Returns:
        One FrostEvent per report row, in report order. Missing dates
        become ``None``.
    """
    return [
        FrostEvent(
            id=int(row.id),
            date=None if pd.isna(row.date) else row.date.date(),
            gdd=float(row.gdd),
            event=EventKind(row.event),
            duration=int(row.duration),
        )
        for row in report.itertuples(index=False)
    ]


def events_to_dicts(events: Iterable[FrostEvent]) -> list[dict[str, Any]]:
    """Serialize events to JSON-compatible dicts (ISO dates, gdd to 0.1)."""
    return [
        {**event.model_dump(mode="json"), "gdd": round(event.gdd, 1)}
        for event in events
    ]

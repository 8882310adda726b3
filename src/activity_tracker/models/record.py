"""Parsed activity record — one input line, validated and typed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class ActivityRecord:
    """Immutable result of parsing a single record string.

    ``activity`` is the raw label of a training record and ``None`` for a
    daily step record. It is not checked against ActivityKind here; the
    training report resolves it.
    """

    steps: int
    duration: timedelta
    activity: str | None = None

    @property
    def duration_hours(self) -> float:
        return self.duration / timedelta(hours=1)

    @property
    def duration_minutes(self) -> float:
        return self.duration / timedelta(minutes=1)

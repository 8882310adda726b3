"""Physical profile supplied alongside each record."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicalProfile:
    """Body measurements used by the calorie formulas.

    Values are validated by the calculator on every call, so a profile with
    a non-positive field can be built but never produces metrics.
    """

    weight_kg: float
    height_m: float

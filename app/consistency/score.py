"""
Daily wellness score.

The score is derived on read from a single check-in and never stored.
It has three components:

    health   0-40   sleep (up to 25) + soreness (up to 15)
    mind     0-30   mood (up to 15) + stress (up to 15)
    finance  15     fixed placeholder, displayed out of 30

Sleep is scaled linearly against a 7.5 hour target.  Soreness and
stress are inverted (lower is better) on the 1-5 scale, mood is direct.
Each contribution is clamped on its own, and each component is clamped
again after summing.

    total = round(health + mind + finance), clamped to 0-100

Rounding is half-up, applied to the unrounded component sum.  Health
and mind are reported rounded individually, so the reported parts may
not add up exactly to the total.

Flags are textual warnings raised alongside the score:

    sleep_hours < 6   -> "Low sleep"
    soreness >= 4     -> "High soreness"
    stress >= 4       -> "High stress"

A missing check-in scores zero on every component, finance included.
"""

from __future__ import annotations

import math
from typing import Optional, Protocol

from app.schemas.insights import ScoreBreakdown

# ======================================================================
# Configuration
# ======================================================================

SLEEP_TARGET_HOURS = 7.5
SLEEP_MAX_POINTS = 25.0
SORENESS_MAX_POINTS = 15.0
MOOD_MAX_POINTS = 15.0
STRESS_MAX_POINTS = 15.0

HEALTH_MAX = 40
MIND_MAX = 30
FINANCE_MAX = 30
FINANCE_POINTS = 15

LOW_SLEEP_HOURS = 6.0
HIGH_SORENESS = 4
HIGH_STRESS = 4

FLAG_LOW_SLEEP = "Low sleep"
FLAG_HIGH_SORENESS = "High soreness"
FLAG_HIGH_STRESS = "High stress"


class CheckinMetrics(Protocol):
    """Anything carrying the four check-in metrics (model or schema)."""

    sleep_hours: Optional[float]
    soreness: Optional[float]
    stress: Optional[float]
    mood: Optional[float]


# ======================================================================
# Helpers
# ======================================================================


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


# ======================================================================
# Components
# ======================================================================


def _health_points(checkin: CheckinMetrics) -> tuple[float, list[str]]:
    """Sleep + soreness points (0-40) and the flags they raise."""
    health = 0.0
    flags: list[str] = []

    if checkin.sleep_hours is not None:
        health += _clamp(checkin.sleep_hours / SLEEP_TARGET_HOURS * SLEEP_MAX_POINTS, 0.0, SLEEP_MAX_POINTS)
        if checkin.sleep_hours < LOW_SLEEP_HOURS:
            flags.append(FLAG_LOW_SLEEP)

    if checkin.soreness is not None:
        health += _clamp((6 - checkin.soreness) * 3, 0.0, SORENESS_MAX_POINTS)
        if checkin.soreness >= HIGH_SORENESS:
            flags.append(FLAG_HIGH_SORENESS)

    return _clamp(health, 0.0, HEALTH_MAX), flags


def _mind_points(checkin: CheckinMetrics) -> tuple[float, list[str]]:
    """Mood + stress points (0-30) and the flags they raise."""
    mind = 0.0
    flags: list[str] = []

    if checkin.mood is not None:
        mind += _clamp(checkin.mood / 5 * MOOD_MAX_POINTS, 0.0, MOOD_MAX_POINTS)

    if checkin.stress is not None:
        mind += _clamp((6 - checkin.stress) / 5 * STRESS_MAX_POINTS, 0.0, STRESS_MAX_POINTS)
        if checkin.stress >= HIGH_STRESS:
            flags.append(FLAG_HIGH_STRESS)

    return _clamp(mind, 0.0, MIND_MAX), flags


# ======================================================================
# Main entry point
# ======================================================================


def compute_score(checkin: Optional[CheckinMetrics]) -> ScoreBreakdown:
    """Compute the wellness score of a check-in.

    Args:
        checkin: A check-in (ORM row or schema), or ``None`` when the
            day has no check-in.

    Returns:
        :class:`ScoreBreakdown` with total, components and flags.
    """
    if checkin is None:
        return ScoreBreakdown(score=0, health=0, mind=0, finance=0, flags=[])

    health, health_flags = _health_points(checkin)
    mind, mind_flags = _mind_points(checkin)

    total = _clamp(_round_half_up(health + mind + FINANCE_POINTS), 0, 100)

    return ScoreBreakdown(
        score=int(total),
        health=_round_half_up(health),
        mind=_round_half_up(mind),
        finance=FINANCE_POINTS,
        flags=health_flags + mind_flags,
    )

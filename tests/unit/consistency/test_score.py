"""
Unit tests for the daily wellness score.

Pure tests: check-ins are built from the request schema, no database.
"""

import itertools

import pytest

from app.consistency.score import (
    FINANCE_POINTS,
    FLAG_HIGH_SORENESS,
    FLAG_HIGH_STRESS,
    FLAG_LOW_SLEEP,
    _clamp,
    _health_points,
    _mind_points,
    _round_half_up,
    compute_score,
)
from app.models.checkin import DailyCheckin
from app.schemas.checkin import CheckinUpsert


def _checkin(sleep=None, soreness=None, stress=None, mood=None) -> CheckinUpsert:
    return CheckinUpsert(sleep_hours=sleep, soreness=soreness, stress=stress, mood=mood)


# ======================================================================
# Helpers
# ======================================================================


class TestHelpers:

    @pytest.mark.parametrize("value,expected", [
        (-5.0, 0.0),
        (0.0, 0.0),
        (50.0, 50.0),
        (100.0, 100.0),
        (120.0, 100.0),
    ])
    def test_clamp_default_bounds(self, value, expected):
        assert _clamp(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (42.5, 43),
        (42.49, 42),
        (12.5, 13),
        (0.0, 0),
        (99.5, 100),
    ])
    def test_round_half_up(self, value, expected):
        assert _round_half_up(value) == expected


# ======================================================================
# Components
# ======================================================================


class TestHealthPoints:

    def test_full_sleep_and_no_soreness_is_max(self):
        """Sleep >= 7.5h and soreness 1 → health clamped to 40."""
        health, flags = _health_points(_checkin(sleep=7.5, soreness=1))
        assert health == 40
        assert flags == []

    def test_oversleep_is_capped(self):
        health, _ = _health_points(_checkin(sleep=12.0))
        assert health == 25

    def test_soreness_is_inverted(self):
        assert _health_points(_checkin(soreness=1))[0] == 15
        assert _health_points(_checkin(soreness=3))[0] == 9
        assert _health_points(_checkin(soreness=5))[0] == 3

    def test_sleep_scaled_linearly(self):
        health, _ = _health_points(_checkin(sleep=3.75))
        assert health == pytest.approx(12.5)

    def test_flags(self):
        _, flags = _health_points(_checkin(sleep=5.9, soreness=4))
        assert flags == [FLAG_LOW_SLEEP, FLAG_HIGH_SORENESS]

    def test_six_hours_is_not_low_sleep(self):
        _, flags = _health_points(_checkin(sleep=6.0))
        assert flags == []


class TestMindPoints:

    def test_best_mood_lowest_stress_is_max(self):
        mind, flags = _mind_points(_checkin(mood=5, stress=1))
        assert mind == 30
        assert flags == []

    def test_mood_scaled_linearly(self):
        assert _mind_points(_checkin(mood=1))[0] == pytest.approx(3.0)
        assert _mind_points(_checkin(mood=4))[0] == pytest.approx(12.0)

    def test_stress_is_inverted(self):
        assert _mind_points(_checkin(stress=5))[0] == pytest.approx(3.0)
        assert _mind_points(_checkin(stress=2))[0] == pytest.approx(12.0)

    @pytest.mark.parametrize("stress,flagged", [(3, False), (4, True), (5, True)])
    def test_high_stress_flag(self, stress, flagged):
        _, flags = _mind_points(_checkin(stress=stress))
        assert (FLAG_HIGH_STRESS in flags) is flagged


# ======================================================================
# compute_score
# ======================================================================


class TestComputeScore:

    def test_missing_checkin_is_all_zero(self):
        breakdown = compute_score(None)
        assert breakdown.score == 0
        assert breakdown.health == 0
        assert breakdown.mind == 0
        assert breakdown.finance == 0
        assert breakdown.flags == []

    def test_empty_checkin_scores_finance_only(self):
        breakdown = compute_score(_checkin())
        assert breakdown.score == FINANCE_POINTS == 15
        assert breakdown.health == 0
        assert breakdown.mind == 0

    def test_perfect_day(self):
        breakdown = compute_score(_checkin(sleep=8.0, soreness=1, stress=1, mood=5))
        assert breakdown.score == 85
        assert breakdown.health == 40
        assert breakdown.mind == 30
        assert breakdown.finance == 15
        assert breakdown.flags == []

    def test_rough_day(self):
        """Health 22.67 + mind 12 + finance 15 = 49.67 → 50."""
        breakdown = compute_score(_checkin(sleep=5.0, soreness=4, stress=4, mood=2))
        assert breakdown.score == 50
        assert breakdown.health == 23
        assert breakdown.mind == 12
        assert breakdown.flags == [FLAG_LOW_SLEEP, FLAG_HIGH_SORENESS, FLAG_HIGH_STRESS]

    def test_total_rounds_half_up_on_unrounded_parts(self):
        """12.5 + 15 + 15 = 42.5 → 43 (not banker's 42)."""
        breakdown = compute_score(_checkin(sleep=3.75, mood=5))
        assert breakdown.score == 43
        assert breakdown.health == 13

    def test_accepts_orm_rows(self):
        row = DailyCheckin(user_id=1, sleep_hours=7.5, soreness=1, stress=1, mood=5)
        assert compute_score(row).score == 85

    def test_score_always_integer_in_range(self):
        sleeps = [None, 0.0, 4.0, 6.0, 7.5, 10.0, 24.0]
        levels = [None, 1, 2, 3, 4, 5]
        for sleep, soreness, stress, mood in itertools.product(sleeps, levels, levels, levels):
            breakdown = compute_score(_checkin(sleep, soreness, stress, mood))
            assert isinstance(breakdown.score, int)
            assert 0 <= breakdown.score <= 100
            assert 0 <= breakdown.health <= 40
            assert 0 <= breakdown.mind <= 30

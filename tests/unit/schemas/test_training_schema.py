"""Tests for training session request validation and activity resolution."""

import pytest
from pydantic import ValidationError

from app.schemas.training_session import ActivityPreset, TrainingCategory, TrainingSessionCreate


def _session(**overrides) -> TrainingSessionCreate:
    data = {"duration_min": 45, "rpe": 7}
    data.update(overrides)
    return TrainingSessionCreate(**data)


class TestDefaults:

    def test_defaults(self):
        s = _session()
        assert s.activity is ActivityPreset.STRENGTH
        assert s.category is TrainingCategory.MODERATE
        assert s.notes == ""


class TestResolveActivity:

    @pytest.mark.parametrize("preset", ["strength", "cardio", "sport_practice", "mobility"])
    def test_preset_is_used_as_is(self, preset):
        assert _session(activity=preset, custom_activity="ignored").resolve_activity() == preset

    def test_other_uses_trimmed_lowercased_custom(self):
        assert _session(activity="other", custom_activity="  Rock Climbing ").resolve_activity() == "rock climbing"

    @pytest.mark.parametrize("custom", [None, "", "   "])
    def test_other_without_custom_falls_back(self, custom):
        assert _session(activity="other", custom_activity=custom).resolve_activity() == "other"


class TestValidation:

    @pytest.mark.parametrize("duration", [0, -10])
    def test_duration_must_be_positive(self, duration):
        with pytest.raises(ValidationError, match="Duration must be > 0."):
            _session(duration_min=duration)

    @pytest.mark.parametrize("rpe", [0, 0.5, 10.5, 11])
    def test_rpe_out_of_range(self, rpe):
        with pytest.raises(ValidationError, match="RPE must be 1-10."):
            _session(rpe=rpe)

    @pytest.mark.parametrize("rpe", [1, 5.5, 10])
    def test_rpe_bounds_inclusive(self, rpe):
        assert _session(rpe=rpe).rpe == rpe

    def test_unknown_category_rejected(self):
        with pytest.raises(ValidationError):
            _session(category="brutal")

"""Unit tests for double_mass.corrector."""

import pytest

from double_mass.corrector import (
    CorrectedValue,
    CorrectionStatus,
    apply_correction,
    correct,
)
from double_mass.dataset import load_sample_observations
from double_mass.detector import BreakAnalysis


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def observations():
    return load_sample_observations()


def _analysis(break_index, factor):
    return BreakAnalysis(
        break_year=None if break_index is None else 1990 + break_index,
        break_index=break_index,
        slope_before=0.875,
        slope_after=0.875 * factor,
        correction_factor=factor,
        max_slope_diff=abs(0.875 * factor - 0.875),
    )


# ---------------------------------------------------------------------------
# correct
# ---------------------------------------------------------------------------

class TestCorrect:
    def test_pre_break_scaled(self, observations):
        result = correct(observations, 18, 1.2)
        for obs, value in zip(observations[:18], result[:18]):
            assert value.corrected_value == obs.station_value * 1.2
            assert value.status is CorrectionStatus.CORRECTED

    def test_post_break_unchanged(self, observations):
        result = correct(observations, 18, 1.2)
        for obs, value in zip(observations[18:], result[18:]):
            assert value.corrected_value == obs.station_value
            assert value.status is CorrectionStatus.ORIGINAL

    def test_round_trip(self, observations):
        factor = 1.1734
        result = correct(observations, 12, factor)
        for obs, value in zip(observations, result[:12]):
            assert value.corrected_value / factor == pytest.approx(obs.station_value)

    def test_original_values_kept(self, observations):
        result = correct(observations, 5, 2.0)
        assert [v.original_value for v in result] == [o.station_value for o in observations]
        assert [v.year for v in result] == [o.year for o in observations]

    def test_no_break_is_identity(self, observations):
        result = correct(observations, None, 3.0)
        assert all(v.corrected_value == v.original_value for v in result)
        assert all(v.status is CorrectionStatus.ORIGINAL for v in result)

    def test_break_at_zero_changes_nothing(self, observations):
        result = correct(observations, 0, 1.5)
        assert all(v.status is CorrectionStatus.ORIGINAL for v in result)

    def test_accepts_tuples(self):
        result = correct([(2000, 10.0, 12.0), (2001, 20.0, 21.0)], 1, 0.5)
        assert result == [
            CorrectedValue(2000, 10.0, 5.0, CorrectionStatus.CORRECTED),
            CorrectedValue(2001, 20.0, 20.0, CorrectionStatus.ORIGINAL),
        ]

    def test_status_values(self):
        assert CorrectionStatus.CORRECTED == "corrected"
        assert CorrectionStatus.ORIGINAL == "original"


# ---------------------------------------------------------------------------
# apply_correction
# ---------------------------------------------------------------------------

class TestApplyCorrection:
    def test_uses_analysis_fields(self, observations):
        analysis = _analysis(18, 1.16)
        assert apply_correction(observations, analysis) == correct(observations, 18, 1.16)

    def test_analysis_not_mutated(self, observations):
        analysis = _analysis(18, 1.16)
        before = (analysis.break_index, analysis.correction_factor)
        apply_correction(observations, analysis)
        assert (analysis.break_index, analysis.correction_factor) == before

    def test_no_break_analysis(self, observations):
        result = apply_correction(observations, _analysis(None, 1.0))
        assert all(v.status is CorrectionStatus.ORIGINAL for v in result)

"""Unit tests for double_mass.series."""

import math

import pytest

from double_mass.dataset import SAMPLE_RAINFALL, load_sample_observations
from double_mass.exceptions import InsufficientDataError, InvalidObservationError
from double_mass.series import (
    CumulativeRecord,
    Observation,
    as_observations,
    build_cumulative_series,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def short_rows():
    return [(2000, 10.0, 20.0), (2001, 0.0, 5.0), (2002, 7.5, 0.0)]


# ---------------------------------------------------------------------------
# as_observations
# ---------------------------------------------------------------------------

class TestAsObservations:
    def test_tuples_are_coerced(self, short_rows):
        observations = as_observations(short_rows)
        assert observations[0] == Observation(2000, 10.0, 20.0)
        assert all(isinstance(o, Observation) for o in observations)

    def test_observations_pass_through(self):
        obs = Observation(1990, 1.0, 2.0)
        assert as_observations([obs])[0] is obs

    @pytest.mark.parametrize("row", [(2000, 1.0), (2000, 1.0, 2.0, 3.0), 2000])
    def test_malformed_row_rejected(self, row):
        with pytest.raises(InvalidObservationError):
            as_observations([row])

    def test_fractional_year_rejected(self):
        with pytest.raises(InvalidObservationError):
            as_observations([(2000.5, 1.0, 2.0)])

    def test_whole_float_year_accepted(self):
        assert as_observations([(2000.0, 1.0, 2.0)])[0].year == 2000

    def test_sample_loader(self):
        observations = load_sample_observations()
        assert len(observations) == 30
        assert observations[0] == Observation(1990, 677.0, 780.0)
        assert observations[-1].year == 2019


# ---------------------------------------------------------------------------
# build_cumulative_series
# ---------------------------------------------------------------------------

class TestBuildCumulativeSeries:
    def test_running_sums(self, short_rows):
        records = build_cumulative_series(short_rows)
        assert [r.cum_station for r in records] == [10.0, 10.0, 17.5]
        assert [r.cum_reference for r in records] == [20.0, 25.0, 25.0]

    def test_first_record_equals_first_value(self, short_rows):
        first = build_cumulative_series(short_rows)[0]
        assert first == CumulativeRecord(2000, 10.0, 20.0, 10.0, 20.0)

    def test_order_preserved(self):
        rows = [(1995, 1.0, 1.0), (1997, 2.0, 2.0), (2003, 3.0, 3.0)]
        records = build_cumulative_series(rows)
        assert [r.year for r in records] == [1995, 1997, 2003]

    def test_sample_is_monotone(self):
        records = build_cumulative_series(SAMPLE_RAINFALL)
        for prev, cur in zip(records, records[1:]):
            assert cur.cum_station >= prev.cum_station
            assert cur.cum_reference >= prev.cum_reference

    def test_sample_totals(self):
        records = build_cumulative_series(SAMPLE_RAINFALL)
        assert records[-1].cum_station == sum(row[1] for row in SAMPLE_RAINFALL)
        assert records[-1].cum_reference == sum(row[2] for row in SAMPLE_RAINFALL)

    def test_records_are_frozen(self, short_rows):
        record = build_cumulative_series(short_rows)[0]
        with pytest.raises(AttributeError):
            record.cum_station = 0.0

    def test_single_observation_rejected(self):
        with pytest.raises(InsufficientDataError):
            build_cumulative_series([(2000, 1.0, 1.0)])

    def test_empty_rejected(self):
        with pytest.raises(InsufficientDataError):
            build_cumulative_series([])

    def test_insufficient_data_is_value_error(self):
        with pytest.raises(ValueError):
            build_cumulative_series([])

    def test_negative_value_rejected(self):
        with pytest.raises(InvalidObservationError):
            build_cumulative_series([(2000, 1.0, 1.0), (2001, -1.0, 1.0)])

    def test_non_finite_value_rejected(self):
        with pytest.raises(InvalidObservationError):
            build_cumulative_series([(2000, 1.0, math.nan), (2001, 1.0, 1.0)])

    def test_descending_years_rejected(self):
        with pytest.raises(InvalidObservationError):
            build_cumulative_series([(2001, 1.0, 1.0), (2000, 1.0, 1.0)])

    def test_duplicate_years_rejected(self):
        with pytest.raises(InvalidObservationError):
            build_cumulative_series([(2000, 1.0, 1.0), (2000, 2.0, 2.0)])

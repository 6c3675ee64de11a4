"""
double_mass.series
~~~~~~~~~~~~~~~~~~
Annual observations and the cumulative series the double mass curve is
drawn from.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

import numpy as np

from .exceptions import InsufficientDataError, InvalidObservationError


@dataclass(frozen=True)
class Observation:
    """One calendar year of rainfall at the station and the reference."""

    year: int
    station_value: float
    reference_value: float


@dataclass(frozen=True)
class CumulativeRecord:
    """An observation together with the running totals up to its year."""

    year: int
    station_value: float
    reference_value: float
    cum_station: float
    cum_reference: float


ObservationLike = Union[Observation, Sequence]


def as_observations(rows: Iterable[ObservationLike]) -> list[Observation]:
    """Coerce ``(year, station, reference)`` rows into :class:`Observation`.

    Instances that already are observations pass through untouched.
    """
    observations: list[Observation] = []
    for row in rows:
        if isinstance(row, Observation):
            observations.append(row)
            continue
        try:
            year, station_value, reference_value = row
        except (TypeError, ValueError) as exc:
            raise InvalidObservationError(
                f"expected a (year, station, reference) row, got {row!r}"
            ) from exc
        if int(year) != year:
            raise InvalidObservationError(f"year must be a whole number, got {year!r}")
        observations.append(
            Observation(int(year), float(station_value), float(reference_value))
        )
    return observations


def _validate(observations: Sequence[Observation]) -> None:
    previous_year = None
    for obs in observations:
        for label, value in (
            ("station", obs.station_value),
            ("reference", obs.reference_value),
        ):
            if not math.isfinite(value) or value < 0:
                raise InvalidObservationError(
                    f"{label} value for {obs.year} must be a finite, "
                    f"non-negative amount (got {value!r})"
                )
        if previous_year is not None and obs.year <= previous_year:
            raise InvalidObservationError(
                f"years must be strictly ascending: {obs.year} follows {previous_year}"
            )
        previous_year = obs.year


def build_cumulative_series(
    observations: Iterable[ObservationLike],
) -> list[CumulativeRecord]:
    """Attach running station and reference totals to each observation.

    Parameters
    ----------
    observations : iterable
        :class:`Observation` instances or ``(year, station, reference)``
        tuples in ascending chronological order.  They are not re-sorted.

    Returns
    -------
    list[CumulativeRecord]
        One record per observation, in input order.

    Raises
    ------
    InsufficientDataError
        Fewer than two observations were supplied.
    InvalidObservationError
        A value is negative or non-finite, or the years are not strictly
        ascending.
    """
    observations = as_observations(observations)
    if len(observations) < 2:
        raise InsufficientDataError(
            f"at least 2 observations are required, got {len(observations)}"
        )
    _validate(observations)

    station = np.array([obs.station_value for obs in observations], dtype=float)
    reference = np.array([obs.reference_value for obs in observations], dtype=float)
    cum_station = np.cumsum(station)
    cum_reference = np.cumsum(reference)

    return [
        CumulativeRecord(
            year=obs.year,
            station_value=obs.station_value,
            reference_value=obs.reference_value,
            cum_station=float(cum_station[i]),
            cum_reference=float(cum_reference[i]),
        )
        for i, obs in enumerate(observations)
    ]

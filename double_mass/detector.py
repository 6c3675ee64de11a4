"""
double_mass.detector
~~~~~~~~~~~~~~~~~~~~
Single-breakpoint search over the double mass curve.

Every admissible split of the cumulative series is fitted as two
independent straight lines.  Among the splits whose two segments are both
well described by a line (correlation gate), the one with the largest slope
change is kept, and it is reported as a break only if that change clears the
significance threshold.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from . import config
from .exceptions import DegenerateSlopeError, InsufficientDataError
from .regression import fit_segment
from .series import CumulativeRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateEvaluation:
    """Two-segment fit for one candidate split index."""

    index: int
    year: int
    slope_before: float
    slope_after: float
    corr_before: float
    corr_after: float
    slope_diff: float
    eligible: bool


@dataclass(frozen=True)
class BreakAnalysis:
    """Outcome of a detection pass.

    ``break_year`` and ``break_index`` are both *None* when the series is
    consistent.  ``max_slope_diff`` and the slopes/correlations then describe
    the best eligible candidate (all ``0.0`` if none was eligible) and
    ``correction_factor`` is ``1.0``.
    """

    break_year: Optional[int]
    break_index: Optional[int]
    slope_before: float
    slope_after: float
    correction_factor: float
    max_slope_diff: float
    corr_before: float = 0.0
    corr_after: float = 0.0
    candidates: tuple[CandidateEvaluation, ...] = ()

    @property
    def has_break(self) -> bool:
        return self.break_index is not None


class BreakpointDetector:
    """Locate the year at which a station's double mass curve changes slope.

    Parameters
    ----------
    min_segment : int
        Years required on each side of a candidate split (default 5).
    correlation_threshold : float
        Pearson r both segments must exceed for a split to be eligible
        (default 0.85).
    significance_threshold : float
        Slope change the best eligible split must exceed to count as a
        break (default 0.05).
    """

    def __init__(
        self,
        min_segment: int = config.MIN_SEGMENT_YEARS,
        correlation_threshold: float = config.CORRELATION_THRESHOLD,
        significance_threshold: float = config.SIGNIFICANCE_THRESHOLD,
    ) -> None:
        if int(min_segment) != min_segment or min_segment < 2:
            raise ValueError(f"min_segment must be an integer >= 2, got {min_segment!r}")
        if not -1.0 <= correlation_threshold <= 1.0:
            raise ValueError(
                f"correlation_threshold must lie in [-1, 1], got {correlation_threshold!r}"
            )
        if significance_threshold < 0:
            raise ValueError(
                f"significance_threshold must be non-negative, got {significance_threshold!r}"
            )
        self.min_segment = int(min_segment)
        self.correlation_threshold = float(correlation_threshold)
        self.significance_threshold = float(significance_threshold)

    # ------------------------------------------------------------------
    # Candidate scan
    # ------------------------------------------------------------------

    @property
    def min_records(self) -> int:
        """Shortest series that yields at least one candidate split."""
        return 2 * self.min_segment + 1

    def candidate_indices(self, n_records: int) -> range:
        """Split indices to evaluate; index *i* starts the second segment."""
        return range(self.min_segment, n_records - self.min_segment)

    def evaluate_candidate(
        self, records: Sequence[CumulativeRecord], index: int
    ) -> CandidateEvaluation:
        """Fit both sides of the split at *index*."""
        last = len(records) - 1
        before = fit_segment(records, 0, index - 1)
        after = fit_segment(records, index, last)
        return CandidateEvaluation(
            index=index,
            year=records[index].year,
            slope_before=before.slope,
            slope_after=after.slope,
            corr_before=before.correlation,
            corr_after=after.correlation,
            slope_diff=abs(after.slope - before.slope),
            eligible=(
                before.correlation > self.correlation_threshold
                and after.correlation > self.correlation_threshold
            ),
        )

    def scan(self, records: Sequence[CumulativeRecord]) -> list[CandidateEvaluation]:
        """Evaluate every admissible split of *records*.

        Raises
        ------
        InsufficientDataError
            The series is shorter than :attr:`min_records`.
        """
        if len(records) < self.min_records:
            raise InsufficientDataError(
                f"breakpoint detection needs at least {self.min_records} years "
                f"({self.min_segment} on each side of a split), got {len(records)}"
            )
        evaluations = []
        for i in self.candidate_indices(len(records)):
            evaluation = self.evaluate_candidate(records, i)
            logger.debug(
                "Split %d: slope %.4f -> %.4f (diff %.4f), r %.4f / %.4f%s",
                evaluation.year,
                evaluation.slope_before,
                evaluation.slope_after,
                evaluation.slope_diff,
                evaluation.corr_before,
                evaluation.corr_after,
                "" if evaluation.eligible else " [below correlation gate]",
            )
            evaluations.append(evaluation)
        return evaluations

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    @staticmethod
    def select_breakpoint(
        candidates: Iterable[CandidateEvaluation],
    ) -> Optional[CandidateEvaluation]:
        """Return the eligible candidate with the largest slope change.

        Ties go to the earliest index, whatever order *candidates* arrive in.
        *None* when no candidate is eligible.
        """
        best: Optional[CandidateEvaluation] = None
        for candidate in candidates:
            if not candidate.eligible:
                continue
            if (
                best is None
                or candidate.slope_diff > best.slope_diff
                or (candidate.slope_diff == best.slope_diff and candidate.index < best.index)
            ):
                best = candidate
        return best

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def detect(self, records: Sequence[CumulativeRecord]) -> BreakAnalysis:
        """Run the full scan and decide whether the series holds a break.

        Parameters
        ----------
        records : sequence of CumulativeRecord
            Output of :func:`~double_mass.series.build_cumulative_series`.

        Returns
        -------
        BreakAnalysis

        Raises
        ------
        InsufficientDataError
            Fewer than ``2 * min_segment + 1`` records.
        DegenerateSlopeError
            A break was accepted but the slope before it is zero.
        """
        candidates = tuple(self.scan(records))
        best = self.select_breakpoint(candidates)

        if best is None:
            logger.info(
                "No split passed the correlation gate (r > %.2f); series treated as consistent",
                self.correlation_threshold,
            )
            return BreakAnalysis(
                break_year=None,
                break_index=None,
                slope_before=0.0,
                slope_after=0.0,
                correction_factor=1.0,
                max_slope_diff=0.0,
                candidates=candidates,
            )

        if best.slope_diff <= self.significance_threshold:
            logger.info(
                "Largest slope change %.4f at %d does not exceed %.4f; series is consistent",
                best.slope_diff,
                best.year,
                self.significance_threshold,
            )
            return BreakAnalysis(
                break_year=None,
                break_index=None,
                slope_before=best.slope_before,
                slope_after=best.slope_after,
                correction_factor=1.0,
                max_slope_diff=best.slope_diff,
                corr_before=best.corr_before,
                corr_after=best.corr_after,
                candidates=candidates,
            )

        if best.slope_before == 0.0:
            raise DegenerateSlopeError(
                f"slope before the break at {best.year} is zero; "
                "correction factor is undefined"
            )

        correction_factor = best.slope_after / best.slope_before
        logger.info(
            "Inconsistency from %d: slope %.4f -> %.4f, correction factor %.4f",
            best.year,
            best.slope_before,
            best.slope_after,
            correction_factor,
        )
        return BreakAnalysis(
            break_year=best.year,
            break_index=best.index,
            slope_before=best.slope_before,
            slope_after=best.slope_after,
            correction_factor=correction_factor,
            max_slope_diff=best.slope_diff,
            corr_before=best.corr_before,
            corr_after=best.corr_after,
            candidates=candidates,
        )

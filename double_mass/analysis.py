"""
double_mass.analysis
~~~~~~~~~~~~~~~~~~~~
High-level facade that chains cumulative-series construction, breakpoint
detection and correction for one station record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .corrector import CorrectedValue, apply_correction
from .detector import BreakAnalysis, BreakpointDetector
from .series import (
    CumulativeRecord,
    Observation,
    ObservationLike,
    as_observations,
    build_cumulative_series,
)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one run produces, ready for the reporting layer.

    ``corrected`` is empty when no break was detected.
    """

    observations: tuple[Observation, ...]
    records: tuple[CumulativeRecord, ...]
    analysis: BreakAnalysis
    corrected: tuple[CorrectedValue, ...]


class DoubleMassAnalysis:
    """Check one station's record for consistency against a reference.

    Parameters
    ----------
    observations : iterable
        :class:`~double_mass.series.Observation` instances or
        ``(year, station, reference)`` tuples, in ascending year order.
    detector : BreakpointDetector, optional
        Custom detector instance.  A default :class:`BreakpointDetector` is
        used when not provided.

    Examples
    --------
    >>> from double_mass import DoubleMassAnalysis
    >>> from double_mass.dataset import SAMPLE_RAINFALL
    >>> result = DoubleMassAnalysis(SAMPLE_RAINFALL).run()
    >>> result.analysis.has_break
    True
    """

    def __init__(
        self,
        observations: Iterable[ObservationLike],
        detector: Optional[BreakpointDetector] = None,
    ) -> None:
        self.observations = as_observations(observations)
        self.records = build_cumulative_series(self.observations)
        self.detector = detector if detector is not None else BreakpointDetector()

    def detect(self) -> BreakAnalysis:
        """Run the breakpoint scan over the cumulative series."""
        return self.detector.detect(self.records)

    def correct(self, analysis: Optional[BreakAnalysis] = None) -> list[CorrectedValue]:
        """Correct the station values using *analysis* (detected afresh
        when omitted)."""
        if analysis is None:
            analysis = self.detect()
        return apply_correction(self.observations, analysis)

    def run(self) -> AnalysisResult:
        """Detect, then correct only if a break was found."""
        analysis = self.detect()
        corrected = self.correct(analysis) if analysis.has_break else []
        return AnalysisResult(
            observations=tuple(self.observations),
            records=tuple(self.records),
            analysis=analysis,
            corrected=tuple(corrected),
        )


def analyze(
    observations: Iterable[ObservationLike], **detector_kwargs
) -> AnalysisResult:
    """Shortcut for ``DoubleMassAnalysis(observations,
    BreakpointDetector(**detector_kwargs)).run()``."""
    detector = BreakpointDetector(**detector_kwargs)
    return DoubleMassAnalysis(observations, detector=detector).run()

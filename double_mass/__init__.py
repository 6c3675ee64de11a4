"""
double_mass
~~~~~~~~~~~
Double mass curve consistency check for annual station rainfall against a
reference composite: single-breakpoint detection and correction of the
pre-break record.

Two calling paths are supported:

Path 1 – one call:

    from double_mass import analyze

    result = analyze(rows)            # rows: (year, station, reference)
    if result.analysis.has_break:
        print(result.analysis.break_year, result.analysis.correction_factor)

Path 2 – step by step (plug in a detector with your own thresholds):

    from double_mass import BreakpointDetector, build_cumulative_series, correct

    records = build_cumulative_series(rows)
    analysis = BreakpointDetector(correlation_threshold=0.9).detect(records)
    corrected = correct(rows, analysis.break_index, analysis.correction_factor)
"""

from .analysis import AnalysisResult, DoubleMassAnalysis, analyze
from .corrector import CorrectedValue, CorrectionStatus, apply_correction, correct
from .detector import BreakAnalysis, BreakpointDetector, CandidateEvaluation
from .exceptions import (
    DegenerateSlopeError,
    DoubleMassError,
    InsufficientDataError,
    InvalidObservationError,
)
from .regression import RegressionResult, correlation, fit_segment, slope
from .report import describe_analysis, get_consistency_report
from .series import (
    CumulativeRecord,
    Observation,
    as_observations,
    build_cumulative_series,
)

__all__ = [
    "AnalysisResult",
    "BreakAnalysis",
    "BreakpointDetector",
    "CandidateEvaluation",
    "CorrectedValue",
    "CorrectionStatus",
    "CumulativeRecord",
    "DegenerateSlopeError",
    "DoubleMassAnalysis",
    "DoubleMassError",
    "InsufficientDataError",
    "InvalidObservationError",
    "Observation",
    "RegressionResult",
    "analyze",
    "apply_correction",
    "as_observations",
    "build_cumulative_series",
    "correct",
    "correlation",
    "describe_analysis",
    "fit_segment",
    "get_consistency_report",
    "slope",
]

__version__ = "0.1.0"

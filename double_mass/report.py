"""
double_mass.report
~~~~~~~~~~~~~~~~~~
Turn analysis results into the plain-text consistency report.

Two calling paths are supported:

  Path 1 – precomputed:
      get_consistency_report(result=analyze(rows))

  Path 2 – raw data (analysis happens internally):
      get_consistency_report(observations=rows, detector_kwargs={"min_segment": 4})

All rounding happens here; the analysis objects keep full precision.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from . import config
from .corrector import CorrectedValue, CorrectionStatus
from .detector import BreakAnalysis
from .series import CumulativeRecord, Observation

# ------------------------------------------------------------------
# Constants
# ------------------------------------------------------------------

TITLE = (
    "RAINFALL DATA CONSISTENCY ANALYSIS\n"
    "Using Double Mass Curve Technique\n"
    "=================================="
)

_STATUS_LABELS = {
    CorrectionStatus.CORRECTED: "Corrected",
    CorrectionStatus.ORIGINAL: "Original",
}


# ------------------------------------------------------------------
# Tables
# ------------------------------------------------------------------


def _cumulative_row(record: CumulativeRecord) -> str:
    return (
        f"{record.year}\t{record.station_value:.0f}\t{record.reference_value:.0f}\t"
        f"{record.cum_station:.1f}\t\t{record.cum_reference:.1f}"
    )


def format_cumulative_table(
    records: Sequence[CumulativeRecord],
    head: int = config.CUMULATIVE_HEAD_ROWS,
    tail: int = config.CUMULATIVE_TAIL_ROWS,
) -> str:
    """Sample of the cumulative series: the first *head* rows, an
    ellipsis, then the last *tail* rows that were not already shown."""
    lines = [
        "CUMULATIVE DATA (Sample):",
        "Year\tPA\tAvg P10\tCum PA\t\tCum Avg P10",
        "----\t---\t-------\t------\t\t-----------",
    ]
    shown = min(head, len(records))
    lines.extend(_cumulative_row(r) for r in records[:shown])
    lines.append("...")
    lines.extend(_cumulative_row(r) for r in records[max(shown, len(records) - tail):])
    return "\n".join(lines)


def format_candidate_table(analysis: BreakAnalysis) -> str:
    """Every split the detector evaluated, one row per candidate year."""
    lines = [
        "Testing break points for inconsistency:",
        "Year\tSlope Before\tSlope After\tSlope Diff\tCorr1\tCorr2",
        "----\t------------\t-----------\t----------\t-----\t-----",
    ]
    for c in analysis.candidates:
        lines.append(
            f"{c.year}\t{c.slope_before:.4f}\t\t{c.slope_after:.4f}\t\t"
            f"{c.slope_diff:.4f}\t\t{c.corr_before:.4f}\t{c.corr_after:.4f}"
        )
    lines.append("")
    lines.append(f"Maximum slope difference: {analysis.max_slope_diff:.4f}")
    return "\n".join(lines)


def format_break_summary(analysis: BreakAnalysis) -> str:
    if not analysis.has_break:
        return (
            "**DATA IS CONSISTENT**\n"
            "No significant inconsistency detected in the rainfall data."
        )
    change = abs(analysis.slope_after - analysis.slope_before)
    return "\n".join(
        [
            "**INCONSISTENCY DETECTED!**",
            f"Inconsistency starts from year: {analysis.break_year}",
            f"Slope before inconsistency: {analysis.slope_before:.4f}",
            f"Slope after inconsistency: {analysis.slope_after:.4f}",
            f"Slope change: {change:.4f}",
            f"Correction factor: {analysis.correction_factor:.4f}",
        ]
    )


def format_correction_table(
    observations: Sequence[Observation],
    corrected: Sequence[CorrectedValue],
    correction_factor: float,
) -> str:
    """Original and corrected station values beside the reference."""
    lines = [
        "**CORRECTED DATA:**",
        f"Correction Factor: {correction_factor:.4f}",
        "",
        "Year\tOriginal PA\tCorrected PA\tAvg P10\tStatus",
        "----\t-----------\t------------\t-------\t------",
    ]
    for obs, value in zip(observations, corrected):
        lines.append(
            f"{value.year}\t{value.original_value:.1f}\t\t{value.corrected_value:.1f}\t\t"
            f"{obs.reference_value:.1f}\t{_STATUS_LABELS[value.status]}"
        )
    return "\n".join(lines)


# ------------------------------------------------------------------
# Narrative
# ------------------------------------------------------------------


def describe_analysis(analysis: BreakAnalysis) -> str:
    """One-sentence plain-English verdict."""
    if not analysis.has_break:
        return (
            "The station record is consistent with the reference; the largest "
            f"slope change across eligible splits was {analysis.max_slope_diff:.4f}."
        )
    direction = "steepened" if analysis.slope_after > analysis.slope_before else "flattened"
    return (
        f"The double mass curve {direction} from {analysis.slope_before:.4f} to "
        f"{analysis.slope_after:.4f} in {analysis.break_year}; values before "
        f"{analysis.break_year} should be multiplied by {analysis.correction_factor:.4f}."
    )


def get_consistency_report(
    result=None,
    observations: Optional[Iterable] = None,
    detector_kwargs: Optional[dict] = None,
) -> str:
    """Assemble the full text report.

    Parameters
    ----------
    result : AnalysisResult, optional
        Output of :meth:`DoubleMassAnalysis.run`.  Required for Path 1.
    observations : iterable, optional
        Raw ``(year, station, reference)`` rows.  Required for Path 2.
    detector_kwargs : dict, optional
        Extra keyword arguments forwarded to :class:`BreakpointDetector`
        when using Path 2.

    Raises
    ------
    ValueError
        If neither *result* nor *observations* is provided.
    """
    # --- Path 2: raw data supplied → run the analysis first ---
    if observations is not None:
        from .analysis import analyze

        result = analyze(observations, **(detector_kwargs or {}))

    elif result is None:
        raise ValueError("Provide either result or observations.")

    analysis = result.analysis
    # Blank lines follow the console layout: two after the title, none
    # between the scan table and the results banner, one elsewhere.
    report = (
        f"{TITLE}\n\n\n"
        f"{format_candidate_table(analysis)}\n"
        "=== DOUBLE MASS CURVE ANALYSIS RESULTS ===\n\n"
        f"{format_cumulative_table(result.records)}\n\n"
        f"{format_break_summary(analysis)}"
    )
    if analysis.has_break:
        correction_table = format_correction_table(
            result.observations, result.corrected, analysis.correction_factor
        )
        report += f"\n\n{correction_table}"
    return f"{report}\n\n{describe_analysis(analysis)}"

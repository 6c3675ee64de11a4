"""
double_mass.config
~~~~~~~~~~~~~~~~~~
Default thresholds for breakpoint detection and report layout.

These encode judgement calls about rainfall records; override them per run
through :class:`~double_mass.detector.BreakpointDetector` keyword arguments.
"""

# ------------------------------------------------------------------
# Detection
# ------------------------------------------------------------------

# Years required on each side of a candidate break.
MIN_SEGMENT_YEARS = 5

# Both segments must exceed this Pearson r to be trusted.
CORRELATION_THRESHOLD = 0.85

# Smallest slope change accepted as a genuine break.
SIGNIFICANCE_THRESHOLD = 0.05

# ------------------------------------------------------------------
# Report layout
# ------------------------------------------------------------------

CUMULATIVE_HEAD_ROWS = 10
CUMULATIVE_TAIL_ROWS = 5

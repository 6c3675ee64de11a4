"""
double_mass.corrector
~~~~~~~~~~~~~~~~~~~~~
Scale the station's pre-break values onto its post-break measurement regime.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from .detector import BreakAnalysis
from .series import ObservationLike, as_observations

logger = logging.getLogger(__name__)


class CorrectionStatus(str, enum.Enum):
    CORRECTED = "corrected"
    ORIGINAL = "original"


@dataclass(frozen=True)
class CorrectedValue:
    year: int
    original_value: float
    corrected_value: float
    status: CorrectionStatus


def correct(
    observations: Iterable[ObservationLike],
    break_index: Optional[int],
    correction_factor: float,
) -> list[CorrectedValue]:
    """Multiply station values before *break_index* by *correction_factor*.

    Values at or after the break are returned unchanged.  When
    *break_index* is *None* the result is the identity mapping with every
    value marked ``original``.
    """
    observations = as_observations(observations)
    if break_index is None:
        logger.debug("No break supplied; %d values left unchanged", len(observations))
    else:
        logger.debug(
            "Scaling %d pre-break values by %.4f",
            min(break_index, len(observations)),
            correction_factor,
        )

    corrected: list[CorrectedValue] = []
    for i, obs in enumerate(observations):
        if break_index is not None and i < break_index:
            corrected.append(
                CorrectedValue(
                    year=obs.year,
                    original_value=obs.station_value,
                    corrected_value=obs.station_value * correction_factor,
                    status=CorrectionStatus.CORRECTED,
                )
            )
        else:
            corrected.append(
                CorrectedValue(
                    year=obs.year,
                    original_value=obs.station_value,
                    corrected_value=obs.station_value,
                    status=CorrectionStatus.ORIGINAL,
                )
            )
    return corrected


def apply_correction(
    observations: Iterable[ObservationLike], analysis: BreakAnalysis
) -> list[CorrectedValue]:
    """Apply the break and factor recorded in *analysis*."""
    return correct(observations, analysis.break_index, analysis.correction_factor)

"""
double_mass.exceptions
~~~~~~~~~~~~~~~~~~~~~~
Errors raised by the double mass curve pipeline.
"""


class DoubleMassError(Exception):
    """Base class for every error raised by :mod:`double_mass`."""


class InsufficientDataError(DoubleMassError, ValueError):
    """The record is too short for the requested operation."""


class InvalidObservationError(DoubleMassError, ValueError):
    """An observation is negative, non-finite or out of chronological order."""


class DegenerateSlopeError(DoubleMassError, ZeroDivisionError):
    """The slope before the accepted break is zero, so no correction
    factor can be derived from it."""

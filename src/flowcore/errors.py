"""Exceptions raised by the flowcore calculators.

All errors derive from :class:`ValueError` so callers written against plain
``ValueError`` (as input validation traditionally raises) keep working."""

__author__ = "Victor Diaz"
__copyright__ = "Victor Diaz"
__license__ = "mit"


class FlowcoreError(ValueError):
    """Base class for flowcore calculation errors"""


class InvalidInputError(FlowcoreError):
    """Non-numeric or out-of-domain calculation parameters"""


class OutOfCommercialRangeError(FlowcoreError):
    """Required diameter exceeds the largest pipe in the commercial catalog"""


class NoSuitablePipeError(FlowcoreError):
    """No pipe in the commercial catalog has sufficient capacity"""

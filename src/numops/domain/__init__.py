"""
Domain models.

Contains validated value objects used by the numeric operations (RangeSpec).
"""

from numops.domain.range_spec import EPS_RANGE, RangeBound, RangeSpec

__all__ = [
    "EPS_RANGE",
    "RangeBound",
    "RangeSpec",
]

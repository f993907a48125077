"""Errors collections that VM translator may raise (user-facing ones)."""

from .malformed_command import MalformedCommandError
from .pop_into_constant import PopIntoConstantSegmentError
from .segment_index_out_of_range import SegmentIndexOutOfRangeError
from .unknown_command import UnknownCommandError
from .unknown_segment import UnknownSegmentError

__all__ = [
    "MalformedCommandError",
    "PopIntoConstantSegmentError",
    "SegmentIndexOutOfRangeError",
    "UnknownCommandError",
    "UnknownSegmentError",
]

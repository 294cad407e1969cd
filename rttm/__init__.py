"""Lightweight RTTM reader/writer aligned to the NIST Rich Transcription specification."""

from .config import RttmOptions, load_config_file
from .errors import ParseFloatError, ParseIntError, RttmError, RttmIOError, SegmentAlignmentError
from .rttm import Rttm, load_rttm, loads_rttm, write_rttm
from .segment import RttmSegment

__version__ = "0.1.0"

__all__ = [
    "ParseFloatError",
    "ParseIntError",
    "Rttm",
    "RttmError",
    "RttmIOError",
    "RttmOptions",
    "RttmSegment",
    "SegmentAlignmentError",
    "load_config_file",
    "load_rttm",
    "loads_rttm",
    "write_rttm",
]

"""A single RTTM row (NIST Rich Transcription Time Marked)."""

import dataclasses
import math
import re
from datetime import timedelta
from typing import Callable, Optional, Tuple, TypeVar

from .errors import ParseFloatError, ParseIntError, SegmentAlignmentError

DELIMITER = " "
FIELD_COUNT = 10

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

T = TypeVar("T")


def _parse_int(value: str) -> int:
    if not value:
        raise ParseIntError(ValueError("cannot parse integer from empty string"))
    if not _UNSIGNED_RE.fullmatch(value):
        raise ParseIntError(ValueError(f"invalid digit found in string: {value!r}"))
    return int(value)


def _parse_float(value: str) -> float:
    # float() alone would also accept padding, underscores and non-ASCII digits
    if not value or not value.isascii() or value != value.strip() or "_" in value:
        raise ParseFloatError(ValueError(f"invalid float literal: {value!r}"))
    try:
        return float(value)
    except ValueError as exc:
        raise ParseFloatError.from_value_error(exc) from exc


def _to_millis(seconds: float) -> int:
    # saturates like a float to i64 cast: nan is 0, out of range values clamp
    value = 1000.0 * seconds
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return I64_MAX if value > 0 else I64_MIN
    return max(I64_MIN, min(I64_MAX, round(value)))


def _field(value: Optional[str], parse: Callable[[str], T], default: T) -> T:
    return default if value is None else parse(value)


@dataclasses.dataclass
class RttmSegment:
    """A single row in an RTTM file. Delimiter is a single space."""

    # Type, should always be SPEAKER
    segment_type: str = ""
    # File ID, basename of the recording minus extension (e.g. rec1_a)
    file_id: str = ""
    # Channel ID, 1-indexed; should always be 1
    channel_id: int = 0
    # Turn Onset, seconds from the beginning of the recording
    turn_onset: float = 0.0
    # Turn Duration, seconds
    turn_duration: float = 0.0
    # Orthography Field, should always be <NA>
    orthography_field: str = ""
    # Speaker Type, should always be <NA>
    speaker_type: str = ""
    # Speaker Name, should be unique within the scope of each file
    speaker_name: str = ""
    # Confidence Score, should always be <NA>
    confidence_score: str = ""
    # Signal Lookahead Time, should always be <NA>
    signal_lookahead_time: str = ""

    @classmethod
    def parse(cls, line: str) -> "RttmSegment":
        """
        Parse one RTTM line.

        The line is split on every single space, without trimming, so consecutive
        spaces produce empty fields. Missing trailing fields keep their defaults.

        Raises:
            ParseIntError: channel ID is not an unsigned integer.
            ParseFloatError: turn onset or duration is not a float.
            SegmentAlignmentError: the line holds more than ten fields.
        """
        fields = line.split(DELIMITER)
        head = fields[:FIELD_COUNT]
        head += [None] * (FIELD_COUNT - len(head))
        (
            segment_type,
            file_id,
            channel_id,
            turn_onset,
            turn_duration,
            orthography_field,
            speaker_type,
            speaker_name,
            confidence_score,
            signal_lookahead_time,
        ) = head

        segment = cls(
            segment_type=_field(segment_type, str, ""),
            file_id=_field(file_id, str, ""),
            channel_id=_field(channel_id, _parse_int, 0),
            turn_onset=_field(turn_onset, _parse_float, 0.0),
            turn_duration=_field(turn_duration, _parse_float, 0.0),
            orthography_field=_field(orthography_field, str, ""),
            speaker_type=_field(speaker_type, str, ""),
            speaker_name=_field(speaker_name, str, ""),
            confidence_score=_field(confidence_score, str, ""),
            signal_lookahead_time=_field(signal_lookahead_time, str, ""),
        )

        if len(fields) > FIELD_COUNT:
            raise SegmentAlignmentError(FIELD_COUNT + 1)
        return segment

    from_str = parse

    def serialize(self) -> str:
        """Return the segment as a standard RTTM line, without line terminator."""
        return DELIMITER.join(
            [
                self.segment_type,
                self.file_id,
                str(self.channel_id),
                str(self.turn_onset),
                str(self.turn_duration),
                self.orthography_field,
                self.speaker_type,
                self.speaker_name,
                self.confidence_score,
                self.signal_lookahead_time,
            ]
        )

    to_string = serialize

    def __str__(self) -> str:
        return self.serialize()

    def copy(self) -> "RttmSegment":
        return dataclasses.replace(self)

    def timespan(self) -> Tuple[float, float]:
        """Start and end time in seconds."""
        return (self.turn_onset, self.turn_onset + self.turn_duration)

    def timespan_ms(self) -> Tuple[int, int]:
        """Start and end time in milliseconds, saturated to the signed 64-bit range."""
        return (_to_millis(self.turn_onset), _to_millis(self.turn_onset + self.turn_duration))

    def duration(self) -> timedelta:
        return timedelta(seconds=self.turn_duration)

    def milliseconds(self) -> int:
        """Duration in whole milliseconds, truncated."""
        # truncated at nanosecond precision; timedelta rounds to microseconds
        return int(self.turn_duration * 1_000_000_000) // 1_000_000

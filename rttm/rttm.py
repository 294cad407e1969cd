"""
Rich Transcription Time Marked (RTTM) collection.

References:
- https://web.archive.org/web/20170119114252/http://www.itl.nist.gov/iad/mig/tests/rt/2009/docs/rt09-meeting-eval-plan-v2.pdf
- https://catalog.ldc.upenn.edu/docs/LDC2004T12/RTTM-format-v13.pdf
- https://github.com/nryant/dscore#rttm
"""

import logging
import os
from typing import IO, TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple, Union

from .errors import RttmIOError
from .segment import RttmSegment

if TYPE_CHECKING:
    from .config import RttmOptions

LOG = logging.getLogger(__name__)

NEWLINE = "\n"
DEFAULT_ENCODING = "utf-8"

PathLike = Union[str, "os.PathLike[str]"]


def _split_lines(text: str) -> List[str]:
    # Same line semantics as reading a file: "\n" or "\r\n" terminated, no
    # extra empty line after a final terminator.
    lines = text.split(NEWLINE)
    last = lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    if last:
        lines.append(last)
    return lines


def check_encoding(encoding: str) -> str:
    """
    Validate that `encoding` can be read line by line from raw bytes.

    Lines are split on the byte ``\\n`` before decoding, so the codec must encode
    line endings as single ASCII bytes (utf-8, latin-1, cp1252, ...).

    Raises:
        ValueError: unknown codec, or one such as utf-16 that is not ASCII-compatible.
    """
    try:
        compatible = "\r\n".encode(encoding) == b"\r\n"
    except LookupError as exc:
        raise ValueError(f"Unknown encoding: {encoding!r}") from exc
    if not compatible:
        raise ValueError(f"Encoding {encoding!r} is not ASCII-compatible; RTTM files must use one that is")
    return encoding


def _decode_line(raw: bytes, encoding: str) -> str:
    line = raw.decode(encoding)
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class Rttm:
    """Ordered collection of RTTM segments, in file order."""

    def __init__(self, segments: Optional[Iterable[RttmSegment]] = None):
        self._segments: List[RttmSegment] = [segment.copy() for segment in segments or []]

    @classmethod
    def _owning(cls, segments: List[RttmSegment]) -> "Rttm":
        rttm = cls()
        rttm._segments = segments
        return rttm

    @classmethod
    def read(cls, path: PathLike, continue_on_error: bool = False, *, encoding: str = DEFAULT_ENCODING) -> "Rttm":
        """
        Read an RTTM plain-text file.

        Args:
            path: File to read.
            continue_on_error: Skip lines that cannot be read (undecodable bytes) instead
                of failing. Lines that are read but fail to parse always raise.
            encoding: Text encoding of the file.

        Raises:
            RttmIOError: the file cannot be opened or read, or a line cannot be decoded
                and ``continue_on_error`` is False.
            SegmentAlignmentError, ParseIntError, ParseFloatError: a line failed to parse.
            ValueError: ``encoding`` is unknown or not ASCII-compatible.
        """
        check_encoding(encoding)
        segments: List[RttmSegment] = []
        try:
            with open(path, "rb") as fh:
                for lineno, raw in enumerate(fh, start=1):
                    try:
                        line = _decode_line(raw, encoding)
                    except UnicodeDecodeError as exc:
                        if not continue_on_error:
                            raise RttmIOError(exc) from exc
                        LOG.warning("Skipping unreadable line %d of '%s': %s", lineno, path, exc)
                        continue
                    segments.append(RttmSegment.parse(line))
        except OSError as exc:
            raise RttmIOError.from_os_error(exc) from exc

        LOG.debug("Read %d segments from '%s'", len(segments), path)
        return cls._owning(segments)

    @classmethod
    def from_string(cls, text: str) -> "Rttm":
        """Parse RTTM content held in a string."""
        return cls._owning([RttmSegment.parse(line) for line in _split_lines(text)])

    def write(self, path: PathLike, *, encoding: str = DEFAULT_ENCODING) -> None:
        """
        Write to a plain-text file that conforms to the standard, replacing any existing file.

        A failed write leaves the destination partially written. Raises ValueError for
        an encoding that could not be read back (see `check_encoding`).
        """
        check_encoding(encoding)
        try:
            with open(path, "w", encoding=encoding, newline="") as fh:
                fh.write(self.to_string())
        except OSError as exc:
            raise RttmIOError.from_os_error(exc) from exc
        LOG.debug("Wrote %d segments to '%s'", len(self._segments), path)

    def to_string(self) -> str:
        """Segments as standard RTTM lines, without a trailing newline."""
        return NEWLINE.join(segment.serialize() for segment in self._segments)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Rttm({self._segments!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Rttm):
            return NotImplemented
        return self._segments == other._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[RttmSegment]:
        return iter(self._segments)

    def __getitem__(self, index: int) -> RttmSegment:
        return self._segments[index]

    def iter(self) -> Iterator[RttmSegment]:
        return iter(self._segments)

    @property
    def segments(self) -> Tuple[RttmSegment, ...]:
        return tuple(self._segments)

    def add(self, segment: RttmSegment) -> None:
        """Append a copy of `segment` in last position."""
        self._segments.append(segment.copy())

    def pop(self) -> Optional[RttmSegment]:
        """Remove and return the last segment, or None when empty."""
        if not self._segments:
            return None
        return self._segments.pop()

    def delete(self, index: int) -> Optional[RttmSegment]:
        """Remove and return the segment at `index`, or None if `index` is out of bounds."""
        if 0 <= index < len(self._segments):
            return self._segments.pop(index)
        return None

    def speakers(self) -> List[str]:
        """Sorted list of unique speakers."""
        return sorted({segment.speaker_name for segment in self._segments})

    def num_speakers(self) -> int:
        return len({segment.speaker_name for segment in self._segments})

    def find(self, speaker: str) -> Optional[RttmSegment]:
        """First segment spoken by `speaker`."""
        return next((segment for segment in self._segments if segment.speaker_name == speaker), None)

    def filter(self, speaker: str) -> "Rttm":
        """New collection holding copies of the segments spoken by `speaker`."""
        return Rttm(segment for segment in self._segments if segment.speaker_name == speaker)

    def timespans(self) -> List[Tuple[float, float]]:
        return [segment.timespan() for segment in self._segments]

    def timespans_ms(self) -> List[Tuple[int, int]]:
        return [segment.timespan_ms() for segment in self._segments]

    def duration_speaker(self, speaker: str) -> float:
        """Total duration for `speaker` in seconds."""
        return sum((segment.turn_duration for segment in self._segments if segment.speaker_name == speaker), 0.0)

    def duration_total(self) -> float:
        """Total duration of all segments in seconds."""
        return sum((segment.turn_duration for segment in self._segments), 0.0)


def load_rttm(path: PathLike, options: Optional["RttmOptions"] = None) -> Rttm:
    """Parse an RTTM file, reading with `options` when given."""
    if options is None:
        return Rttm.read(path)
    return Rttm.read(path, options.continue_on_error, encoding=options.encoding)


def loads_rttm(text: str) -> Rttm:
    """Parse RTTM content provided as a string."""
    return Rttm.from_string(text)


def write_rttm(rttm: Rttm, dest: Union[PathLike, IO[str]], options: Optional["RttmOptions"] = None) -> None:
    """Write an RTTM collection to a file path or a text file-like object."""
    if hasattr(dest, "write"):
        dest.write(rttm.to_string())  # type: ignore[union-attr]
        return
    encoding = options.encoding if options is not None else DEFAULT_ENCODING
    rttm.write(dest, encoding=encoding)  # type: ignore[arg-type]

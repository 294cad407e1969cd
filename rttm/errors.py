"""Errors raised while reading, parsing or writing RTTM files."""

from typing import Optional


class RttmError(Exception):
    """Base class for every RTTM failure."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

    def to_os_error(self) -> OSError:
        """Wrap this error in a plain ``OSError`` for generic I/O error handling."""
        err = OSError(str(self))
        err.__cause__ = self
        return err


class SegmentAlignmentError(RttmError):
    """A row holds more than the ten standard fields."""

    def __init__(self, index: int):
        super().__init__(f"Index overflow: expected 10 values, got {index}")
        # 1-based position of the first surplus field
        self.index = index


class RttmIOError(RttmError):
    """Opening, reading or writing an RTTM file failed."""

    def __init__(self, cause: BaseException):
        super().__init__(f"IO error: {cause}", cause)

    @classmethod
    def from_os_error(cls, err: OSError) -> "RttmIOError":
        return cls(err)


class ParseFloatError(RttmError):
    def __init__(self, cause: ValueError):
        super().__init__(f"Float parse error: {cause}", cause)

    @classmethod
    def from_value_error(cls, err: ValueError) -> "ParseFloatError":
        return cls(err)


class ParseIntError(RttmError):
    def __init__(self, cause: ValueError):
        super().__init__(f"Integer parse error: {cause}", cause)

    @classmethod
    def from_value_error(cls, err: ValueError) -> "ParseIntError":
        return cls(err)

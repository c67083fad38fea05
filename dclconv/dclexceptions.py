__all__ = [
    "DCLException",
    "UnsupportedFormat",
    "TruncatedInput",
    "StreamOverrun",
    "DecodeOverflow",
]


class DCLException(Exception):
    """Base class for DCL decoding exceptions."""


class UnsupportedFormat(DCLException, ValueError):
    """Raised when the tag byte names no known DCL variant."""


class TruncatedInput(DCLException, EOFError):
    """Raised when a file is shorter than one compressed block."""


class StreamOverrun(DCLException, EOFError):
    """Raised when the bit cursor is asked to read past the buffer end."""


class DecodeOverflow(DCLException, OverflowError):
    """Raised when decoded output would not fit in the pixel buffer."""

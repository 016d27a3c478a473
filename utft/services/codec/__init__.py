"""UTF-T codec: decoder, UTF-8 encoder, output buffer and transcode entry point."""

from .errors import (  # noqa: F401
    UTFTError,
    DecodeError,
    TruncatedSequence,
    MalformedSequence,
    InvalidCodePoint,
    BufferAllocationError,
)
from .buffer import OutputBuffer  # noqa: F401
from .decoder import decode_unit, iter_codepoints, iter_units  # noqa: F401
from .encoder import encode_codepoint  # noqa: F401
from .transcoder import transcode, try_transcode  # noqa: F401

__all__ = [
    'transcode',
    'try_transcode',
    'decode_unit',
    'iter_codepoints',
    'iter_units',
    'encode_codepoint',
    'OutputBuffer',
    'UTFTError',
    'DecodeError',
    'TruncatedSequence',
    'MalformedSequence',
    'InvalidCodePoint',
    'BufferAllocationError',
]

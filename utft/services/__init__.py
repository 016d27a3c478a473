"""Service layer public exports."""

from .codec import transcode, try_transcode  # noqa: F401
from .utils import utft_to_text, register_codec  # noqa: F401

__all__ = [
    'transcode',
    'try_transcode',
    'utft_to_text',
    'register_codec'
]

"""Utility subpackage (text helpers, codec registration)."""

from .encoding import utft_to_text  # noqa: F401
from .codec_registry import register_codec, CODEC_NAME  # noqa: F401

__all__ = [
    'utft_to_text',
    'register_codec',
    'CODEC_NAME'
]

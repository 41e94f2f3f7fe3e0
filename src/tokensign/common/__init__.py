"""Common utilities for tokensign."""

from tokensign.common.encoding import b64url_decode_nopad, b64url_encode_nopad
from tokensign.common.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "b64url_encode_nopad",
    "b64url_decode_nopad",
]

"""Base64 URL-safe encoding without padding."""

import base64
import binascii
import re

from tokensign.common.errors import EncodingError

_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode_nopad(data: bytes) -> str:
    """
    Encode bytes to Base64 URL-safe without padding.

    JWS compact serialization encodes every segment this way.

    Args:
        data: Raw bytes to encode

    Returns:
        Base64 URL-safe encoded string without padding
    """
    enc = base64.urlsafe_b64encode(data).decode("ascii")
    return enc.rstrip("=")


def b64url_decode_nopad(text: str) -> bytes:
    """
    Decode Base64 URL-safe string without padding.

    Args:
        text: Base64 encoded string

    Returns:
        Decoded bytes

    Raises:
        EncodingError: If text contains padding, characters outside the
            URL-safe alphabet, or has an impossible length
    """
    if not isinstance(text, str):
        raise EncodingError(f"Expected str, got {type(text).__name__}")
    if _B64URL_RE.fullmatch(text) is None:
        raise EncodingError("Invalid base64url character")
    if len(text) % 4 == 1:
        raise EncodingError("Invalid base64url length")

    # Add padding back
    pad = "=" * ((4 - (len(text) % 4)) % 4)
    try:
        return base64.urlsafe_b64decode((text + pad).encode("ascii"))
    except binascii.Error as e:
        raise EncodingError(f"Invalid base64url data: {e}") from e

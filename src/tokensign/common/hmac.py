"""Signing input construction for HMAC token signatures."""

from __future__ import annotations

from tokensign.common.errors import EncodingError

SEPARATOR = "."


def _utf8(name: str, text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"{name} is not valid UTF-8 text") from e


def build_message(header: str, claims: str) -> bytes:
    """Build the signing input ``header.claims`` as UTF-8 bytes.

    Both parts are passed through untouched; no trimming or normalization.

    Raises:
        EncodingError: If either part cannot be encoded as UTF-8
    """
    return SEPARATOR.encode("ascii").join(
        [
            _utf8("header", header),
            _utf8("claims", claims),
        ]
    )

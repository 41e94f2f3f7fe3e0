"""
tokensign: HMAC signatures for compact JWT-style tokens.

Signs and verifies ``header.claims`` signing inputs with HS256, HS384 and
HS512, producing unpadded base64url signatures.
"""

import logging

from tokensign.common.errors import (
    EncodingError,
    KeyInitializationError,
    TokenSignError,
    UnsupportedAlgorithmError,
)
from tokensign.common.hmac import SEPARATOR, build_message
from tokensign.signing import (
    AlgorithmType,
    HmacKey,
    SigningAlgorithm,
    VerifyingAlgorithm,
    algorithm_type_for,
    sign,
    verify,
    verify_bytes,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "SEPARATOR",
    "AlgorithmType",
    "EncodingError",
    "HmacKey",
    "KeyInitializationError",
    "SigningAlgorithm",
    "TokenSignError",
    "UnsupportedAlgorithmError",
    "VerifyingAlgorithm",
    "algorithm_type_for",
    "build_message",
    "sign",
    "verify",
    "verify_bytes",
]

"""HMAC token signing and verification."""

from tokensign.signing.algorithms import (
    AlgorithmType,
    algorithm_type_for,
    digest_for,
    signature_length,
    supported_algorithms,
)
from tokensign.signing.base import (
    SigningAlgorithm,
    VerifyingAlgorithm,
    sign,
    verify,
    verify_bytes,
)
from tokensign.signing.hmac_key import HmacKey

__all__ = [
    "AlgorithmType",
    "HmacKey",
    "SigningAlgorithm",
    "VerifyingAlgorithm",
    "algorithm_type_for",
    "digest_for",
    "signature_length",
    "supported_algorithms",
    "sign",
    "verify",
    "verify_bytes",
]

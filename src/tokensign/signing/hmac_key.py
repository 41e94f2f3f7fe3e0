"""HMAC signing keys for the HS256/HS384/HS512 algorithms."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Self

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from tokensign.common.encoding import b64url_encode_nopad
from tokensign.common.errors import EncodingError, KeyInitializationError
from tokensign.common.hmac import build_message
from tokensign.common.logging import get_logger
from tokensign.common.settings import Settings
from tokensign.signing.algorithms import (
    AlgorithmType,
    algorithm_type_for,
    digest_for,
    digest_type_of,
)
from tokensign.signing.base import SigningAlgorithm, VerifyingAlgorithm

logger = get_logger(__name__)


class HmacKey(SigningAlgorithm, VerifyingAlgorithm):
    """
    A secret key bound to one SHA-2 digest.

    The key holds a pristine keyed MAC that is never updated. Every sign or
    verify call works on its own copy of it, so one instance can be reused
    across calls and shared between threads.
    """

    def __init__(
        self,
        secret: bytes | bytearray | str,
        digest: type[hashes.HashAlgorithm] | hashes.HashAlgorithm = hashes.SHA256,
    ) -> None:
        """
        Args:
            secret: Raw secret; ``str`` secrets are UTF-8 encoded
            digest: One of ``hashes.SHA256``, ``hashes.SHA384``, ``hashes.SHA512``

        Raises:
            UnsupportedAlgorithmError: If the digest is not registered
            KeyInitializationError: If the secret cannot key the MAC
        """
        self._algorithm_type = algorithm_type_for(digest)
        self._digest_type = digest_type_of(digest)

        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if not isinstance(secret, (bytes, bytearray)):
            raise KeyInitializationError(
                f"HMAC secret must be bytes or str, got {type(secret).__name__}"
            )
        if not secret:
            raise KeyInitializationError("HMAC secret must not be empty")

        try:
            self._pristine: hmac.HMAC | None = hmac.HMAC(bytes(secret), self._digest_type())
        except (TypeError, ValueError) as e:
            raise KeyInitializationError(f"Cannot initialize HMAC key: {e}") from e

        self._lock = threading.Lock()

    @classmethod
    def from_algorithm(cls, algorithm: AlgorithmType | str, secret: bytes | bytearray | str) -> Self:
        """Build a key for a JWA ``alg`` name such as ``"HS384"``."""
        return cls(secret, digest_for(algorithm))

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        """Build a key from the configured algorithm and secret."""
        if settings.secret is None:
            raise KeyInitializationError("No signing secret configured")
        return cls.from_algorithm(settings.algorithm, settings.secret.get_secret_value())

    @property
    def algorithm_type(self) -> AlgorithmType:
        return self._algorithm_type

    @property
    def digest_size(self) -> int:
        """Length of the raw signature in bytes."""
        return self._digest_type.digest_size

    @property
    def closed(self) -> bool:
        return self._pristine is None

    def _mac_for(self, header: str, claims: str) -> hmac.HMAC:
        with self._lock:
            if self._pristine is None:
                raise KeyInitializationError("HMAC key has been closed")
            mac = self._pristine.copy()
        mac.update(build_message(header, claims))
        return mac

    def sign(self, header: str, claims: str) -> str:
        """
        Sign ``header.claims``.

        Returns:
            Base64 URL-safe signature without padding
        """
        return b64url_encode_nopad(self._mac_for(header, claims).finalize())

    def verify_bytes(self, header: str, claims: str, signature: bytes) -> bool:
        """
        Compare ``signature`` to the expected MAC in constant time.

        A length mismatch is a failed verification, not an error.

        Raises:
            EncodingError: If ``signature`` is not a bytes-like value
        """
        if not isinstance(signature, (bytes, bytearray, memoryview)):
            raise EncodingError(
                f"Signature must be bytes, got {type(signature).__name__}"
            )

        mac = self._mac_for(header, claims)
        try:
            mac.verify(bytes(signature))
        except InvalidSignature:
            logger.warning("Signature verification failed", algorithm=str(self._algorithm_type))
            return False
        return True

    def close(self) -> None:
        """Drop the keyed MAC state. Later operations raise KeyInitializationError."""
        with self._lock:
            self._pristine = None

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"HmacKey(algorithm={self._algorithm_type.value}, {state})"

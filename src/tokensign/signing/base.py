"""Abstract signing and verifying interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod

from tokensign.common.encoding import b64url_decode_nopad
from tokensign.signing.algorithms import AlgorithmType


class SigningAlgorithm(ABC):
    """Produces signatures over a ``header.claims`` signing input."""

    @property
    @abstractmethod
    def algorithm_type(self) -> AlgorithmType:
        """Tag of the algorithm this signer executes."""

    @abstractmethod
    def sign(self, header: str, claims: str) -> str:
        """
        Sign ``header`` and ``claims``.

        Returns:
            Base64 URL-safe signature without padding
        """


class VerifyingAlgorithm(ABC):
    """Checks signatures over a ``header.claims`` signing input."""

    @property
    @abstractmethod
    def algorithm_type(self) -> AlgorithmType:
        """Tag of the algorithm this verifier executes."""

    @abstractmethod
    def verify_bytes(self, header: str, claims: str, signature: bytes) -> bool:
        """Return True if ``signature`` is the raw signature of the input."""

    def verify(self, header: str, claims: str, signature: str) -> bool:
        """
        Verify a base64url-encoded signature.

        Raises:
            EncodingError: If ``signature`` is not valid unpadded base64url.
                A well-formed but wrong signature returns False instead.
        """
        return self.verify_bytes(header, claims, b64url_decode_nopad(signature))


def sign(signer: SigningAlgorithm, header: str, claims: str) -> str:
    """Sign with ``signer``."""
    return signer.sign(header, claims)


def verify(verifier: VerifyingAlgorithm, header: str, claims: str, signature: str) -> bool:
    """Verify base64url ``signature`` text with ``verifier``."""
    return verifier.verify(header, claims, signature)


def verify_bytes(
    verifier: VerifyingAlgorithm,
    header: str,
    claims: str,
    signature: bytes,
) -> bool:
    """Verify a raw ``signature`` with ``verifier``."""
    return verifier.verify_bytes(header, claims, signature)

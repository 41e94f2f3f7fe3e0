"""Algorithm tags and the digest-to-algorithm registry."""

from __future__ import annotations

from enum import Enum

from cryptography.hazmat.primitives import hashes

from tokensign.common.errors import UnsupportedAlgorithmError


class AlgorithmType(str, Enum):
    """JWA identifiers for the supported HMAC constructions."""

    HS256 = "HS256"
    HS384 = "HS384"
    HS512 = "HS512"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str | AlgorithmType) -> AlgorithmType:
        """Parse a JWA ``alg`` value. Names are case-sensitive."""
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedAlgorithmError(f"Unsupported algorithm: {name!r}") from None


# Closed set: exact hash classes only, subclasses are not registered.
_DIGEST_ALGORITHMS: dict[type[hashes.HashAlgorithm], AlgorithmType] = {
    hashes.SHA256: AlgorithmType.HS256,
    hashes.SHA384: AlgorithmType.HS384,
    hashes.SHA512: AlgorithmType.HS512,
}

_ALGORITHM_DIGESTS: dict[AlgorithmType, type[hashes.HashAlgorithm]] = {
    algorithm: digest for digest, algorithm in _DIGEST_ALGORITHMS.items()
}


def digest_type_of(digest: type[hashes.HashAlgorithm] | hashes.HashAlgorithm) -> type:
    """Normalize a hash class or instance to its class."""
    return digest if isinstance(digest, type) else type(digest)


def algorithm_type_for(
    digest: type[hashes.HashAlgorithm] | hashes.HashAlgorithm,
) -> AlgorithmType:
    """
    Resolve the algorithm tag bound to a digest type.

    Args:
        digest: A registered ``cryptography`` hash class, or an instance of one

    Returns:
        The AlgorithmType paired with the digest

    Raises:
        UnsupportedAlgorithmError: If the digest type is not registered
    """
    digest_type = digest_type_of(digest)
    try:
        return _DIGEST_ALGORITHMS[digest_type]
    except KeyError:
        name = getattr(digest_type, "__name__", repr(digest_type))
        raise UnsupportedAlgorithmError(f"No algorithm registered for digest {name}") from None


def digest_for(algorithm: AlgorithmType | str) -> type[hashes.HashAlgorithm]:
    """Return the hash class bound to ``algorithm``."""
    return _ALGORITHM_DIGESTS[AlgorithmType.from_name(algorithm)]


def signature_length(algorithm: AlgorithmType | str) -> int:
    """Raw signature length in bytes for ``algorithm``."""
    return digest_for(algorithm).digest_size


def supported_algorithms() -> tuple[AlgorithmType, ...]:
    """All supported algorithms in registry order."""
    return tuple(AlgorithmType)

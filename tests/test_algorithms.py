"""Tests for algorithm tags and the digest registry."""

import pytest
from cryptography.hazmat.primitives import hashes

from tokensign.common.errors import UnsupportedAlgorithmError
from tokensign.signing.algorithms import (
    AlgorithmType,
    algorithm_type_for,
    digest_for,
    signature_length,
    supported_algorithms,
)


class TestAlgorithmType:
    """Test the AlgorithmType enumeration."""

    def test_closed_set(self):
        """Test exactly the HMAC SHA-2 algorithms are supported."""
        assert supported_algorithms() == (
            AlgorithmType.HS256,
            AlgorithmType.HS384,
            AlgorithmType.HS512,
        )

    def test_string_tags(self):
        """Test tags are the JWA names."""
        assert AlgorithmType.HS256.value == "HS256"
        assert str(AlgorithmType.HS384) == "HS384"
        assert f"{AlgorithmType.HS512}" == "HS512"
        assert AlgorithmType.HS256 == "HS256"

    def test_from_name(self):
        """Test parsing names."""
        assert AlgorithmType.from_name("HS512") is AlgorithmType.HS512
        assert AlgorithmType.from_name(AlgorithmType.HS256) is AlgorithmType.HS256

    @pytest.mark.parametrize("name", ["hs256", "HS1024", "RS256", "none", ""])
    def test_from_name_rejects_unknown(self, name):
        """Test unknown or differently-cased names are rejected."""
        with pytest.raises(UnsupportedAlgorithmError):
            AlgorithmType.from_name(name)


class TestDigestBinding:
    """Test digest-to-algorithm binding."""

    @pytest.mark.parametrize(
        "digest,expected",
        [
            (hashes.SHA256, AlgorithmType.HS256),
            (hashes.SHA384, AlgorithmType.HS384),
            (hashes.SHA512, AlgorithmType.HS512),
        ],
    )
    def test_algorithm_type_for_class(self, digest, expected):
        """Test resolving tags from hash classes."""
        assert algorithm_type_for(digest) is expected

    def test_algorithm_type_for_instance(self):
        """Test resolving tags from hash instances."""
        assert algorithm_type_for(hashes.SHA384()) is AlgorithmType.HS384

    @pytest.mark.parametrize("digest", [hashes.SHA1, hashes.SHA224, hashes.SHA3_256, hashes.MD5])
    def test_unregistered_digest(self, digest):
        """Test unregistered digests are rejected."""
        with pytest.raises(UnsupportedAlgorithmError):
            algorithm_type_for(digest)

    def test_subclass_not_registered(self):
        """Test the registry matches exact classes only."""

        class CustomSHA256(hashes.SHA256):
            pass

        with pytest.raises(UnsupportedAlgorithmError):
            algorithm_type_for(CustomSHA256)

    def test_digest_for_round_trip(self):
        """Test reverse lookup agrees with forward lookup."""
        for algorithm in AlgorithmType:
            assert algorithm_type_for(digest_for(algorithm)) is algorithm

    def test_digest_for_name(self):
        """Test reverse lookup by name."""
        assert digest_for("HS384") is hashes.SHA384

    def test_signature_length(self):
        """Test signature lengths follow digest sizes."""
        assert signature_length(AlgorithmType.HS256) == 32
        assert signature_length("HS384") == 48
        assert signature_length(AlgorithmType.HS512) == 64


class TestModuleDocumentation:
    """Test the public registry helpers are documented."""

    @pytest.mark.parametrize(
        "func",
        [algorithm_type_for, digest_for, signature_length, supported_algorithms],
        ids=lambda f: f.__name__,
    )
    def test_public_functions_have_docstrings(self, func):
        """Test each public helper carries a docstring."""
        assert func.__doc__ and func.__doc__.strip()

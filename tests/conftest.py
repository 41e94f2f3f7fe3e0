"""Pytest configuration and fixtures."""

import pytest

from tokensign.common.settings import Settings, get_settings
from tokensign.signing import AlgorithmType, HmacKey

JWT_HEADER = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9"
JWT_CLAIMS = "eyJzdWIiOiIxMjM0NTY3ODkwIiwibmFtZSI6IkpvaG4gRG9lIiwiYWRtaW4iOnRydWV9"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the environment in every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Create test settings."""
    return Settings(
        _env_file=None,
        algorithm="HS256",
        secret="secret",
    )


@pytest.fixture
def hs256_key() -> HmacKey:
    """HS256 key for the jwt.io example token."""
    return HmacKey(b"secret")


@pytest.fixture(params=list(AlgorithmType), ids=lambda alg: alg.value)
def any_key(request: pytest.FixtureRequest) -> HmacKey:
    """A key for each supported algorithm."""
    return HmacKey.from_algorithm(request.param, b"test-secret")


@pytest.fixture
def sample_segments() -> tuple[str, str]:
    """Encoded header and claims of the jwt.io example token."""
    return JWT_HEADER, JWT_CLAIMS

"""Pytest configuration and fixtures."""

import os

import pytest

# Set test environment
os.environ["SPROUTKEYS_ENVIRONMENT"] = "test"
os.environ["SPROUTKEYS_DEBUG"] = "true"
os.environ.pop("SPROUTKEYS_SEED_ITERATIONS", None)
os.environ.pop("SPROUTKEYS_LEGACY_SEED_ITERATIONS", None)

from sproutkeys.config import get_settings

from vectors import ZERO_PAYLOAD, encode_key


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def zero_key_mainnet() -> str:
    """Mainnet spending key with an all-zero payload."""
    return encode_key(ZERO_PAYLOAD, "mainnet")


@pytest.fixture
def zero_key_testnet() -> str:
    """Testnet spending key with an all-zero payload."""
    return encode_key(ZERO_PAYLOAD, "testnet")

"""Spending key generation.

Keys are 32-byte payloads with the top nibble of byte 0 cleared, prefixed
with the network's key header and base58check-encoded.

Two sources are supported:
- create_key: fresh randomness from the OS CSPRNG
- create_key_from_seed: PBKDF2-HMAC-SHA256 stretch of a seed and salt,
  run on a worker thread so the event loop is not blocked
"""

import asyncio
import hashlib
import logging
import secrets
from typing import Optional, Union

import base58

from sproutkeys.config import get_settings
from sproutkeys.errors import (
    InvalidEncodingError,
    InvalidKeyError,
    InvalidKeyTypeError,
    InvalidNetworkError,
    InvalidParameterError,
)
from sproutkeys.networks import get_network
from sproutkeys.prf import PAYLOAD_SIZE, check_payload
from sproutkeys.validation import validate_key, validate_network

logger = logging.getLogger(__name__)

KEY_PREFIX_SIZE = 2

SeedInput = Union[str, bytes, bytearray]


def _clear_reserved_bits(payload: bytes) -> bytes:
    """Clear the top nibble of byte 0."""
    buffer = bytearray(payload)
    buffer[0] &= 0x0F
    return bytes(buffer)


def _as_bytes(value: SeedInput, name: str) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidKeyTypeError(f"{name} must be str or bytes, got {type(value).__name__}")


def _check_iterations(iterations: int) -> int:
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise InvalidParameterError(f"iterations must be a positive integer, got {iterations!r}")
    return iterations


def _require_network(network: str):
    if not validate_network(network):
        logger.warning(f"Rejected key request for invalid network {network!r}")
        raise InvalidNetworkError(f"Invalid network choice: {network!r}")
    return get_network(network)


def encode_spending_key(payload: bytes, network: str) -> str:
    """Encode a raw payload as a spending key string.

    Args:
        payload: 32-byte payload with the top nibble of byte 0 clear
        network: "mainnet" or "testnet"

    Returns:
        base58check string of key_prefix || payload

    Raises:
        InvalidNetworkError: If the network is not supported
        InvalidKeyTypeError: If payload is not a byte buffer
        InvalidKeyLengthError: If payload is not 32 bytes
        InvalidKeyError: If the top nibble is set
    """
    profile = _require_network(network)
    payload = check_payload(payload)
    if not validate_key(payload):
        raise InvalidKeyError("Invalid spending key: reserved bits are set")

    return base58.b58encode_check(profile.key_prefix + payload).decode()


def decode_spending_key(encoded_key: str) -> tuple[bytes, bytes]:
    """Decode a spending key string into (prefix, payload).

    The payload length is not checked here; callers validate it.

    Raises:
        InvalidEncodingError: On bad checksum or alphabet, or a non-string key
    """
    if not isinstance(encoded_key, str):
        raise InvalidEncodingError(
            f"Spending key must be a string, got {type(encoded_key).__name__}"
        )

    try:
        decoded = base58.b58decode_check(encoded_key)
    except ValueError as e:
        raise InvalidEncodingError(f"Invalid spending key encoding: {e}") from e

    return decoded[:KEY_PREFIX_SIZE], decoded[KEY_PREFIX_SIZE:]


def create_key(network: str) -> str:
    """Create a new random spending key.

    Args:
        network: "mainnet" or "testnet"

    Returns:
        Encoded spending key

    Raises:
        InvalidNetworkError: If the network is not supported
    """
    profile = _require_network(network)

    payload = _clear_reserved_bits(secrets.token_bytes(PAYLOAD_SIZE))
    encoded = encode_spending_key(payload, profile.name)

    logger.info(f"Created random spending key for {profile.name}")
    return encoded


def stretch_seed(seed: SeedInput, salt: SeedInput, iterations: int) -> bytes:
    """Derive a 32-byte payload from a seed with PBKDF2-HMAC-SHA256.

    The top nibble of byte 0 is cleared so the result is a valid payload.

    Raises:
        InvalidKeyTypeError: If seed or salt is not str or bytes
        InvalidParameterError: If iterations is not a positive integer
    """
    iterations = _check_iterations(iterations)

    derived = hashlib.pbkdf2_hmac(
        "sha256",
        _as_bytes(seed, "seed"),
        _as_bytes(salt, "salt"),
        iterations,
        dklen=PAYLOAD_SIZE,
    )
    return _clear_reserved_bits(derived)


async def create_key_from_seed(
    network: str,
    seed: SeedInput,
    salt: SeedInput,
    iterations: Optional[int] = None,
) -> str:
    """Create a deterministic spending key from a seed and salt.

    The stretch runs in the default thread pool executor. Once started it
    runs to completion: cancelling the awaiting task does not stop the
    worker thread.

    Args:
        network: "mainnet" or "testnet"
        seed: Seed material (str is UTF-8 encoded)
        salt: Salt (str is UTF-8 encoded)
        iterations: PBKDF2 iterations (defaults to settings)

    Returns:
        Encoded spending key

    Raises:
        InvalidNetworkError: If the network is not supported
        InvalidKeyTypeError: If seed or salt is not str or bytes
        InvalidParameterError: If iterations is not a positive integer
    """
    profile = _require_network(network)

    if iterations is None:
        iterations = get_settings().get_seed_iterations()

    # Reject bad inputs before any work is scheduled
    iterations = _check_iterations(iterations)
    seed = _as_bytes(seed, "seed")
    salt = _as_bytes(salt, "salt")

    # Run in thread pool for async
    loop = asyncio.get_running_loop()
    payload = await loop.run_in_executor(
        None,
        lambda: stretch_seed(seed, salt, iterations),
    )

    encoded = encode_spending_key(payload, profile.name)

    logger.info(f"Created seed-derived spending key for {profile.name} ({iterations} iterations)")
    return encoded

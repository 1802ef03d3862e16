"""Shielded address assembly and encoding.

A shielded address is base58check(addr_prefix || a_pk || pk_enc):

    2 bytes   network address header
    32 bytes  a_pk    = PRF^addr(payload, 0)
    32 bytes  pk_enc  = X25519 base-point multiple of PRF^addr(payload, 1)

The 66-byte body always encodes to 95 characters.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import base58

from sproutkeys.errors import (
    ErrorKind,
    InvalidAddressLengthError,
    InvalidEncodingError,
    InvalidKeyError,
    InvalidKeyHeaderError,
    InvalidNetworkError,
    KeyDerivationError,
)
from sproutkeys.keygen import decode_spending_key
from sproutkeys.networks import NetworkProfile, get_network, network_for_address_prefix
from sproutkeys.prf import PAYLOAD_SIZE, check_payload, enc_prf_addr, paying_key
from sproutkeys.validation import validate_key, validate_network

logger = logging.getLogger(__name__)

ADDRESS_PREFIX_SIZE = 2
ADDRESS_SIZE = ADDRESS_PREFIX_SIZE + 2 * PAYLOAD_SIZE  # 66
ENCODED_ADDRESS_LENGTH = 95


@dataclass
class ShieldedAddressInfo:
    """Information about a shielded address."""

    address: str
    network: str
    paying_key: str  # a_pk, hex
    transmission_key: str  # pk_enc, hex


@dataclass
class AddressResult:
    """Result of a key to address conversion.

    Attributes:
        success: Whether conversion succeeded
        address: Encoded shielded address
        error_kind: Kind of failure if conversion failed
        error: Error message if conversion failed
    """
    success: bool
    address: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None


def _decode_for_network(encoded_key: str, network: str) -> tuple[NetworkProfile, bytes]:
    """Validate the network and key and return (profile, payload)."""
    if not validate_network(network):
        raise InvalidNetworkError(f"Invalid network choice: {network!r}")
    profile = get_network(network)

    prefix, payload = decode_spending_key(encoded_key)
    payload = check_payload(payload)

    if not validate_key(payload):
        raise InvalidKeyError("Invalid spending key: reserved bits are set")

    if prefix[0] != profile.key_prefix[0] or prefix[1] != profile.key_prefix[1]:
        raise InvalidKeyHeaderError(
            f"Invalid spending key header {prefix.hex()} for {profile.name}"
        )

    return profile, payload


def _build_address(profile: NetworkProfile, payload: bytes) -> tuple[str, bytes, bytes]:
    a_pk = paying_key(payload)
    pk_enc = enc_prf_addr(payload)

    address = base58.b58encode_check(profile.addr_prefix + a_pk + pk_enc).decode()
    if len(address) != ENCODED_ADDRESS_LENGTH:
        raise InvalidAddressLengthError(
            f"Invalid zaddr length: {len(address)} (expected {ENCODED_ADDRESS_LENGTH})"
        )

    return address, a_pk, pk_enc


def convert_key_to_address(encoded_key: str, network: str) -> str:
    """Convert an encoded spending key to its shielded address.

    Args:
        encoded_key: base58check spending key (SK... / ST...)
        network: "mainnet" or "testnet"

    Returns:
        Encoded shielded address (zc... / zt...)

    Raises:
        InvalidNetworkError: If the network is not supported
        InvalidEncodingError: If the key fails base58check decoding
        InvalidKeyLengthError: If the decoded payload is not 32 bytes
        InvalidKeyError: If the payload's reserved bits are set
        InvalidKeyHeaderError: If the key header belongs to another network
        InvalidAddressLengthError: If the encoded address is not 95 characters
    """
    try:
        profile, payload = _decode_for_network(encoded_key, network)
    except KeyDerivationError as e:
        logger.warning(f"Key conversion rejected ({e.kind.value}): {e.message}")
        raise

    address, _, _ = _build_address(profile, payload)
    logger.debug(f"Derived {profile.name} shielded address {address}")
    return address


def derive_address_info(encoded_key: str, network: str) -> ShieldedAddressInfo:
    """Derive a shielded address along with its key components."""
    profile, payload = _decode_for_network(encoded_key, network)
    address, a_pk, pk_enc = _build_address(profile, payload)

    return ShieldedAddressInfo(
        address=address,
        network=profile.name,
        paying_key=a_pk.hex(),
        transmission_key=pk_enc.hex(),
    )


def try_convert_key_to_address(encoded_key: str, network: str) -> AddressResult:
    """Convert a key to an address, reporting failure as a value.

    Returns:
        AddressResult with the address or the error kind
    """
    try:
        address = convert_key_to_address(encoded_key, network)
    except KeyDerivationError as e:
        return AddressResult(success=False, error_kind=e.kind, error=e.message)

    return AddressResult(success=True, address=address)


def decode_address(address: str, network: Optional[str] = None) -> ShieldedAddressInfo:
    """Parse an encoded shielded address.

    Args:
        address: Encoded shielded address
        network: If given, the address header must belong to this network

    Returns:
        ShieldedAddressInfo with the embedded keys

    Raises:
        InvalidNetworkError: If network is given and not supported
        InvalidEncodingError: If the address fails base58check decoding
        InvalidAddressLengthError: If the decoded body is not 66 bytes
        InvalidKeyHeaderError: If the header is unknown or for another network
    """
    expected = get_network(network) if network is not None else None

    if not isinstance(address, str):
        raise InvalidEncodingError(f"Address must be a string, got {type(address).__name__}")

    try:
        decoded = base58.b58decode_check(address)
    except ValueError as e:
        raise InvalidEncodingError(f"Invalid address encoding: {e}") from e

    if len(decoded) != ADDRESS_SIZE:
        raise InvalidAddressLengthError(
            f"Invalid zaddr length: decoded {len(decoded)} bytes (expected {ADDRESS_SIZE})"
        )

    profile = network_for_address_prefix(decoded[:ADDRESS_PREFIX_SIZE])
    if expected is not None and profile.name != expected.name:
        raise InvalidKeyHeaderError(
            f"Address belongs to {profile.name}, expected {expected.name}"
        )

    body = decoded[ADDRESS_PREFIX_SIZE:]
    return ShieldedAddressInfo(
        address=address,
        network=profile.name,
        paying_key=body[:PAYLOAD_SIZE].hex(),
        transmission_key=body[PAYLOAD_SIZE:].hex(),
    )

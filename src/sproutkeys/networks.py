"""Network profiles for Sprout spending keys and shielded addresses.

Each network has two 2-byte headers:
- key_prefix: prepended to a spending key payload (encodes to SK... / ST...)
- addr_prefix: prepended to a shielded address (encodes to zc... / zt...)

The table is built once at import time and never mutated.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from sproutkeys.errors import InvalidKeyHeaderError, InvalidNetworkError


@dataclass(frozen=True)
class NetworkProfile:
    """Header bytes for one network."""

    name: str
    key_prefix: bytes
    addr_prefix: bytes


# ======================
# Network Profiles
# ======================

NETWORKS: Mapping[str, NetworkProfile] = MappingProxyType({
    "mainnet": NetworkProfile(
        name="mainnet",
        key_prefix=bytes([0xAB, 0x36]),
        addr_prefix=bytes([0x16, 0x9A]),
    ),
    "testnet": NetworkProfile(
        name="testnet",
        key_prefix=bytes([0xAC, 0x08]),
        addr_prefix=bytes([0x16, 0xB6]),
    ),
})


def get_supported_networks() -> list[str]:
    """Get list of supported network identifiers."""
    return list(NETWORKS.keys())


def get_network(network_id: str) -> NetworkProfile:
    """Get the profile for a network.

    Args:
        network_id: Exactly "mainnet" or "testnet"

    Returns:
        NetworkProfile for the network

    Raises:
        InvalidNetworkError: If the network is not supported
    """
    profile = NETWORKS.get(network_id) if isinstance(network_id, str) else None
    if profile is None:
        raise InvalidNetworkError(f"Invalid network choice: {network_id!r}")
    return profile


def network_for_key_prefix(prefix: bytes) -> NetworkProfile:
    """Find the network whose spending key header equals prefix."""
    for profile in NETWORKS.values():
        if profile.key_prefix == bytes(prefix):
            return profile
    raise InvalidKeyHeaderError(f"Unknown spending key header: {bytes(prefix).hex()}")


def network_for_address_prefix(prefix: bytes) -> NetworkProfile:
    """Find the network whose address header equals prefix."""
    for profile in NETWORKS.values():
        if profile.addr_prefix == bytes(prefix):
            return profile
    raise InvalidKeyHeaderError(f"Unknown address header: {bytes(prefix).hex()}")

"""Network and spending key validation."""

from typing import Optional

from sproutkeys.networks import NETWORKS

# High nibble of byte 0 is reserved for PRF domain separation
KEY_RESERVED_MASK = 0xF0


def validate_network(network_id: Optional[str]) -> bool:
    """Check that network_id is a supported network string."""
    if network_id is None or not isinstance(network_id, str):
        return False
    return network_id in NETWORKS


def validate_key(payload: Optional[bytes]) -> bool:
    """Check that a spending key payload lies in the PRF input domain.

    The payload must be present and have the top four bits of its first
    byte cleared.
    """
    if not payload:
        return False
    return (payload[0] & KEY_RESERVED_MASK) == 0

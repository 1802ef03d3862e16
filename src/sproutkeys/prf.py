"""PRF^addr: derivation of the paying key and encryption public key.

Both values come from a single SHA-256 compression over a 64-byte block:

    byte 0      payload[0] | 0xC0   (marks the addr PRF)
    bytes 1-31  payload[1:32]
    byte 32     t                   (0 = paying key, 1 = encryption key seed)
    bytes 33-63 zero

The encryption key seed is turned into a Curve25519 public key by base-point
scalar multiplication (libsodium clamps the scalar per X25519).
"""

import hashlib

from nacl.bindings import crypto_scalarmult_base

from sproutkeys.errors import InvalidKeyLengthError, InvalidKeyTypeError, InvalidParameterError

PAYLOAD_SIZE = 32
PRF_BLOCK_SIZE = 64
PRF_ADDR_MARKER = 0xC0

T_PAYING_KEY = 0
T_ENCRYPTION_KEY = 1


def check_payload(payload) -> bytes:
    """Validate payload type and length and return it as bytes."""
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise InvalidKeyTypeError(
            f"Invalid key instance: expected bytes, got {type(payload).__name__}"
        )

    payload = bytes(payload)
    if len(payload) != PAYLOAD_SIZE:
        raise InvalidKeyLengthError(
            f"Invalid key length: expected {PAYLOAD_SIZE} bytes, got {len(payload)}"
        )
    return payload


def prf_addr(payload: bytes, t: int) -> bytes:
    """Compute PRF^addr(payload, t).

    Args:
        payload: 32-byte spending key payload
        t: 0 for the paying key, 1 for the encryption key seed

    Returns:
        Raw 32-byte SHA-256 digest

    Raises:
        InvalidKeyTypeError: If payload is not a byte buffer
        InvalidKeyLengthError: If payload is not 32 bytes
        InvalidParameterError: If t is not 0 or 1
    """
    payload = check_payload(payload)
    if t not in (T_PAYING_KEY, T_ENCRYPTION_KEY):
        raise InvalidParameterError(f"PRF selector must be 0 or 1, got {t!r}")

    block = bytearray(PRF_BLOCK_SIZE)
    block[:PAYLOAD_SIZE] = payload
    block[0] |= PRF_ADDR_MARKER
    block[PAYLOAD_SIZE] = t

    return hashlib.sha256(bytes(block)).digest()


def paying_key(payload: bytes) -> bytes:
    """Derive a_pk, the paying key."""
    return prf_addr(payload, T_PAYING_KEY)


def enc_prf_addr(payload: bytes) -> bytes:
    """Derive pk_enc, the Curve25519 encryption public key.

    Equal to X25519(clamp(PRF^addr(payload, 1)), 9).
    """
    seed = prf_addr(payload, T_ENCRYPTION_KEY)
    return crypto_scalarmult_base(seed)

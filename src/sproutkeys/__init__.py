"""Sprout spending key and shielded address derivation."""

from sproutkeys.address import (
    AddressResult,
    ShieldedAddressInfo,
    convert_key_to_address,
    decode_address,
    derive_address_info,
    try_convert_key_to_address,
)
from sproutkeys.errors import (
    ErrorKind,
    InvalidAddressLengthError,
    InvalidEncodingError,
    InvalidKeyError,
    InvalidKeyHeaderError,
    InvalidKeyLengthError,
    InvalidKeyTypeError,
    InvalidNetworkError,
    InvalidParameterError,
    KeyDerivationError,
)
from sproutkeys.keygen import (
    create_key,
    create_key_from_seed,
    decode_spending_key,
    encode_spending_key,
)
from sproutkeys.networks import NetworkProfile, get_network, get_supported_networks
from sproutkeys.prf import enc_prf_addr, prf_addr

__version__ = "0.1.0"

__all__ = [
    "create_key",
    "create_key_from_seed",
    "convert_key_to_address",
    "derive_address_info",
    "decode_address",
    "try_convert_key_to_address",
    "encode_spending_key",
    "decode_spending_key",
    "prf_addr",
    "enc_prf_addr",
    "NetworkProfile",
    "get_network",
    "get_supported_networks",
    "AddressResult",
    "ShieldedAddressInfo",
    "ErrorKind",
    "KeyDerivationError",
    "InvalidNetworkError",
    "InvalidKeyError",
    "InvalidKeyLengthError",
    "InvalidKeyTypeError",
    "InvalidEncodingError",
    "InvalidKeyHeaderError",
    "InvalidAddressLengthError",
    "InvalidParameterError",
]

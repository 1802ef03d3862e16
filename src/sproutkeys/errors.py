"""Error taxonomy for key and address derivation.

Every failure raised by this package is a KeyDerivationError subclass
bound to exactly one ErrorKind, so callers can branch on `exc.kind`
instead of parsing messages.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of derivation failure."""
    INVALID_NETWORK = "invalid_network"
    INVALID_KEY = "invalid_key"                        # top nibble of the payload is set
    INVALID_KEY_LENGTH = "invalid_key_length"
    INVALID_KEY_TYPE = "invalid_key_type"
    INVALID_ENCODING = "invalid_encoding"              # base58check decode failed
    INVALID_KEY_HEADER = "invalid_key_header"          # prefix does not match the network
    INVALID_ADDRESS_LENGTH = "invalid_address_length"
    INVALID_PARAMETER = "invalid_parameter"            # iteration count or PRF selector out of range


class KeyDerivationError(Exception):
    """Base exception for all derivation failures."""

    kind: ErrorKind = ErrorKind.INVALID_KEY

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(kind={self.kind.value}, message={self.message!r})"


class InvalidNetworkError(KeyDerivationError):
    """Exception raised for an unknown network identifier."""
    kind = ErrorKind.INVALID_NETWORK


class InvalidKeyError(KeyDerivationError):
    """Exception raised when a spending key payload is structurally invalid."""
    kind = ErrorKind.INVALID_KEY


class InvalidKeyLengthError(InvalidKeyError):
    """Exception raised when a payload is not 32 bytes long."""
    kind = ErrorKind.INVALID_KEY_LENGTH


class InvalidKeyTypeError(InvalidKeyError):
    """Exception raised when a payload is not a byte buffer."""
    kind = ErrorKind.INVALID_KEY_TYPE


class InvalidEncodingError(KeyDerivationError):
    """Exception raised when a base58check string cannot be decoded."""
    kind = ErrorKind.INVALID_ENCODING


class InvalidKeyHeaderError(KeyDerivationError):
    """Exception raised when a decoded prefix does not match the network."""
    kind = ErrorKind.INVALID_KEY_HEADER


class InvalidAddressLengthError(KeyDerivationError):
    """Exception raised when an encoded address has the wrong length."""
    kind = ErrorKind.INVALID_ADDRESS_LENGTH


class InvalidParameterError(KeyDerivationError):
    """Exception raised for an out-of-range iteration count or PRF selector."""
    kind = ErrorKind.INVALID_PARAMETER

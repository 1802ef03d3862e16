"""Tests for PRF^addr and the encryption key derivation."""

import hashlib

import pytest
from nacl.bindings import crypto_scalarmult_base

from sproutkeys.errors import (
    ErrorKind,
    InvalidKeyError,
    InvalidKeyLengthError,
    InvalidKeyTypeError,
    InvalidParameterError,
)
from sproutkeys.prf import enc_prf_addr, paying_key, prf_addr

from vectors import (
    COUNTING_A_PK,
    COUNTING_ENC_SEED,
    COUNTING_PAYLOAD,
    COUNTING_PK_ENC,
    ZERO_A_PK,
    ZERO_ENC_SEED,
    ZERO_PAYLOAD,
    ZERO_PK_ENC,
)


class TestPrfAddr:
    """Tests for prf_addr."""

    def test_zero_payload_paying_key(self):
        """Test a_pk for the all-zero payload."""
        assert prf_addr(ZERO_PAYLOAD, 0).hex() == ZERO_A_PK

    def test_zero_payload_encryption_seed(self):
        """Test the t=1 output for the all-zero payload."""
        assert prf_addr(ZERO_PAYLOAD, 1).hex() == ZERO_ENC_SEED

    def test_matches_raw_sha256_of_block(self):
        """Test the output is a single SHA-256 over the 64-byte block."""
        block = bytes([0xC0]) + bytes(31) + bytes([0x00]) + bytes(31)
        assert len(block) == 64
        assert prf_addr(ZERO_PAYLOAD, 0) == hashlib.sha256(block).digest()

    def test_marker_only_touches_first_byte(self):
        """Test the rest of the payload is copied unchanged."""
        assert prf_addr(COUNTING_PAYLOAD, 0).hex() == COUNTING_A_PK
        assert prf_addr(COUNTING_PAYLOAD, 1).hex() == COUNTING_ENC_SEED

    def test_marker_bits_are_absorbed(self):
        """Test payloads differing only in the top two bits give the same output."""
        marked = bytes([0xC0]) + bytes(31)
        assert prf_addr(marked, 0) == prf_addr(ZERO_PAYLOAD, 0)

    def test_selector_changes_output(self):
        """Test t=0 and t=1 give different digests."""
        assert prf_addr(ZERO_PAYLOAD, 0) != prf_addr(ZERO_PAYLOAD, 1)

    def test_deterministic(self):
        """Test repeated calls give identical output."""
        results = {prf_addr(COUNTING_PAYLOAD, 0) for _ in range(5)}
        assert len(results) == 1

    def test_accepts_bytearray_and_memoryview(self):
        """Test any byte buffer is accepted."""
        expected = prf_addr(COUNTING_PAYLOAD, 0)
        assert prf_addr(bytearray(COUNTING_PAYLOAD), 0) == expected
        assert prf_addr(memoryview(COUNTING_PAYLOAD), 0) == expected

    def test_input_is_not_modified(self):
        """Test the caller's buffer keeps its first byte."""
        buffer = bytearray(32)
        prf_addr(buffer, 0)
        assert buffer[0] == 0

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_wrong_length_raises(self, length):
        """Test payloads that are not 32 bytes are rejected."""
        with pytest.raises(InvalidKeyLengthError) as exc_info:
            prf_addr(bytes(length), 0)
        assert exc_info.value.kind == ErrorKind.INVALID_KEY_LENGTH

    @pytest.mark.parametrize("payload", [None, "0" * 32, 42, list(range(32))])
    def test_wrong_type_raises(self, payload):
        """Test non-buffer payloads are rejected."""
        with pytest.raises(InvalidKeyTypeError) as exc_info:
            prf_addr(payload, 0)
        assert exc_info.value.kind == ErrorKind.INVALID_KEY_TYPE
        assert isinstance(exc_info.value, InvalidKeyError)

    @pytest.mark.parametrize("t", [2, -1, 255])
    def test_invalid_selector_raises(self, t):
        """Test t outside {0, 1} is rejected."""
        with pytest.raises(InvalidParameterError) as exc_info:
            prf_addr(ZERO_PAYLOAD, t)
        assert exc_info.value.kind == ErrorKind.INVALID_PARAMETER


class TestEncPrfAddr:
    """Tests for enc_prf_addr."""

    def test_zero_payload(self):
        """Test pk_enc for the all-zero payload."""
        assert enc_prf_addr(ZERO_PAYLOAD).hex() == ZERO_PK_ENC

    def test_counting_payload(self):
        """Test pk_enc for the 00..1f payload."""
        assert enc_prf_addr(COUNTING_PAYLOAD).hex() == COUNTING_PK_ENC

    def test_is_base_point_multiple_of_prf(self):
        """Test pk_enc equals the X25519 base multiple of PRF(payload, 1)."""
        for payload in (ZERO_PAYLOAD, COUNTING_PAYLOAD):
            assert enc_prf_addr(payload) == crypto_scalarmult_base(prf_addr(payload, 1))

    def test_output_length(self):
        """Test pk_enc is 32 bytes."""
        assert len(enc_prf_addr(COUNTING_PAYLOAD)) == 32

    def test_differs_from_paying_key(self):
        """Test pk_enc and a_pk differ."""
        assert enc_prf_addr(ZERO_PAYLOAD) != paying_key(ZERO_PAYLOAD)

    def test_wrong_length_raises(self):
        """Test short payloads are rejected."""
        with pytest.raises(InvalidKeyLengthError):
            enc_prf_addr(bytes(16))

    def test_wrong_type_raises(self):
        """Test non-buffer payloads are rejected."""
        with pytest.raises(InvalidKeyTypeError):
            enc_prf_addr("not bytes")

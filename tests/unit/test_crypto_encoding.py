"""Tests for octet string / integer conversions."""
import pytest

from pbrsa.core.crypto.utils.encoding import (
    build_signing_input,
    concat,
    i2osp,
    int_to_bytes,
    os2ip,
    to_bytes,
)
from pbrsa.core.exceptions import BlindRSAError, ErrorCode, IntegerTooLargeError


class TestI2OSP:
    """Test suite for i2osp."""

    def test_fixed_width_big_endian(self):
        """Test output is left-padded big-endian."""
        assert i2osp(1, 4) == b'\x00\x00\x00\x01'
        assert i2osp(0x0102, 2) == b'\x01\x02'

    def test_zero(self):
        """Test zero encodes to all-zero octets."""
        assert i2osp(0, 3) == b'\x00\x00\x00'

    def test_largest_value_fits(self):
        """Test 256**len - 1 still fits."""
        assert i2osp(256 ** 2 - 1, 2) == b'\xff\xff'

    def test_too_large_raises(self):
        """Test x >= 256**len raises IntegerTooLargeError."""
        with pytest.raises(IntegerTooLargeError) as exc_info:
            i2osp(256 ** 2, 2)

        assert exc_info.value.error_code is ErrorCode.INTEGER_TOO_LARGE
        assert isinstance(exc_info.value, BlindRSAError)

    def test_negative_raises(self):
        """Test negative integers are rejected."""
        with pytest.raises(ValueError):
            i2osp(-1, 4)

    def test_non_positive_length_raises(self):
        """Test zero length is rejected."""
        with pytest.raises(ValueError):
            i2osp(0, 0)


class TestOS2IP:
    """Test suite for os2ip."""

    def test_decode(self):
        """Test big-endian decoding."""
        assert os2ip(b'\x01\x00') == 256

    def test_leading_zeros_ignored(self):
        """Test leading zero octets do not change the value."""
        assert os2ip(b'\x00\x00\x2a') == 42

    def test_empty(self):
        """Test empty input decodes to zero."""
        assert os2ip(b'') == 0

    @pytest.mark.parametrize('value,length', [
        (0, 1),
        (255, 1),
        (2 ** 64 + 7, 16),
        (2 ** 2047 + 1, 256),
    ])
    def test_inverse_of_i2osp(self, value, length):
        """Test os2ip undoes i2osp."""
        assert os2ip(i2osp(value, length)) == value


class TestHelpers:
    """Test suite for byte helpers."""

    def test_int_to_bytes_matches_i2osp(self):
        """Test int_to_bytes is the fixed-width encoding."""
        assert int_to_bytes(9, 4) == i2osp(9, 4)

    def test_concat_preserves_order(self):
        """Test concatenation order."""
        assert concat([b'ab', b'', b'c']) == b'abc'

    def test_to_bytes_encodes_text(self):
        """Test str input is UTF-8 encoded."""
        assert to_bytes('hé') == 'hé'.encode('utf-8')
        assert to_bytes(bytearray(b'x')) == b'x'

    def test_to_bytes_rejects_other_types(self):
        """Test non-bytes input raises TypeError."""
        with pytest.raises(TypeError):
            to_bytes(12)


class TestBuildSigningInput:
    """Test suite for build_signing_input."""

    def test_layout(self):
        """Test "msg" || len4(info) || info || message layout."""
        result = build_signing_input(b'hello', b'ctx')

        assert result == b'msg' + b'\x00\x00\x00\x03' + b'ctx' + b'hello'

    def test_empty_info(self):
        """Test empty info still gets a 4-byte length."""
        assert build_signing_input(b'm', b'') == b'msg\x00\x00\x00\x00m'

    def test_length_prefix_disambiguates(self):
        """Test shifting bytes between info and message changes the input."""
        assert build_signing_input(b'bc', b'a') != build_signing_input(b'c', b'ab')

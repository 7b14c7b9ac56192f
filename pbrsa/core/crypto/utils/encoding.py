"""Octet string / integer conversions (RFC 8017 §4) and byte helpers."""
from typing import Iterable, Union

from Crypto.Math.Numbers import Integer

from ...exceptions import IntegerTooLargeError

SIGNING_INPUT_PREFIX = b'msg'
INFO_LENGTH_OCTETS = 4


def i2osp(x: Union[int, Integer], length: int) -> bytes:
    """
    Encodes a non-negative integer as exactly ``length`` big-endian bytes.

    Raises:
        IntegerTooLargeError: If ``x >= 256 ** length``
        ValueError: If ``x`` is negative or ``length`` is not positive
    """
    if length <= 0:
        raise ValueError(f"Output length must be positive, got {length}")
    value = int(x)
    if value < 0:
        raise ValueError("Cannot encode a negative integer")
    if value >> (8 * length):
        raise IntegerTooLargeError(f"integer too large for {length} octets")
    return Integer(value).to_bytes(length)


def os2ip(data: bytes) -> Integer:
    """Decodes big-endian bytes into a non-negative integer."""
    if not data:
        return Integer(0)
    return Integer.from_bytes(bytes(data))


def int_to_bytes(value: int, length: int) -> bytes:
    """Fixed-width unsigned big-endian encoding (same contract as i2osp)."""
    return i2osp(value, length)


def concat(parts: Iterable[bytes]) -> bytes:
    """Concatenates byte strings in order."""
    return b''.join(bytes(part) for part in parts)


def to_bytes(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    """Converts text (UTF-8) or any bytes-like value into bytes."""
    if isinstance(data, str):
        return data.encode()
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Expected str or bytes, got {type(data).__name__}")


def build_signing_input(message: bytes, info: bytes) -> bytes:
    """
    Builds the message that is actually PSS-encoded and signed.

    The layout is ``"msg" || I2OSP(len(info), 4) || info || message``; the
    fixed-width length prefix keeps (info, message) pairs unambiguous.
    """
    message = to_bytes(message)
    info = to_bytes(info)
    return concat([
        SIGNING_INPUT_PREFIX,
        int_to_bytes(len(info), INFO_LENGTH_OCTETS),
        info,
        message,
    ])

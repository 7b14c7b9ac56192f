"""
Big-integer capability.

Thin adapter over pycryptodome's ``Integer`` so the protocol code never
touches a particular backend directly. Modular exponentiation goes through
``Integer.__pow__``, which uses the library's Montgomery ladder (or GMP)
rather than CPython's generic ``pow``.
"""
from typing import Callable, Optional, Union

from Crypto.Math.Numbers import Integer
from Crypto.Random import get_random_bytes

IntegerLike = Union[int, Integer]
RandFunc = Callable[[int], bytes]

DEFAULT_MAX_SAMPLING_ATTEMPTS = 128


def to_integer(value: IntegerLike) -> Integer:
    """Returns ``value`` as an ``Integer`` (no copy if it already is one)."""
    if isinstance(value, Integer):
        return value
    return Integer(int(value))


def mod_pow(base: IntegerLike, exponent: IntegerLike, modulus: IntegerLike) -> Integer:
    """Computes ``base ** exponent mod modulus``."""
    return pow(to_integer(base), to_integer(exponent), to_integer(modulus))


def mod_mul(a: IntegerLike, b: IntegerLike, modulus: IntegerLike) -> Integer:
    """Computes ``a * b mod modulus``."""
    return (to_integer(a) * to_integer(b)) % to_integer(modulus)


def mod_inverse(value: IntegerLike, modulus: IntegerLike) -> Optional[Integer]:
    """
    Computes the inverse of ``value`` modulo ``modulus``.

    Returns:
        The inverse, or None when ``value`` is not invertible
    """
    try:
        return to_integer(value).inverse(to_integer(modulus))
    except ValueError:
        return None


def gcd(a: IntegerLike, b: IntegerLike) -> Integer:
    return to_integer(a).gcd(to_integer(b))


def is_coprime(a: IntegerLike, b: IntegerLike) -> bool:
    """True when ``gcd(a, b) == 1``."""
    return gcd(a, b) == 1


def bit_length(value: IntegerLike) -> int:
    return int(value).bit_length()


def byte_length(value: IntegerLike) -> int:
    """Number of octets needed to hold ``value``."""
    return (bit_length(value) + 7) // 8


def random_integer_uniform(bound: IntegerLike, randfunc: Optional[RandFunc] = None,
                           max_attempts: int = DEFAULT_MAX_SAMPLING_ATTEMPTS) -> Integer:
    """
    Samples an integer uniformly from ``[1, bound)``.

    Candidates are drawn as ``byte_length(bound)`` random octets with the
    bits above ``bit_length(bound)`` cleared, and rejected until one falls
    in range.

    Raises:
        ValueError: If no candidate was accepted within ``max_attempts``
    """
    bound = to_integer(bound)
    if bound <= 1:
        raise ValueError("Bound must be greater than 1")
    randfunc = randfunc or get_random_bytes
    num_bytes = byte_length(bound)
    excess_bits = 8 * num_bytes - bit_length(bound)

    for _ in range(max_attempts):
        candidate = bytearray(randfunc(num_bytes))
        candidate[0] &= 0xFF >> excess_bits
        r = Integer.from_bytes(bytes(candidate))
        if 0 < r < bound:
            return r

    raise ValueError(f"Reached maximum tries ({max_attempts}) for random integer generation")

"""
Big-integer arithmetic capability.
"""
from .bigint import (
    IntegerLike,
    to_integer,
    mod_pow,
    mod_mul,
    mod_inverse,
    gcd,
    is_coprime,
    bit_length,
    byte_length,
    random_integer_uniform,
)

__all__ = [
    'IntegerLike',
    'to_integer',
    'mod_pow',
    'mod_mul',
    'mod_inverse',
    'gcd',
    'is_coprime',
    'bit_length',
    'byte_length',
    'random_integer_uniform',
]

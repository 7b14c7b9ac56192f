"""Shared utilities for the crypto module."""
from .encoding import (
    i2osp,
    os2ip,
    int_to_bytes,
    concat,
    to_bytes,
    build_signing_input,
)

__all__ = [
    'i2osp',
    'os2ip',
    'int_to_bytes',
    'concat',
    'to_bytes',
    'build_signing_input',
]

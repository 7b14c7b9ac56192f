"""
Hash function family.
"""
from .hash_registry import HashAlgorithm, get_hash, supported_hashes

__all__ = [
    'HashAlgorithm',
    'get_hash',
    'supported_hashes',
]

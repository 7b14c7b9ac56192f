"""Named hash function family shared by PSS, MGF1 and HKDF."""
from dataclasses import dataclass
from typing import Any, Dict

from Crypto.Hash import SHA256, SHA384, SHA512
from cryptography.hazmat.primitives import hashes


@dataclass(frozen=True)
class HashAlgorithm:
    """
    A hash function known under one canonical name.

    Attributes:
        name: Canonical name, e.g. ``SHA-384``
        module: pycryptodome hash module (PSS encoding and verification)
        kdf_algorithm: ``cryptography`` hash class (HKDF)
    """
    name: str
    module: Any
    kdf_algorithm: type

    @property
    def digest_size(self) -> int:
        """Output length in bytes."""
        return self.module.digest_size

    @property
    def compact_name(self) -> str:
        """Name without the dash, as used in protocol identifiers."""
        return self.name.replace('-', '', 1)

    def new(self, data: bytes = b''):
        """Returns a fresh pycryptodome hash object over ``data``."""
        return self.module.new(data)

    def digest(self, data: bytes) -> bytes:
        """Hashes ``data`` in one shot."""
        return self.module.new(data).digest()


_ALGORITHMS: Dict[str, HashAlgorithm] = {
    'SHA256': HashAlgorithm('SHA-256', SHA256, hashes.SHA256),
    'SHA384': HashAlgorithm('SHA-384', SHA384, hashes.SHA384),
    'SHA512': HashAlgorithm('SHA-512', SHA512, hashes.SHA512),
}


def _normalize(name: str) -> str:
    return name.strip().upper().replace('-', '').replace('_', '')


def get_hash(name: str) -> HashAlgorithm:
    """
    Looks up a hash algorithm by name.

    Accepts ``SHA-384``, ``sha384``, ``SHA_384`` and similar spellings.

    Raises:
        ValueError: If the hash is not supported
    """
    if not isinstance(name, str):
        raise ValueError(f"Hash name must be a string, got {type(name).__name__}")
    try:
        return _ALGORITHMS[_normalize(name)]
    except KeyError:
        raise ValueError(f"Unsupported hash function: {name}") from None


def supported_hashes() -> tuple:
    """Canonical names of all supported hash functions."""
    return tuple(alg.name for alg in _ALGORITHMS.values())

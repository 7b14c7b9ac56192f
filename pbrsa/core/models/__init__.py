"""Data models for keys and protocol messages."""
from .keys import PublicKey, SecretKey, KeyPair
from .messages import BlindOutput

__all__ = [
    'PublicKey',
    'SecretKey',
    'KeyPair',
    'BlindOutput',
]

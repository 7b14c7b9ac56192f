"""RSA primitives, key import and PSS verification."""
from .primitives import rsasp1, rsavp1
from .key_importer import RSAKeyImporter
from .pss_verifier import PSSVerifier

__all__ = [
    'rsasp1',
    'rsavp1',
    'RSAKeyImporter',
    'PSSVerifier',
]

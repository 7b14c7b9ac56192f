"""Cryptographic building blocks of the partially blind RSA protocol."""
from .utils import i2osp, os2ip, int_to_bytes, concat, build_signing_input
from .hashing import HashAlgorithm, get_hash
from .pss import EMSAPSSEncoder, emsa_pss_encode
from .key_derivation import ContextKeyDeriver
from .rsa import rsasp1, rsavp1, RSAKeyImporter, PSSVerifier

__all__ = [
    'i2osp',
    'os2ip',
    'int_to_bytes',
    'concat',
    'build_signing_input',
    'HashAlgorithm',
    'get_hash',
    'EMSAPSSEncoder',
    'emsa_pss_encode',
    'ContextKeyDeriver',
    'rsasp1',
    'rsavp1',
    'RSAKeyImporter',
    'PSSVerifier',
]

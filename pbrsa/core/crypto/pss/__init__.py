"""
PSS message encoding.
"""
from .encoder import EMSAPSSEncoder, emsa_pss_encode, mgf1

__all__ = [
    'EMSAPSSEncoder',
    'emsa_pss_encode',
    'mgf1',
]

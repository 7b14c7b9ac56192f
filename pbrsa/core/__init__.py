"""Core components: configuration, errors, logging, key models and crypto."""
from .config import ProtocolParams, PrepareType, SUITES
from .exceptions import (
    ErrorCode,
    BlindRSAError,
    InvalidKeyError,
    EncodingError,
    InvalidInputError,
    BlindingError,
    SigningFailureError,
    UnexpectedInputSizeError,
    InvalidSignatureError,
    KeyDerivationError,
    IntegerTooLargeError,
    RepresentativeOutOfRangeError,
)
from .models import PublicKey, SecretKey, KeyPair, BlindOutput

__all__ = [
    'ProtocolParams',
    'PrepareType',
    'SUITES',
    'ErrorCode',
    'BlindRSAError',
    'InvalidKeyError',
    'EncodingError',
    'InvalidInputError',
    'BlindingError',
    'SigningFailureError',
    'UnexpectedInputSizeError',
    'InvalidSignatureError',
    'KeyDerivationError',
    'IntegerTooLargeError',
    'RepresentativeOutOfRangeError',
    'PublicKey',
    'SecretKey',
    'KeyPair',
    'BlindOutput',
]

"""
pbrsa - Partially blind RSA signatures for Python.

Usage:
    >>> from pbrsa import PartiallyBlindRSA, ProtocolParams
    >>>
    >>> engine = PartiallyBlindRSA(ProtocolParams.sha384_pss_randomized())
    >>> msg = engine.prepare(b"hello")
    >>> out = engine.blind(public_key, msg, b"context")
    >>> blind_sig = engine.blind_sign(secret_key, out.blinded_message, b"context")
    >>> sig = engine.finalize(public_key, msg, b"context", blind_sig, out.inv)
"""
import logging
from .partially_blind_rsa import PartiallyBlindRSA

# Configuration
from .core.config import ProtocolParams, PrepareType, SUITES

# Keys and messages
from .core.models import PublicKey, SecretKey, KeyPair, BlindOutput

# Logging
from .core.logging import ROOT_LOGGER_NAME

# Errors
from .core.exceptions import (
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

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for pbrsa modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        ROOT_LOGGER_NAME,
        'pbrsa.partially_blind_rsa',
        'pbrsa.core.crypto.pss.encoder',
        'pbrsa.core.crypto.key_derivation.context_key_deriver',
        'pbrsa.core.crypto.rsa.key_importer',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'PartiallyBlindRSA',
    'ProtocolParams',
    'PrepareType',
    'SUITES',
    'PublicKey',
    'SecretKey',
    'KeyPair',
    'BlindOutput',
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
    'setup_logging',
]

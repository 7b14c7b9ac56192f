"""
Custom exceptions for the partially blind RSA protocol.

Every failure is fail-fast and carries an ``ErrorCode`` tag so callers can
branch on ``error.error_code`` as well as on the exception class.
"""
from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Machine-readable error tags."""
    INVALID_KEY = 'invalid key'
    ENCODING_ERROR = 'encoding error'
    INVALID_INPUT = 'invalid input'
    BLINDING_ERROR = 'blinding error'
    SIGNING_FAILURE = 'signing failure'
    UNEXPECTED_INPUT_SIZE = 'unexpected input size'
    INVALID_SIGNATURE = 'invalid signature'
    KEY_DERIVATION_ERROR = 'key derivation error'
    INTEGER_TOO_LARGE = 'integer too large'
    REPRESENTATIVE_OUT_OF_RANGE = 'representative out of range'


class BlindRSAError(Exception):
    """Base exception for all protocol errors."""

    code: ErrorCode = None

    def __init__(self, message: Optional[str] = None, error_code: Optional[ErrorCode] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message (defaults to the error code's text)
            error_code: Error tag (defaults to the class tag)
        """
        self.error_code = error_code or self.code
        if message is None and self.error_code is not None:
            message = self.error_code.value
        super().__init__(message)


class InvalidKeyError(BlindRSAError):
    """Wrong key type or usage, missing components, or hash mismatch."""
    code = ErrorCode.INVALID_KEY


class EncodingError(BlindRSAError):
    """PSS encoding parameters are incompatible with the modulus or hash."""
    code = ErrorCode.ENCODING_ERROR


class InvalidInputError(BlindRSAError):
    """Encoded message representative is not coprime to the modulus."""
    code = ErrorCode.INVALID_INPUT


class BlindingError(BlindRSAError):
    """No invertible blinding factor could be sampled."""
    code = ErrorCode.BLINDING_ERROR


class SigningFailureError(BlindRSAError):
    """The signer's self-check on the blind signature failed."""
    code = ErrorCode.SIGNING_FAILURE


class UnexpectedInputSizeError(BlindRSAError):
    """A fixed-width input does not match the modulus byte length."""
    code = ErrorCode.UNEXPECTED_INPUT_SIZE

    def __init__(self, message: Optional[str] = None, expected: Optional[int] = None,
                 actual: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            expected: Required length in bytes
            actual: Length that was supplied
        """
        self.expected = expected
        self.actual = actual
        super().__init__(message)


class InvalidSignatureError(BlindRSAError):
    """The unblinded signature does not verify during finalize."""
    code = ErrorCode.INVALID_SIGNATURE


class KeyDerivationError(BlindRSAError):
    """The derived public exponent is not invertible modulo phi(n)."""
    code = ErrorCode.KEY_DERIVATION_ERROR


class IntegerTooLargeError(BlindRSAError, ValueError):
    """Integer does not fit in the requested number of octets."""
    code = ErrorCode.INTEGER_TOO_LARGE


class RepresentativeOutOfRangeError(BlindRSAError, ValueError):
    """Message or signature representative is not in [0, n)."""
    code = ErrorCode.REPRESENTATIVE_OUT_OF_RANGE

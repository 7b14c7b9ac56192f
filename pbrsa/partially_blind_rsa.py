"""
Partially blind RSA signatures (RSAPBSSA).

A requester obtains an RSA-PSS signature on a message the signer never
sees, with both sides binding the signature to a public ``info`` string.
Each ``info`` selects its own public exponent over the signer's long-term
modulus, so signatures issued under different contexts cannot be linked
through the key.

Flow::

    requester                               signer
    ---------                               ------
    msg = prepare(message)
    out = blind(pk, msg, info)
                        out.blinded_message -->
                                            blind_sig = blind_sign(sk, blinded, info)
                        <-- blind_sig
    sig = finalize(pk, msg, info, blind_sig, out.inv)
    verify(pk, sig, msg, info) is True

Every method is a pure function of its arguments plus the random source.
"""
from typing import Any, Callable, Optional, Union

from Crypto.Random import get_random_bytes

from .core.config import PrepareType, ProtocolParams
from .core.crypto.key_derivation import ContextKeyDeriver
from .core.crypto.math import is_coprime, mod_inverse, mod_mul, random_integer_uniform
from .core.crypto.pss import EMSAPSSEncoder
from .core.crypto.rsa import PSSVerifier, RSAKeyImporter, rsasp1, rsavp1
from .core.crypto.utils import build_signing_input, i2osp, os2ip
from .core.crypto.utils.encoding import to_bytes
from .core.exceptions import (
    BlindingError,
    InvalidInputError,
    InvalidKeyError,
    InvalidSignatureError,
    SigningFailureError,
    UnexpectedInputSizeError,
)
from .core.logging import get_logger
from .core.models import BlindOutput, PublicKey, SecretKey

logger = get_logger(__name__)

BytesLike = Union[str, bytes, bytearray, memoryview]


class PartiallyBlindRSA:
    """
    Protocol engine bound to one ``ProtocolParams``.

    Keys may be given as ``PublicKey``/``SecretKey`` models or as
    ``cryptography`` / pycryptodome RSA key objects.

    Example:
        >>> engine = PartiallyBlindRSA(ProtocolParams.sha384_pss_deterministic())
        >>> out = engine.blind(public_key, b"hello", b"context-1")
        >>> blind_sig = engine.blind_sign(secret_key, out.blinded_message, b"context-1")
        >>> sig = engine.finalize(public_key, b"hello", b"context-1", blind_sig, out.inv)
        >>> engine.verify(public_key, sig, b"hello", b"context-1")
        True
    """

    def __init__(self, params: Optional[ProtocolParams] = None,
                 randfunc: Optional[Callable[[int], bytes]] = None):
        """
        Initializes the engine.

        Args:
            params: Protocol configuration (default SHA384-PSS-Randomized)
            randfunc: Secure random byte source ``randfunc(n) -> bytes``
        """
        self.params = params or ProtocolParams.default()
        self._randfunc = randfunc or get_random_bytes
        self._hash = self.params.hash_algorithm
        self._encoder = EMSAPSSEncoder(self._hash, self.params.salt_length, self._randfunc)
        self._deriver = ContextKeyDeriver(self._hash)
        self._verifier = PSSVerifier(self._hash, self.params.salt_length)
        self._importer = RSAKeyImporter()

    def __str__(self) -> str:
        return self.params.identifier

    def __repr__(self) -> str:
        return f"PartiallyBlindRSA({self.params.identifier!r})"

    def _public_key(self, key: Any) -> PublicKey:
        public_key = self._importer.import_public_key(key, self.params.hash)
        self._check_hash(public_key.hash_name)
        return public_key

    def _secret_key(self, key: Any) -> SecretKey:
        secret_key = self._importer.import_secret_key(key, self.params.hash)
        self._check_hash(secret_key.hash_name)
        return secret_key

    def _check_hash(self, hash_name: Optional[str]):
        if hash_name is None:
            return
        if hash_name.replace('-', '').lower() != self.params.hash.replace('-', '').lower():
            raise InvalidKeyError(f"hash is not {self.params.hash}")

    @staticmethod
    def _check_size(name: str, data: bytes, expected: int):
        if len(data) != expected:
            logger.warning(f"Rejected {name} of {len(data)} bytes, expected {expected}")
            raise UnexpectedInputSizeError(
                f"unexpected input size: {name} must be {expected} bytes, got {len(data)}",
                expected=expected,
                actual=len(data),
            )

    def prepare(self, message: BytesLike) -> bytes:
        """
        Prepares a message for blinding.

        Randomized instances prepend 32 random bytes; deterministic ones
        return the message unchanged. The prepared message is what must be
        passed to ``blind``, ``finalize`` and ``verify``.
        """
        message = to_bytes(message)
        if self.params.prepare_type is PrepareType.DETERMINISTIC:
            return message
        return self._randfunc(self.params.prepare_type.value) + message

    def blind(self, public_key: Any, message: BytesLike, info: BytesLike) -> BlindOutput:
        """
        Blinds a prepared message for the signer.

        Returns:
            The blinded message and the secret blinding inverse

        Raises:
            EncodingError: If the modulus is too small for the PSS parameters
            InvalidInputError: If the encoded message is not coprime to n
            BlindingError: If no invertible blinding factor could be drawn
        """
        pk = self._public_key(public_key)
        k_len = pk.modulus_bytes
        logger.debug(f"Blinding message for {pk.modulus_bits}-bit modulus ({self})")

        msg_prime = build_signing_input(message, info)
        encoded_msg = self._encoder.encode(msg_prime, pk.modulus_bits - 1)
        m = os2ip(encoded_msg)

        if not is_coprime(m, pk.n):
            logger.warning("Encoded message is not coprime to the modulus")
            raise InvalidInputError("invalid input: encoded message is not coprime to the modulus")

        try:
            r = random_integer_uniform(pk.n, self._randfunc, self.params.max_blinding_attempts)
        except ValueError as e:
            raise BlindingError(f"blinding error: {e}") from e
        r_inv = mod_inverse(r, pk.n)
        if r_inv is None:
            raise BlindingError("blinding error: blinding factor is not invertible")

        pk_derived = self._deriver.derive_public_key(pk, info)
        x = rsavp1(pk_derived, r)
        z = mod_mul(m, x, pk.n)

        return BlindOutput(
            blinded_message=i2osp(z, k_len),
            blinding_inverse=i2osp(r_inv, k_len),
        )

    def blind_sign(self, secret_key: Any, blinded_message: bytes, info: BytesLike) -> bytes:
        """
        Signs a blinded message under the key derived for ``info``.

        Raises:
            UnexpectedInputSizeError: If the blinded message is not kLen bytes
            RepresentativeOutOfRangeError: If it encodes an integer >= n
            KeyDerivationError: If the derived exponent has no inverse
            SigningFailureError: If the result fails the signer's self-check
        """
        sk = self._secret_key(secret_key)
        k_len = sk.modulus_bytes
        blinded_message = bytes(blinded_message)
        self._check_size('blinded message', blinded_message, k_len)
        logger.debug(f"Signing blinded message for {sk.modulus_bits}-bit modulus ({self})")

        m = os2ip(blinded_message)
        derived = self._deriver.derive_key_pair(sk, info)
        s = rsasp1(derived.secret_key, m)

        if rsavp1(derived.public_key, s) != m:
            logger.warning("Blind signature failed the self-check")
            raise SigningFailureError("signing failure")

        return i2osp(s, k_len)

    def finalize(self, public_key: Any, message: BytesLike, info: BytesLike,
                 blind_sig: bytes, inv: bytes) -> bytes:
        """
        Unblinds the signer's response and checks the resulting signature.

        Raises:
            UnexpectedInputSizeError: If ``blind_sig`` or ``inv`` is not kLen bytes
            InvalidSignatureError: If the unblinded signature does not verify
        """
        pk = self._public_key(public_key)
        k_len = pk.modulus_bytes
        inv = bytes(inv)
        blind_sig = bytes(blind_sig)
        self._check_size('inverse', inv, k_len)
        self._check_size('blind signature', blind_sig, k_len)

        z = os2ip(blind_sig)
        r_inv = os2ip(inv)
        s = mod_mul(z, r_inv, pk.n)
        sig = i2osp(s, k_len)

        msg_prime = build_signing_input(message, info)
        pk_derived = self._deriver.derive_public_key(pk, info)
        if not self._verifier.verify(pk_derived, msg_prime, sig):
            logger.warning("Unblinded signature failed verification")
            raise InvalidSignatureError("invalid signature")

        logger.debug(f"Finalized signature for {pk.modulus_bits}-bit modulus ({self})")
        return sig

    def verify(self, public_key: Any, signature: bytes, message: BytesLike, info: BytesLike) -> bool:
        """
        Checks a finalized signature against the key derived for ``info``.

        Returns False for any signature mismatch instead of raising.
        """
        pk = self._public_key(public_key)
        pk_derived = self._deriver.derive_public_key(pk, info)
        msg_prime = build_signing_input(message, info)
        return self._verifier.verify(pk_derived, msg_prime, bytes(signature))

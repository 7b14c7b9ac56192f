"""RSASSA-PSS signature verification (RFC 8017 §8.1.2)."""
from Crypto.PublicKey import RSA
from Crypto.Signature import pss

from ..hashing import HashAlgorithm
from ...exceptions import InvalidKeyError
from ...models import PublicKey


class PSSVerifier:
    """Verifies RSASSA-PSS signatures with a fixed hash and salt length."""

    def __init__(self, hash_alg: HashAlgorithm, salt_length: int):
        """Initializes the verifier."""
        self.hash_alg = hash_alg
        self.salt_length = salt_length

    def verify(self, public_key: PublicKey, message: bytes, signature: bytes) -> bool:
        """
        Checks ``signature`` over ``message``.

        Returns:
            True if the signature is valid, False otherwise

        Raises:
            InvalidKeyError: If ``public_key`` is not a usable RSA key
        """
        try:
            rsa_key = RSA.construct((public_key.n, public_key.e))
        except ValueError as e:
            raise InvalidKeyError(f"key has invalid parameters: {e}") from e

        verifier = pss.new(rsa_key, salt_bytes=self.salt_length)
        try:
            verifier.verify(self.hash_alg.new(message), bytes(signature))
        except ValueError:
            return False
        return True

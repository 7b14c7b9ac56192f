"""Imports host RSA key handles into protocol key models."""
from typing import Any, Optional

from Crypto.PublicKey.RSA import RsaKey
from cryptography.hazmat.primitives.asymmetric import rsa

from ...exceptions import InvalidKeyError
from ...logging import get_logger
from ...models import PublicKey, SecretKey

logger = get_logger(__name__)


class RSAKeyImporter:
    """
    Extracts ``(n, e)`` and ``(n, d, p, q)`` from key objects.

    Understands the package's own models, ``cryptography`` RSA keys and
    pycryptodome ``RsaKey`` objects. Private handles are refused where a
    public key is expected and the other way round.
    """

    @staticmethod
    def import_public_key(key: Any, hash_name: Optional[str] = None) -> PublicKey:
        """Converts ``key`` into a ``PublicKey``."""
        if isinstance(key, PublicKey):
            return key
        if isinstance(key, rsa.RSAPublicKey):
            numbers = key.public_numbers()
            logger.debug(f"Imported cryptography public key ({key.key_size} bits)")
            return PublicKey(n=numbers.n, e=numbers.e, hash_name=hash_name)
        if isinstance(key, RsaKey):
            if key.has_private():
                raise InvalidKeyError("key is not an RSA public key")
            logger.debug(f"Imported pycryptodome public key ({key.size_in_bits()} bits)")
            return PublicKey(n=int(key.n), e=int(key.e), hash_name=hash_name)
        raise InvalidKeyError(f"key is not an RSA public key: {type(key).__name__}")

    @staticmethod
    def import_secret_key(key: Any, hash_name: Optional[str] = None) -> SecretKey:
        """Converts ``key`` into a ``SecretKey``."""
        if isinstance(key, SecretKey):
            return key
        if isinstance(key, rsa.RSAPrivateKey):
            numbers = key.private_numbers()
            logger.debug(f"Imported cryptography private key ({key.key_size} bits)")
            return SecretKey(
                n=numbers.public_numbers.n,
                d=numbers.d,
                p=numbers.p,
                q=numbers.q,
                e=numbers.public_numbers.e,
                hash_name=hash_name,
            )
        if isinstance(key, RsaKey):
            if not key.has_private():
                raise InvalidKeyError("key is not an RSA private key")
            logger.debug(f"Imported pycryptodome private key ({key.size_in_bits()} bits)")
            return SecretKey(
                n=int(key.n),
                d=int(key.d),
                p=int(key.p),
                q=int(key.q),
                e=int(key.e),
                hash_name=hash_name,
            )
        raise InvalidKeyError(f"key is not an RSA private key: {type(key).__name__}")

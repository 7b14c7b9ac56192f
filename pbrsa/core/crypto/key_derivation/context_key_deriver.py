"""Context-specific key derivation for partially blind RSA."""
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from ..hashing import HashAlgorithm
from ..math import mod_inverse
from ..utils.encoding import concat, i2osp, os2ip, to_bytes
from ...exceptions import KeyDerivationError
from ...logging import get_logger
from ...models import KeyPair, PublicKey, SecretKey

logger = get_logger(__name__)


class ContextKeyDeriver:
    """
    Derives per-context RSA exponents from a long-term modulus.

    The derived public exponent depends only on ``n``, the public context
    string ``info`` and the hash, so requester, signer and verifier all
    compute the same value. Only the signer, knowing ``p`` and ``q``, can
    compute the matching private exponent.
    """

    LABEL = b'PBRSA'
    KEY_PREFIX = b'key'
    OVERSAMPLE_BYTES = 16

    def __init__(self, hash_alg: HashAlgorithm):
        """Initializes the deriver for one hash function."""
        self.hash_alg = hash_alg

    def derive_exponent(self, n: int, info: bytes) -> int:
        """Computes the derived public exponent ``e'`` for ``(n, info)``."""
        info = to_bytes(info)
        modulus_len = (int(n).bit_length() + 7) // 8
        hkdf_input = concat([self.KEY_PREFIX, info, b'\x00'])
        hkdf_salt = i2osp(n, modulus_len)
        lambda_len = modulus_len // 2
        hkdf_len = lambda_len + self.OVERSAMPLE_BYTES

        hkdf = HKDF(
            algorithm=self.hash_alg.kdf_algorithm(),
            length=hkdf_len,
            salt=hkdf_salt,
            info=self.LABEL,
        )
        expanded = bytearray(hkdf.derive(hkdf_input))

        # Top two bits cleared keeps e' below n; low bit set makes it odd
        expanded[0] &= 0x3F
        expanded[lambda_len - 1] |= 0x01

        return int(os2ip(bytes(expanded[:lambda_len])))

    def derive_public_key(self, public_key: PublicKey, info: bytes) -> PublicKey:
        """Returns ``(n, e')``; the long-term ``e`` does not take part."""
        e_prime = self.derive_exponent(public_key.n, info)
        logger.debug(f"Derived {e_prime.bit_length()}-bit public exponent for {public_key.modulus_bits}-bit modulus")
        return public_key.with_exponent(e_prime)

    def derive_key_pair(self, secret_key: SecretKey, info: bytes) -> KeyPair:
        """
        Returns the derived secret key ``(n, d', p, q)`` and public key ``(n, e')``.

        Raises:
            KeyDerivationError: If ``e'`` is not invertible modulo phi(n)
        """
        e_prime = self.derive_exponent(secret_key.n, info)
        d_prime = mod_inverse(e_prime, secret_key.phi)
        if d_prime is None:
            logger.warning("Derived exponent is not invertible modulo phi(n)")
            raise KeyDerivationError("key derivation error: derived exponent is not invertible")

        derived_secret = SecretKey(
            n=secret_key.n,
            d=int(d_prime),
            p=secret_key.p,
            q=secret_key.q,
            e=e_prime,
            hash_name=secret_key.hash_name,
        )
        derived_public = PublicKey(n=secret_key.n, e=e_prime, hash_name=secret_key.hash_name)
        return KeyPair(secret_key=derived_secret, public_key=derived_public)

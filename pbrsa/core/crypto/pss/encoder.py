"""EMSA-PSS encoding (RFC 8017 §9.1.1)."""
from typing import Callable, Optional

from Crypto.Random import get_random_bytes
from Crypto.Signature.pss import MGF1
from Crypto.Util.strxor import strxor

from ..hashing import HashAlgorithm
from ...exceptions import EncodingError
from ...logging import get_logger

logger = get_logger(__name__)

TRAILER_FIELD = b'\xbc'
PADDING1 = b'\x00' * 8


def mgf1(seed: bytes, mask_len: int, hash_alg: HashAlgorithm) -> bytes:
    """MGF1 mask generation over ``hash_alg``."""
    return MGF1(seed, mask_len, hash_alg.module)


def emsa_pss_encode(message: bytes, em_bits: int, hash_alg: HashAlgorithm, salt: bytes) -> bytes:
    """
    Encodes ``message`` into an ``ceil(em_bits / 8)``-byte PSS block.

    Deterministic for a given salt; callers draw the salt beforehand.

    Args:
        message: Message to encode
        em_bits: Maximal bit length of the integer the block represents
        hash_alg: Hash used for the message digest and for MGF1
        salt: Salt of length ``sLen`` (may be empty)

    Raises:
        EncodingError: If ``em_bits`` is too small for the hash and salt
    """
    h_len = hash_alg.digest_size
    s_len = len(salt)
    em_len = (em_bits + 7) // 8

    m_hash = hash_alg.digest(message)
    if em_len < h_len + s_len + 2:
        raise EncodingError(
            f"encoding error: {em_bits}-bit block cannot hold {hash_alg.name} digest "
            f"and {s_len}-byte salt"
        )

    h = hash_alg.digest(PADDING1 + m_hash + salt)

    ps = b'\x00' * (em_len - s_len - h_len - 2)
    db = ps + b'\x01' + salt
    masked_db = bytearray(strxor(db, mgf1(h, em_len - h_len - 1, hash_alg)))

    # Leftmost 8*emLen - emBits bits must be zero
    masked_db[0] &= 0xFF >> (8 * em_len - em_bits)

    return bytes(masked_db) + h + TRAILER_FIELD


class EMSAPSSEncoder:
    """Randomized EMSA-PSS encoder with a fixed hash and salt length."""

    def __init__(self, hash_alg: HashAlgorithm, salt_length: int,
                 randfunc: Optional[Callable[[int], bytes]] = None):
        """Initializes the encoder."""
        if salt_length < 0:
            raise ValueError("Salt length cannot be negative")
        self.hash_alg = hash_alg
        self.salt_length = salt_length
        self.randfunc = randfunc or get_random_bytes

    def encode(self, message: bytes, em_bits: int, salt: Optional[bytes] = None) -> bytes:
        """Encodes ``message``, drawing a fresh salt unless one is given."""
        if salt is None:
            salt = self.randfunc(self.salt_length) if self.salt_length else b''
        elif len(salt) != self.salt_length:
            raise EncodingError(
                f"encoding error: salt must be {self.salt_length} bytes, got {len(salt)}"
            )
        logger.debug(f"PSS encoding {len(message)} bytes into {em_bits} bits with {self.hash_alg.name}")
        return emsa_pss_encode(message, em_bits, self.hash_alg, salt)

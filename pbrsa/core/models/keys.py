"""
RSA key data models.

Keys are immutable value objects. ``hash_name`` is an optional tag binding a
key to one hash function; protocol instances refuse keys tagged with a
different hash.
"""
from dataclasses import dataclass, field
from typing import Optional

from ..exceptions import InvalidKeyError


def _as_positive_int(value, label: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidKeyError(f"key has invalid parameters: {label} is not an integer") from None
    if number <= 0:
        raise InvalidKeyError(f"key has invalid parameters: {label} must be positive")
    return number


@dataclass(frozen=True)
class PublicKey:
    """
    RSA public key ``(n, e)``.

    Attributes:
        n: Modulus
        e: Public exponent
        hash_name: Hash tag (None leaves the key unbound)
    """
    n: int
    e: int
    hash_name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'n', _as_positive_int(self.n, 'n'))
        object.__setattr__(self, 'e', _as_positive_int(self.e, 'e'))
        if self.n < 3 or not self.n & 1:
            raise InvalidKeyError("key has invalid parameters: modulus must be odd")
        if not 1 < self.e < self.n:
            raise InvalidKeyError("key has invalid parameters: exponent out of range")

    @property
    def modulus_bits(self) -> int:
        """Modulus length in bits."""
        return self.n.bit_length()

    @property
    def modulus_bytes(self) -> int:
        """Modulus length in bytes (``kLen``)."""
        return (self.modulus_bits + 7) // 8

    def with_exponent(self, e: int) -> 'PublicKey':
        """Returns a key over the same modulus with a different exponent."""
        return PublicKey(n=self.n, e=e, hash_name=self.hash_name)


@dataclass(frozen=True)
class SecretKey:
    """
    RSA secret key.

    ``p`` and ``q`` are required: context-specific exponents are computed
    modulo ``phi(n) = (p - 1)(q - 1)``. ``e`` is optional and only used to
    recover the matching public key.
    """
    n: int
    d: int = field(repr=False)
    p: int = field(repr=False)
    q: int = field(repr=False)
    e: Optional[int] = None
    hash_name: Optional[str] = None

    def __post_init__(self):
        for label in ('n', 'd', 'p', 'q'):
            object.__setattr__(self, label, _as_positive_int(getattr(self, label), label))
        if self.e is not None:
            object.__setattr__(self, 'e', _as_positive_int(self.e, 'e'))
        if self.p * self.q != self.n:
            raise InvalidKeyError("key has invalid parameters: n != p * q")

    @property
    def modulus_bits(self) -> int:
        return self.n.bit_length()

    @property
    def modulus_bytes(self) -> int:
        return (self.modulus_bits + 7) // 8

    @property
    def phi(self) -> int:
        """Euler's totient of the modulus."""
        return (self.p - 1) * (self.q - 1)

    def public_key(self) -> PublicKey:
        """
        Returns the public half of this key.

        Raises:
            InvalidKeyError: If the public exponent is unknown
        """
        if self.e is None:
            raise InvalidKeyError("key has invalid parameters: public exponent is unknown")
        return PublicKey(n=self.n, e=self.e, hash_name=self.hash_name)


@dataclass(frozen=True)
class KeyPair:
    """A matching secret/public key pair."""
    secret_key: SecretKey
    public_key: PublicKey

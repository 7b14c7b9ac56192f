"""Raw RSA signature primitives (RFC 8017 §5.2)."""
from Crypto.Math.Numbers import Integer

from ..math import IntegerLike, mod_pow, to_integer
from ...exceptions import RepresentativeOutOfRangeError
from ...models import PublicKey, SecretKey


def rsasp1(secret_key: SecretKey, m: IntegerLike) -> Integer:
    """
    Computes ``m ** d mod n``.

    Raises:
        RepresentativeOutOfRangeError: If ``m`` is not in ``[0, n)``
    """
    m = to_integer(m)
    if not 0 <= m < secret_key.n:
        raise RepresentativeOutOfRangeError("message representative out of range")
    return mod_pow(m, secret_key.d, secret_key.n)


def rsavp1(public_key: PublicKey, s: IntegerLike) -> Integer:
    """
    Computes ``s ** e mod n``.

    Raises:
        RepresentativeOutOfRangeError: If ``s`` is not in ``[0, n)``
    """
    s = to_integer(s)
    if not 0 <= s < public_key.n:
        raise RepresentativeOutOfRangeError("signature representative out of range")
    return mod_pow(s, public_key.e, public_key.n)

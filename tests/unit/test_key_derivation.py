"""Tests for context-specific key derivation."""
import hashlib
import hmac

import pytest

from pbrsa.core.crypto.hashing import get_hash
from pbrsa.core.crypto.key_derivation import ContextKeyDeriver
from pbrsa.core.crypto.key_derivation import context_key_deriver
from pbrsa.core.exceptions import ErrorCode, KeyDerivationError
from pbrsa.core.models import PublicKey


@pytest.fixture
def deriver():
    return ContextKeyDeriver(get_hash('SHA-384'))


class TestDerivePublicKey:
    """Test suite for derive_public_key."""

    def test_deterministic(self, deriver, public_key):
        """Test identical inputs give identical keys."""
        a = deriver.derive_public_key(public_key, b'context-1')
        b = deriver.derive_public_key(public_key, b'context-1')

        assert a == b

    def test_info_changes_exponent(self, deriver, public_key):
        """Test different contexts give different exponents."""
        a = deriver.derive_public_key(public_key, b'context-1')
        b = deriver.derive_public_key(public_key, b'context-2')

        assert a.e != b.e
        assert a.n == b.n == public_key.n

    def test_independent_of_long_term_exponent(self, deriver, public_key):
        """Test only n and info feed the derivation."""
        other = PublicKey(n=public_key.n, e=3)

        assert deriver.derive_public_key(other, b'x').e == deriver.derive_public_key(public_key, b'x').e

    def test_hash_changes_exponent(self, public_key):
        """Test the hash function takes part in derivation."""
        a = ContextKeyDeriver(get_hash('SHA-384')).derive_exponent(public_key.n, b'x')
        b = ContextKeyDeriver(get_hash('SHA-256')).derive_exponent(public_key.n, b'x')

        assert a != b

    @pytest.mark.parametrize('info', [b'', b'a', b'context-1', b'\x00' * 64])
    def test_exponent_shape(self, deriver, public_key, info):
        """Test e' is odd and at most 8*lambda_len - 2 bits."""
        lambda_len = public_key.modulus_bytes // 2
        e_prime = deriver.derive_public_key(public_key, info).e

        assert e_prime & 1 == 1
        assert e_prime.bit_length() <= 8 * lambda_len - 2
        assert e_prime < public_key.n

    def test_keeps_hash_tag(self, deriver, public_key):
        """Test derived keys keep the hash tag."""
        tagged = PublicKey(n=public_key.n, e=public_key.e, hash_name='SHA-384')

        assert deriver.derive_public_key(tagged, b'x').hash_name == 'SHA-384'


class TestDeriveKeyPair:
    """Test suite for derive_key_pair."""

    def test_exponents_are_inverse(self, deriver, secret_key):
        """Test e' * d' = 1 mod phi(n)."""
        pair = deriver.derive_key_pair(secret_key, b'context-1')

        assert (pair.public_key.e * pair.secret_key.d) % secret_key.phi == 1

    def test_matches_public_derivation(self, deriver, secret_key, public_key):
        """Test signer and requester derive the same public key."""
        pair = deriver.derive_key_pair(secret_key, b'context-1')

        assert pair.public_key == deriver.derive_public_key(public_key, b'context-1')

    def test_keeps_factors(self, deriver, secret_key):
        """Test the derived secret key keeps n, p and q."""
        derived = deriver.derive_key_pair(secret_key, b'x').secret_key

        assert (derived.n, derived.p, derived.q) == (secret_key.n, secret_key.p, secret_key.q)

    def test_not_invertible_raises(self, deriver, secret_key, monkeypatch):
        """Test a non-invertible e' raises KeyDerivationError."""
        monkeypatch.setattr(context_key_deriver, 'mod_inverse', lambda value, modulus: None)

        with pytest.raises(KeyDerivationError) as exc_info:
            deriver.derive_key_pair(secret_key, b'x')

        assert exc_info.value.error_code is ErrorCode.KEY_DERIVATION_ERROR


# Fixed odd 1024-bit modulus; derivation only reads n
KNOWN_MODULUS = int('c5' * 127 + 'c7', 16)


def hkdf_sha(digestmod, ikm: bytes, salt: bytes, info: bytes, length: int) -> bytes:
    """RFC 5869 extract-then-expand built on hmac."""
    prk = hmac.new(salt, ikm, digestmod).digest()
    okm, block, counter = b'', b'', 1
    while len(okm) < length:
        block = hmac.new(prk, block + info + bytes([counter]), digestmod).digest()
        okm += block
        counter += 1
    return okm[:length]


def reference_exponent(digestmod, n: int, info: bytes) -> int:
    modulus_len = (n.bit_length() + 7) // 8
    lambda_len = modulus_len // 2
    expanded = bytearray(hkdf_sha(
        digestmod,
        ikm=b'key' + info + b'\x00',
        salt=n.to_bytes(modulus_len, 'big'),
        info=b'PBRSA',
        length=lambda_len + 16,
    ))
    expanded[0] &= 0x3F
    expanded[lambda_len - 1] |= 0x01
    return int.from_bytes(bytes(expanded[:lambda_len]), 'big')


class TestDerivationLayout:
    """Test suite checking derive_exponent against an independent HKDF."""

    @pytest.mark.parametrize('hash_name,digestmod', [
        ('SHA-256', hashlib.sha256),
        ('SHA-384', hashlib.sha384),
        ('SHA-512', hashlib.sha512),
    ])
    @pytest.mark.parametrize('info', [b'', b'context-1', b'metadata\x00\xff'])
    def test_matches_reference(self, hash_name, digestmod, info):
        """Test e' matches a hand-built HKDF with the fixed label and input layout."""
        deriver = ContextKeyDeriver(get_hash(hash_name))

        assert deriver.derive_exponent(KNOWN_MODULUS, info) == reference_exponent(digestmod, KNOWN_MODULUS, info)

    def test_matches_reference_on_fixture_key(self, deriver, public_key):
        """Test the fixture modulus derives the reference exponent."""
        expected = reference_exponent(hashlib.sha384, public_key.n, b'context-1')

        assert deriver.derive_public_key(public_key, b'context-1').e == expected


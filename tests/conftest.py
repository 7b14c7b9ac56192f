"""Pytest fixtures for pbrsa tests."""
from itertools import combinations

import pytest
from Crypto.Math.Primality import generate_probable_safe_prime
from cryptography.hazmat.primitives.asymmetric import rsa

from pbrsa import PublicKey, SecretKey

PUBLIC_EXPONENT = 65537


def generate_safe_prime(bits: int) -> int:
    """Returns a safe prime p = 2p' + 1 of exactly ``bits`` bits."""
    return int(generate_probable_safe_prime(exact_bits=bits))


def generate_test_key(bits: int) -> SecretKey:
    """
    Builds an RSA key from two safe primes.

    Safe primes make phi(n) = 4p'q', so every odd exponent below p' and q'
    is invertible and context derivation never fails.
    """
    primes = []
    while True:
        primes.append(generate_safe_prime(bits // 2))
        for p, q in combinations(primes, 2):
            if p != q and (p * q).bit_length() == bits:
                d = pow(PUBLIC_EXPONENT, -1, (p - 1) * (q - 1))
                return SecretKey(n=p * q, d=d, p=p, q=q, e=PUBLIC_EXPONENT)


def to_cryptography_key(secret_key: SecretKey) -> rsa.RSAPrivateKey:
    """Wraps a SecretKey into a cryptography private key object."""
    p, q, d = secret_key.p, secret_key.q, secret_key.d
    numbers = rsa.RSAPrivateNumbers(
        p=p,
        q=q,
        d=d,
        dmp1=rsa.rsa_crt_dmp1(d, p),
        dmq1=rsa.rsa_crt_dmq1(d, q),
        iqmp=rsa.rsa_crt_iqmp(p, q),
        public_numbers=rsa.RSAPublicNumbers(e=secret_key.e, n=secret_key.n),
    )
    return numbers.private_key()


@pytest.fixture(scope='session')
def secret_key() -> SecretKey:
    """1024-bit secret key built from safe primes."""
    return generate_test_key(1024)


@pytest.fixture(scope='session')
def public_key(secret_key) -> PublicKey:
    """Public half of ``secret_key``."""
    return secret_key.public_key()


@pytest.fixture(scope='session')
def secret_key_2048() -> SecretKey:
    """2048-bit secret key built from safe primes."""
    return generate_test_key(2048)


@pytest.fixture(scope='session')
def public_key_2048(secret_key_2048) -> PublicKey:
    return secret_key_2048.public_key()


@pytest.fixture(scope='session')
def cryptography_private_key(secret_key) -> rsa.RSAPrivateKey:
    """``secret_key`` as a cryptography key object."""
    return to_cryptography_key(secret_key)


@pytest.fixture
def zero_randfunc():
    """Random source that only ever returns zero bytes."""
    return lambda n: b'\x00' * n

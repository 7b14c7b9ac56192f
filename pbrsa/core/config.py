"""
Protocol configuration module.

A protocol instance is fully described by its hash function, PSS salt
length and message preparation mode.
"""
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict

from .crypto.hashing import HashAlgorithm, get_hash

IDENTIFIER_PREFIX = 'RSAPBSSA'

_IDENTIFIER_PATTERN = re.compile(
    r'^RSAPBSSA-(?P<hash>SHA\d+)-(?P<pss>PSS|PSSZERO)-(?P<prepare>Deterministic|Randomized)$'
)


class PrepareType(IntEnum):
    """Message preparation mode; the value is the random prefix length."""
    DETERMINISTIC = 0
    RANDOMIZED = 32

    @property
    def label(self) -> str:
        """Name as used in protocol identifiers."""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> 'PrepareType':
        try:
            return cls[label.upper()]
        except KeyError:
            raise ValueError(f"Unknown prepare type: {label}") from None


@dataclass(frozen=True)
class ProtocolParams:
    """
    Protocol instance configuration.

    Attributes:
        hash: Hash function name (normalised to e.g. ``SHA-384``)
        salt_length: PSS salt length in bytes (0 selects PSSZERO)
        prepare_type: Deterministic or randomized message preparation
        max_blinding_attempts: Bound on blinding-factor rejection sampling
    """
    hash: str = 'SHA-384'
    salt_length: int = 48
    prepare_type: PrepareType = PrepareType.RANDOMIZED
    max_blinding_attempts: int = 128

    def __post_init__(self):
        object.__setattr__(self, 'hash', get_hash(self.hash).name)
        if isinstance(self.salt_length, bool) or not isinstance(self.salt_length, int):
            raise ValueError("Salt length must be an integer")
        if self.salt_length < 0:
            raise ValueError("Salt length cannot be negative")
        try:
            object.__setattr__(self, 'prepare_type', PrepareType(self.prepare_type))
        except ValueError:
            raise ValueError(f"Unknown prepare type: {self.prepare_type!r}") from None
        if self.max_blinding_attempts < 1:
            raise ValueError("max_blinding_attempts must be at least 1")

    @property
    def hash_algorithm(self) -> HashAlgorithm:
        return get_hash(self.hash)

    @property
    def identifier(self) -> str:
        """Canonical identifier, e.g. ``RSAPBSSA-SHA384-PSS-Randomized``."""
        pss_type = 'PSS' + ('ZERO' if self.salt_length == 0 else '')
        return f"{IDENTIFIER_PREFIX}-{self.hash_algorithm.compact_name}-{pss_type}-{self.prepare_type.label}"

    def __str__(self) -> str:
        return self.identifier

    @classmethod
    def default(cls) -> 'ProtocolParams':
        """Create default configuration (SHA384-PSS-Randomized)."""
        return cls()

    @classmethod
    def from_identifier(cls, identifier: str) -> 'ProtocolParams':
        """
        Parses a canonical identifier.

        PSS variants use a salt as long as the hash output, PSSZERO uses
        no salt.

        Raises:
            ValueError: If the identifier is malformed or names an
                unsupported hash
        """
        match = _IDENTIFIER_PATTERN.match(identifier.strip())
        if not match:
            raise ValueError(f"Invalid protocol identifier: {identifier}")
        hash_alg = get_hash(match.group('hash'))
        salt_length = 0 if match.group('pss') == 'PSSZERO' else hash_alg.digest_size
        return cls(
            hash=hash_alg.name,
            salt_length=salt_length,
            prepare_type=PrepareType.from_label(match.group('prepare')),
        )

    @classmethod
    def sha384_pss_randomized(cls) -> 'ProtocolParams':
        return cls('SHA-384', 48, PrepareType.RANDOMIZED)

    @classmethod
    def sha384_psszero_randomized(cls) -> 'ProtocolParams':
        return cls('SHA-384', 0, PrepareType.RANDOMIZED)

    @classmethod
    def sha384_pss_deterministic(cls) -> 'ProtocolParams':
        return cls('SHA-384', 48, PrepareType.DETERMINISTIC)

    @classmethod
    def sha384_psszero_deterministic(cls) -> 'ProtocolParams':
        return cls('SHA-384', 0, PrepareType.DETERMINISTIC)


SUITES: Dict[str, ProtocolParams] = {
    params.identifier: params
    for params in (
        ProtocolParams.sha384_pss_randomized(),
        ProtocolParams.sha384_psszero_randomized(),
        ProtocolParams.sha384_pss_deterministic(),
        ProtocolParams.sha384_psszero_deterministic(),
    )
}

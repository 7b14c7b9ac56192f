"""Protocol message data models."""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class BlindOutput:
    """
    Result of ``blind``.

    Attributes:
        blinded_message: Sent to the signer, ``kLen`` bytes
        blinding_inverse: Kept by the requester for ``finalize``, ``kLen`` bytes

    The inverse is secret and never leaves the requester.
    """
    blinded_message: bytes
    blinding_inverse: bytes = field(repr=False)

    @property
    def inv(self) -> bytes:
        """Short alias for ``blinding_inverse``."""
        return self.blinding_inverse

"""Salt source and key derivation protocols."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from stringhasher.core.types import DigestAlgorithm


@runtime_checkable
class SaltSource(Protocol):
    """Supplier of cryptographically secure random bytes."""

    def token(self, nbytes: int) -> bytes:
        """Return *nbytes* random bytes."""
        ...


@runtime_checkable
class KeyDerivation(Protocol):
    """Deterministic password-based key derivation."""

    def derive(
        self,
        value: str,
        salt: bytes,
        *,
        iterations: int,
        algorithm: DigestAlgorithm,
        length: int,
    ) -> bytes:
        """Stretch *value* into *length* pseudorandom bytes."""
        ...

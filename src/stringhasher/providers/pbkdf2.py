"""PBKDF2-HMAC key derivation (stdlib ``hashlib``)."""

from __future__ import annotations

import hashlib

from stringhasher.core.types import DigestAlgorithm


class PBKDF2Derivation:
    """Wraps :func:`hashlib.pbkdf2_hmac`. Values are UTF-8 encoded."""

    def derive(
        self,
        value: str,
        salt: bytes,
        *,
        iterations: int,
        algorithm: DigestAlgorithm,
        length: int,
    ) -> bytes:
        return hashlib.pbkdf2_hmac(
            algorithm.value,
            value.encode("utf-8"),
            salt,
            iterations,
            dklen=length,
        )

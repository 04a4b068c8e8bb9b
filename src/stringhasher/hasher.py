"""User-facing StringHasher — generate and validate salted hashes."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Mapping
from typing import Any

from stringhasher.config import HasherConfig, validate_config
from stringhasher.core import codec
from stringhasher.core.types import DigestAlgorithm
from stringhasher.exceptions import DerivationFailed, SaltGenerationFailed
from stringhasher.providers.base import KeyDerivation, SaltSource
from stringhasher.providers.pbkdf2 import PBKDF2Derivation
from stringhasher.providers.salt import SystemSaltSource

log = logging.getLogger(__name__)


class StringHasher:
    """Salted PBKDF2 hashing of strings into one self-describing hex string.

    >>> hasher = StringHasher(signature="hash512", iterations=1000)
    >>> stored = hasher.generate("qwe123asd456!@#")
    >>> hasher.validate("qwe123asd456!@#", stored)
    True
    """

    def __init__(
        self,
        config: HasherConfig | Mapping[str, Any] | None = None,
        *,
        salt_source: SaltSource | None = None,
        kdf: KeyDerivation | None = None,
        **options: Any,
    ):
        if isinstance(config, HasherConfig):
            if options:
                config = validate_config(config.model_dump(exclude={"derived_length"}), **options)
        else:
            config = validate_config(config, **options)
        self._config = config
        self._salt_source = salt_source or SystemSaltSource()
        self._kdf = kdf or PBKDF2Derivation()
        log.debug(
            "StringHasher ready: algorithm=%s hash_length=%d salt_length=%d iterations=%d",
            config.algorithm.value,
            config.hash_length,
            config.salt_length,
            config.iterations,
        )

    # ------------------------------------------------------------------
    # Read-only settings
    # ------------------------------------------------------------------

    @property
    def config(self) -> HasherConfig:
        return self._config

    @property
    def signature(self) -> str:
        return self._config.signature

    @property
    def algorithm(self) -> DigestAlgorithm:
        return self._config.algorithm

    @property
    def salt_length(self) -> int:
        return self._config.salt_length

    @property
    def hash_length(self) -> int:
        return self._config.hash_length

    @property
    def derived_length(self) -> int:
        return self._config.derived_length

    @property
    def iterations(self) -> int:
        return self._config.iterations

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, value: str) -> str:
        """Hash *value* with a fresh salt.

        Returns ``{signature}{derived hex}{salt hex}``, exactly
        ``hash_length`` characters long.
        """
        salt = self._generate_salt()
        derived = self._derive(value, salt)
        return codec.encode(self._config, derived, salt)

    def validate(self, value: str, hash: str) -> bool:
        """Check a plain-text *value* against a stored *hash*.

        Malformed hashes yield ``False``; only a failing KDF raises.
        """
        if not value or len(hash) != self._config.hash_length:
            log.debug("Rejected hash: empty value or length mismatch")
            return False

        decoded = codec.decode(self._config, hash)
        if decoded is None:
            log.debug("Rejected hash: signature mismatch")
            return False

        try:
            salt = codec.segment_to_bytes(decoded.salt_hex)
            expected = codec.segment_to_bytes(decoded.derived_hex)
        except ValueError:
            log.debug("Rejected hash: non-hex characters")
            return False

        candidate = codec.truncate_derived(
            self._derive(value, salt), self._config.derived_length
        )
        # compare_digest is constant-time only for equal lengths
        if len(candidate) != len(expected):
            return False
        return hmac.compare_digest(candidate, expected)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _generate_salt(self) -> bytes:
        try:
            return self._salt_source.token(codec.salt_byte_length(self._config))
        except Exception as exc:
            log.warning("Salt generation failed: %s", exc)
            raise SaltGenerationFailed(exc) from exc

    def _derive(self, value: str, salt: bytes) -> bytes:
        try:
            return self._kdf.derive(
                value,
                salt,
                iterations=self._config.iterations,
                algorithm=self._config.algorithm,
                length=codec.derived_byte_length(self._config),
            )
        except Exception as exc:
            log.warning("Key derivation failed: %s", exc)
            raise DerivationFailed(exc) from exc

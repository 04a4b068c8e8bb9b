"""Core types for stringhasher."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DigestAlgorithm(str, Enum):
    """HMAC digests accepted for key derivation."""

    sha256 = "sha256"
    sha384 = "sha384"
    sha512 = "sha512"
    sha3_256 = "sha3_256"
    sha3_512 = "sha3_512"

    @classmethod
    def parse(cls, name: str) -> DigestAlgorithm | None:
        """Resolve *name* to a member, or ``None`` if unsupported.

        Accepts the common spellings used by OpenSSL and Node
        (``SHA-512``, ``RSA-SHA512``, ``sha3-256``, ...).
        """
        key = name.strip().lower()
        if key.startswith("rsa-"):
            key = key[4:]
        key = key.replace("sha3-", "sha3_").replace("sha-", "sha")
        try:
            return cls(key)
        except ValueError:
            return None


class DecodedHash(BaseModel):
    """The two hex segments of an encoded hash, as found in the string."""

    model_config = ConfigDict(frozen=True)

    derived_hex: str
    salt_hex: str

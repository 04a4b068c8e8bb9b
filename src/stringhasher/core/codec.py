"""Packing of signature, derived key and salt into one hex string.

Layout (``hash_length`` characters in total)::

    <signature><derived hex><salt hex>

Both hex segments are lower-case with no separators. When ``derived_length``
is odd the last derived byte contributes only its high nibble.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from stringhasher.core.types import DecodedHash

if TYPE_CHECKING:
    from stringhasher.config import HasherConfig


def derived_byte_length(config: HasherConfig) -> int:
    """Bytes the KDF must produce to fill the derived segment."""
    return (config.derived_length + 1) // 2


def salt_byte_length(config: HasherConfig) -> int:
    return config.salt_length // 2


def truncate_derived(derived: bytes, width: int) -> bytes:
    """Return *derived* reduced to what *width* hex characters can carry."""
    nbytes = (width + 1) // 2
    out = bytearray(derived[:nbytes])
    if width % 2 and out:
        out[-1] &= 0xF0
    return bytes(out)


def segment_to_bytes(segment: str) -> bytes:
    """Parse a hex segment, padding an odd trailing nibble with zero.

    Raises ``ValueError`` if *segment* is not hexadecimal.
    """
    if not all(c in string.hexdigits for c in segment):
        raise ValueError(f"non-hex characters in segment {segment!r}")
    if len(segment) % 2:
        segment += "0"
    return bytes.fromhex(segment)


def encode(config: HasherConfig, derived: bytes, salt: bytes) -> str:
    if len(derived) != derived_byte_length(config):
        raise ValueError(
            f"expected {derived_byte_length(config)} derived bytes, got {len(derived)}"
        )
    if len(salt) * 2 != config.salt_length:
        raise ValueError(f"expected {salt_byte_length(config)} salt bytes, got {len(salt)}")
    return f"{config.signature}{derived.hex()[: config.derived_length]}{salt.hex()}"


def decode(config: HasherConfig, encoded: str) -> DecodedHash | None:
    """Split *encoded* into its hex segments.

    Returns ``None`` when the length or the signature prefix does not match
    *config*. Segments are returned as found; no hex parsing happens here.
    """
    if len(encoded) != config.hash_length:
        return None
    sig_len = len(config.signature)
    if encoded[:sig_len] != config.signature:
        return None
    salt_start = config.hash_length - config.salt_length
    return DecodedHash(
        derived_hex=encoded[sig_len:salt_start],
        salt_hex=encoded[salt_start:],
    )

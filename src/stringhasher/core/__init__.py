"""stringhasher core types and codec."""

from stringhasher.core.codec import decode, encode
from stringhasher.core.types import DecodedHash, DigestAlgorithm

__all__ = ["DecodedHash", "DigestAlgorithm", "decode", "encode"]

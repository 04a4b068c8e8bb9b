"""stringhasher — salted, iterated string hashing in one hex string."""

from stringhasher.config import HasherConfig, validate_config
from stringhasher.core.codec import decode, encode
from stringhasher.core.types import DecodedHash, DigestAlgorithm
from stringhasher.exceptions import (
    ConfigError,
    DerivationFailed,
    HashingError,
    HashLengthInvalid,
    IterationsTooLow,
    SaltExceedsHalfOfHash,
    SaltGenerationFailed,
    SaltLengthInvalid,
    SaltLengthOdd,
    SaltPlusSignatureExceedsTwoThirds,
    StringHashError,
    UnsupportedAlgorithm,
)
from stringhasher.hasher import StringHasher

__version__ = "0.1.0"
__all__ = [
    "StringHasher",
    "HasherConfig",
    "validate_config",
    "DigestAlgorithm",
    "DecodedHash",
    "encode",
    "decode",
    "StringHashError",
    "ConfigError",
    "SaltLengthInvalid",
    "HashLengthInvalid",
    "IterationsTooLow",
    "SaltExceedsHalfOfHash",
    "SaltPlusSignatureExceedsTwoThirds",
    "SaltLengthOdd",
    "UnsupportedAlgorithm",
    "HashingError",
    "SaltGenerationFailed",
    "DerivationFailed",
]

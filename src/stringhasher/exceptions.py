"""stringhasher exceptions."""

from __future__ import annotations


class StringHashError(Exception):
    """Base exception for all stringhasher errors."""

    def __init__(self, message: str, inner: BaseException | None = None):
        self.inner = inner
        super().__init__(message)


# ------------------------------------------------------------------
# Configuration
# ------------------------------------------------------------------


class ConfigError(StringHashError):
    """Raised on invalid hasher configuration."""


class SaltLengthInvalid(ConfigError):
    """Raised when the salt length is zero or negative."""

    def __init__(self, salt_length: int):
        self.salt_length = salt_length
        super().__init__(f"Salt length must be greater than zero (got {salt_length})")


class HashLengthInvalid(ConfigError):
    """Raised when the hash length is zero or negative."""

    def __init__(self, hash_length: int):
        self.hash_length = hash_length
        super().__init__(f"Hash length must be greater than zero (got {hash_length})")


class IterationsTooLow(ConfigError):
    """Raised when the iteration count is below the allowed minimum."""

    def __init__(self, iterations: int, minimum: int):
        self.iterations = iterations
        self.minimum = minimum
        super().__init__(f"Iterations count cannot be less than {minimum} (got {iterations})")


class SaltExceedsHalfOfHash(ConfigError):
    """Raised when the salt takes more than half of the encoded hash."""

    def __init__(self, salt_length: int, hash_length: int):
        self.salt_length = salt_length
        self.hash_length = hash_length
        super().__init__(
            f"Salt length ({salt_length}) cannot exceed half of hash length ({hash_length})"
        )


class SaltPlusSignatureExceedsTwoThirds(ConfigError):
    """Raised when salt and signature together take more than 2/3 of the hash."""

    def __init__(self, salt_length: int, signature_length: int, hash_length: int):
        self.salt_length = salt_length
        self.signature_length = signature_length
        self.hash_length = hash_length
        super().__init__(
            f"Salt length ({salt_length}) combined with signature length "
            f"({signature_length}) cannot exceed 2/3 of hash length ({hash_length})"
        )


class SaltLengthOdd(ConfigError):
    """Raised when the salt segment would not decode to whole bytes."""

    def __init__(self, salt_length: int):
        self.salt_length = salt_length
        super().__init__(f"Salt length must be even (got {salt_length})")


class UnsupportedAlgorithm(ConfigError):
    """Raised when the digest algorithm is not in the supported set."""

    def __init__(self, algorithm: object, supported: list[str]):
        self.algorithm = algorithm
        self.supported = supported
        super().__init__(
            f"Unsupported digest algorithm {algorithm!r} (expected one of: {', '.join(supported)})"
        )


# ------------------------------------------------------------------
# Hashing
# ------------------------------------------------------------------


class HashingError(StringHashError):
    """Raised when generating or re-deriving a hash fails."""


class SaltGenerationFailed(HashingError):
    """Raised when the salt source cannot supply random bytes."""

    def __init__(self, inner: BaseException | None = None):
        super().__init__("Unable to generate salt", inner)


class DerivationFailed(HashingError):
    """Raised when the key derivation function fails."""

    def __init__(self, inner: BaseException | None = None):
        super().__init__("Unable to generate hash", inner)

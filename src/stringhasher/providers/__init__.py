"""Salt sources and key derivation functions."""

from stringhasher.providers.base import KeyDerivation, SaltSource
from stringhasher.providers.pbkdf2 import PBKDF2Derivation
from stringhasher.providers.salt import SystemSaltSource

__all__ = ["KeyDerivation", "PBKDF2Derivation", "SaltSource", "SystemSaltSource"]

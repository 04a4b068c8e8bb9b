"""Default salt source backed by the OS CSPRNG."""

from __future__ import annotations

import secrets


class SystemSaltSource:
    """Draws salt from :func:`secrets.token_bytes`."""

    def token(self, nbytes: int) -> bytes:
        return secrets.token_bytes(nbytes)

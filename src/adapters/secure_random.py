"""OS-backed random source.

`secrets.randbelow` draws `upper.bit_length()` random bits from the OS CSPRNG
and rejects values >= upper, so indices carry no modulo bias whatever the
alphabet size.
"""

from __future__ import annotations

import secrets

from core.interfaces.random_source import RandomSource


class SystemRandomSource(RandomSource):
    """`RandomSource` backed by `secrets` (os.urandom)."""

    def randbelow(self, upper: int) -> int:
        if upper < 1:
            raise ValueError("upper must be >= 1")
        return secrets.randbelow(upper)

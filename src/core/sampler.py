"""Password sampler.

Each position is an independent uniform draw from the alphabet, with
replacement. The only shared input between draws is the read-only alphabet.
"""

from __future__ import annotations

from adapters.secure_random import SystemRandomSource
from core.interfaces.random_source import RandomSource


def generate_password(length: int, alphabet: str, *, source: RandomSource | None = None) -> str:
    """Draw `length` characters from `alphabet`.

    An empty alphabet yields ``""`` for any length; callers are expected to
    have refused generation before getting here.
    """

    if length < 0:
        raise ValueError("length must be >= 0")
    if not alphabet:
        return ""

    source = source or SystemRandomSource()
    size = len(alphabet)
    return "".join(alphabet[source.randbelow(size)] for _ in range(length))


def generate_passwords(
    count: int,
    length: int,
    alphabet: str,
    *,
    source: RandomSource | None = None,
) -> list[str]:
    """Generate `count` independent passwords, in generation order."""

    if count < 0:
        raise ValueError("count must be >= 0")
    source = source or SystemRandomSource()
    return [generate_password(length, alphabet, source=source) for _ in range(count)]

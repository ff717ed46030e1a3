"""Generation pipeline: request -> alphabet -> passwords.

The CLI delegates the whole flow to `run_generation` so that printing and
exit codes stay out of the core. An empty alphabet is reported through the
outcome rather than raised; the caller decides how to tell the user.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.charset_builder import build_charset_detailed
from core.domain.models import GenerationRequest, RangeIssue
from core.interfaces.random_source import RandomSource
from core.sampler import generate_passwords

logger = logging.getLogger(__name__)


@dataclass
class GenerationOutcome:
    """Result of one run."""

    alphabet: str
    passwords: list[str] = field(default_factory=list)
    issues: list[RangeIssue] = field(default_factory=list)

    @property
    def empty_charset(self) -> bool:
        return not self.alphabet


def run_generation(
    request: GenerationRequest,
    *,
    strict: bool = False,
    source: RandomSource | None = None,
) -> GenerationOutcome:
    """Build the alphabet for `request` and sample `request.count` passwords.

    Raises `RangeSpecError` under `strict` when the custom range is malformed.
    """

    alphabet, issues = build_charset_detailed(request, strict=strict)
    if not alphabet:
        logger.debug("Empty alphabet, refusing to generate")
        return GenerationOutcome(alphabet="", issues=issues)

    passwords = generate_passwords(request.count, request.length, alphabet, source=source)
    logger.debug("Generated %d password(s) of length %d", len(passwords), request.length)
    return GenerationOutcome(alphabet=alphabet, passwords=passwords, issues=issues)

"""Working alphabet assembly.

Precedence is fixed: "all" (or the selected classes in canonical order),
then the custom range, then similar-character stripping, then the optional
dedupe pass. Duplicates are kept unless `dedupe` is requested, which means
overlapping selections weight the repeated characters proportionally.
"""

from __future__ import annotations

import logging

from core.domain.charsets import SIMILAR_CHARS
from core.domain.models import GenerationRequest, RangeIssue
from core.range_parser import parse_range_detailed, raise_for_issues

logger = logging.getLogger(__name__)


def strip_similar(alphabet: str) -> str:
    for ch in SIMILAR_CHARS:
        alphabet = alphabet.replace(ch, "")
    return alphabet


def dedupe_chars(alphabet: str) -> str:
    """Drop repeated characters, keeping first occurrences in order."""

    return "".join(dict.fromkeys(alphabet))


def build_charset_detailed(
    request: GenerationRequest,
    *,
    strict: bool = False,
) -> tuple[str, list[RangeIssue]]:
    """Build the alphabet and return it with any custom-range diagnostics.

    Under `strict`, a malformed custom range raises `RangeSpecError`
    before anything is returned. Otherwise each issue is logged as a warning
    and the offending part simply contributes no characters.
    """

    parts = [cls.chars for cls in request.selected_classes()]

    issues: list[RangeIssue] = []
    if request.custom_range:
        parsed = parse_range_detailed(request.custom_range)
        if strict:
            raise_for_issues(parsed)
        for issue in parsed.issues:
            logger.warning("Skipping custom range part #%d: %s", issue.index + 1, issue.message)
        issues = parsed.issues
        parts.append(parsed.chars)

    alphabet = "".join(parts)
    if request.exclude_similar:
        alphabet = strip_similar(alphabet)
    if request.dedupe:
        alphabet = dedupe_chars(alphabet)

    logger.debug("Alphabet assembled: %d characters", len(alphabet))
    return alphabet, issues


def build_charset(request: GenerationRequest, *, strict: bool = False) -> str:
    """Return the working alphabet for `request` (possibly empty)."""

    alphabet, _ = build_charset_detailed(request, strict=strict)
    return alphabet

"""Custom range parser.

Turns a spec such as ``"A-F,0-5,xyz"`` into an ordered run of characters.

Rules per comma-separated part (after trimming):
- no ``-``: literal run, every code point appended in order;
- exactly one ``-``: inclusive code-point range between the *last* character
  of each side, so ``"xA-yF"`` means ``A..F``;
- anything else contributes nothing and is reported as a `RangeIssue`.

UTF-16 surrogate code points (U+D800..U+DFFF) are never emitted: they are
not characters and cannot be encoded for output.

The parser never decides what to do with issues. Callers pick a policy:
`raise_for_issues` for strict handling, or log and carry on.
"""

from __future__ import annotations

from core.domain.models import RangeIssue, RangeIssueKind, RangeParseResult


class RangeSpecError(ValueError):
    """Raised under the strict policy when a range spec has malformed parts."""

    def __init__(self, issues: list[RangeIssue]) -> None:
        self.issues = list(issues)
        details = "; ".join(issue.message for issue in self.issues)
        super().__init__(f"Invalid custom range: {details}")


_SURROGATES = range(0xD800, 0xE000)


def _drop_surrogates(chars: str) -> str:
    return "".join(ch for ch in chars if ord(ch) not in _SURROGATES)


def _parse_part(index: int, part: str) -> tuple[str, RangeIssue | None]:
    if "-" not in part:
        return _drop_surrogates(part), None

    if part.count("-") > 1:
        return "", RangeIssue(
            index=index,
            part=part,
            kind=RangeIssueKind.MULTIPLE_DASHES,
            message=f"part {part!r} has more than one '-'",
        )

    left, right = part.rsplit("-", 1)
    if not left or not right:
        return "", RangeIssue(
            index=index,
            part=part,
            kind=RangeIssueKind.MISSING_BOUND,
            message=f"part {part!r} is missing a range bound",
        )

    start, end = ord(left[-1]), ord(right[-1])
    if start > end:
        return "", RangeIssue(
            index=index,
            part=part,
            kind=RangeIssueKind.REVERSED,
            message=f"part {part!r} is reversed ({left[-1]!r} > {right[-1]!r})",
        )

    return "".join(chr(cp) for cp in range(start, end + 1) if cp not in _SURROGATES), None


def parse_range_detailed(spec: str) -> RangeParseResult:
    """Parse `spec` and keep a diagnostic for every part that was dropped."""

    if not spec:
        return RangeParseResult()

    chunks: list[str] = []
    issues: list[RangeIssue] = []
    for index, raw_part in enumerate(spec.split(",")):
        chars, issue = _parse_part(index, raw_part.strip())
        chunks.append(chars)
        if issue is not None:
            issues.append(issue)

    return RangeParseResult(chars="".join(chunks), issues=issues)


def parse_range(spec: str) -> str:
    """Lenient parse: malformed parts are silently skipped."""

    return parse_range_detailed(spec).chars


def raise_for_issues(result: RangeParseResult) -> RangeParseResult:
    if result.issues:
        raise RangeSpecError(result.issues)
    return result

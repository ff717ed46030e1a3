from __future__ import annotations

import pytest

from core.domain.models import RangeIssueKind
from core.range_parser import RangeSpecError, parse_range, parse_range_detailed, raise_for_issues


@pytest.mark.parametrize(
    ("spec", "expected"),
    [
        ("A-F", "ABCDEF"),
        ("0-3", "0123"),
        ("A-C,1-2", "ABC12"),
        ("A-F,1-2", "ABCDEF12"),
        ("X", "X"),
        ("a-c,Z", "abcZ"),
        ("", ""),
    ],
)
def test_parse_range(spec: str, expected: str) -> None:
    assert parse_range(spec) == expected


def test_single_range_covers_every_code_point() -> None:
    chars = parse_range("!-~")
    assert len(chars) == ord("~") - ord("!") + 1
    assert chars == "".join(chr(cp) for cp in range(ord("!"), ord("~") + 1))


def test_parts_are_trimmed() -> None:
    assert parse_range(" a-c , xy ") == "abcxy"


def test_bounds_use_last_character_of_each_side() -> None:
    assert parse_range("xA-yC") == "ABC"


def test_duplicates_are_kept() -> None:
    assert parse_range("a-c,b-d") == "abcbcd"


def test_non_ascii_literal_and_range() -> None:
    assert parse_range("ñé") == "ñé"
    assert parse_range("α-γ") == "αβγ"


def test_reversed_range_contributes_nothing() -> None:
    result = parse_range_detailed("F-A,x")
    assert result.chars == "x"
    assert [i.kind for i in result.issues] == [RangeIssueKind.REVERSED]
    assert result.issues[0].index == 0


def test_multiple_dashes_skipped() -> None:
    result = parse_range_detailed("a-b-c,1-2")
    assert result.chars == "12"
    assert result.issues[0].kind is RangeIssueKind.MULTIPLE_DASHES
    assert result.issues[0].part == "a-b-c"


@pytest.mark.parametrize("part", ["A-", "-Z", "-"])
def test_missing_bound_skipped(part: str) -> None:
    result = parse_range_detailed(f"{part},q")
    assert result.chars == "q"
    assert result.issues[0].kind is RangeIssueKind.MISSING_BOUND


def test_empty_parts_are_not_issues() -> None:
    result = parse_range_detailed("a,,b,")
    assert result.chars == "ab"
    assert result.ok


def test_raise_for_issues() -> None:
    good = parse_range_detailed("A-C")
    assert raise_for_issues(good) is good

    with pytest.raises(RangeSpecError) as excinfo:
        raise_for_issues(parse_range_detailed("A-C,Z-A,a-b-c"))
    assert len(excinfo.value.issues) == 2
    assert "Z-A" in str(excinfo.value)


def test_range_across_surrogate_block_skips_surrogates() -> None:
    chars = parse_range("\ud7ff-\ue000")
    assert chars == "\ud7ff\ue000"
    chars.encode("utf-8")


def test_literal_surrogates_are_dropped() -> None:
    result = parse_range_detailed("a\udc80b")
    assert result.chars == "ab"
    assert result.ok

from __future__ import annotations

import pytest

from adapters.secure_random import SystemRandomSource
from core.interfaces.random_source import RandomSource
from core.sampler import generate_password, generate_passwords


@pytest.mark.parametrize("length", [0, 1, 10, 64])
def test_length_and_membership(length: int) -> None:
    alphabet = "ABC123"
    password = generate_password(length, alphabet)
    assert len(password) == length
    assert set(password) <= set(alphabet)


@pytest.mark.parametrize("length", [0, 5, 100])
def test_empty_alphabet_yields_empty_string(length: int) -> None:
    assert generate_password(length, "") == ""


def test_negative_length_rejected() -> None:
    with pytest.raises(ValueError):
        generate_password(-1, "abc")


def test_uses_source_indices(scripted_source) -> None:
    source = scripted_source([2, 0, 1, 1])
    assert generate_password(4, "xyz", source=source) == "zxyy"
    assert source.calls == [3, 3, 3, 3]


def test_generate_passwords_in_order(scripted_source) -> None:
    source = scripted_source([0, 1, 1, 0, 1, 1])
    assert generate_passwords(3, 2, "ab", source=source) == ["ab", "ba", "bb"]


def test_generate_passwords_with_empty_alphabet() -> None:
    assert generate_passwords(3, 8, "") == ["", "", ""]


def test_single_character_alphabet() -> None:
    assert generate_password(6, "q") == "qqqqqq"


def test_system_source() -> None:
    source = SystemRandomSource()
    assert isinstance(source, RandomSource)
    assert all(0 <= source.randbelow(7) < 7 for _ in range(200))
    assert source.randbelow(1) == 0
    with pytest.raises(ValueError):
        source.randbelow(0)


def test_non_ascii_alphabet() -> None:
    password = generate_password(20, "αβγ")
    assert len(password) == 20
    assert set(password) <= {"α", "β", "γ"}

from __future__ import annotations

import json
from pathlib import Path

from adapters.json_exporter import export_passwords_json, render_passwords_json
from adapters.text_exporter import export_passwords_text, render_passwords_text


def test_json_round_trip() -> None:
    rendered = render_passwords_json(["abc", "def"])
    assert json.loads(rendered) == ["abc", "def"]
    assert rendered == '[\n  "abc",\n  "def"\n]'


def test_json_keeps_non_ascii() -> None:
    assert "é" in render_passwords_json(["é"])


def test_json_export(tmp_path: Path) -> None:
    out = export_passwords_json(passwords=["a[b", "c\"d"], output_path=tmp_path / "nested" / "out.json")
    assert json.loads(out.read_text(encoding="utf-8")) == ["a[b", "c\"d"]


def test_text_render_and_export(tmp_path: Path) -> None:
    assert render_passwords_text(["one", "two"]) == "one\ntwo"
    out = export_passwords_text(passwords=["one", "two"], output_path=tmp_path / "pw.txt")
    assert out.read_text(encoding="utf-8") == "one\ntwo\n"

"""Line-delimited output: one password per line, nothing else."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


def render_passwords_text(passwords: Sequence[str]) -> str:
    return "\n".join(passwords)


def export_passwords_text(*, passwords: Sequence[str], output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    body = render_passwords_text(passwords)
    output_path.write_text(body + "\n" if body else "", encoding="utf-8")
    return output_path

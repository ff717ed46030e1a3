"""JSON output for generated passwords.

A plain JSON array of strings, 2-space indented, so results can be piped
into `jq` or other tooling.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence


def render_passwords_json(passwords: Sequence[str]) -> str:
    """Render `passwords` as an indented JSON array (order preserved)."""

    return json.dumps(list(passwords), ensure_ascii=False, indent=2)


def export_passwords_json(*, passwords: Sequence[str], output_path: Path) -> Path:
    """Write the JSON array to `output_path` as UTF-8."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_passwords_json(passwords) + "\n", encoding="utf-8")
    return output_path

"""Rich UI components for the CLI.

Kept apart from the commands so tables can be reused and so the commands
only deal with options and exit codes.
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from core.config import ENV_PREFIX, AppSettings
from core.domain.charsets import CANONICAL_ORDER, SIMILAR_CHARS


def build_charset_table() -> Table:
    """Table with the built-in classes and the similar-character set."""

    table = Table(title="Built-in character sets")
    table.add_column("Set", style="cyan", no_wrap=True)
    table.add_column("Characters", style="white", no_wrap=True)
    table.add_column("Size", style="dim", justify="right")

    for cls in CANONICAL_ORDER:
        # Text() so brackets in the symbol set are not read as markup.
        table.add_row(cls.value, Text(cls.chars), str(len(cls.chars)))
    table.add_row("similar", Text(SIMILAR_CHARS), str(len(SIMILAR_CHARS)), style="yellow")
    return table


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="passgen settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Env var", style="dim")

    for name in type(settings).model_fields:
        value = getattr(settings, name)
        table.add_row(name, Text(str(value)), f"{ENV_PREFIX}{name.upper()}")
    return table

"""`passgen config`: inspect and persist default settings."""

from __future__ import annotations

import typer
from rich.console import Console

from cli.ui_components import build_settings_table
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(
    no_args_is_help=True,
    help="Show or change default settings.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_console = Console()


@app.command()
def show() -> None:
    """Show the effective settings (env vars and .env files applied)."""

    _console.print(build_settings_table(AppSettings()))


@app.command(name="set")
def set_defaults(
    length: int | None = typer.Option(None, "--length", min=1, help="Default password length."),
    count: int | None = typer.Option(None, "--count", min=1, help="Default number of passwords."),
    strict_ranges: bool | None = typer.Option(
        None,
        "--strict-ranges/--lenient-ranges",
        help="Fail on malformed custom range parts, or skip them with a warning.",
    ),
    dedupe: bool | None = typer.Option(
        None,
        "--dedupe/--no-dedupe",
        help="Remove duplicate characters from the alphabet by default.",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="DEBUG, INFO, WARNING or ERROR.",
    ),
) -> None:
    """Persist defaults into the per-user .env file."""

    values: dict[str, str] = {}
    if length is not None:
        values["PASSGEN_DEFAULT_LENGTH"] = str(length)
    if count is not None:
        values["PASSGEN_DEFAULT_COUNT"] = str(count)
    if strict_ranges is not None:
        values["PASSGEN_STRICT_RANGES"] = str(strict_ranges).lower()
    if dedupe is not None:
        values["PASSGEN_DEDUPE"] = str(dedupe).lower()
    if log_level is not None:
        level = log_level.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise typer.BadParameter("must be DEBUG, INFO, WARNING or ERROR", param_hint="--log-level")
        values["PASSGEN_LOG_LEVEL"] = level

    if not values:
        raise typer.BadParameter("nothing to set; pass at least one option")

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved settings to:[/green] {env_path}")

"""passgen command-line interface (Typer).

Commands:
- `gen`: generate passwords
- `charset`: show the built-in character sets
- `help`: show help for a command
- `config`: show or persist default settings
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import export_passwords_json, render_passwords_json
from adapters.text_exporter import export_passwords_text, render_passwords_text
from cli import config_cmd
from cli.ui_components import build_charset_table
from core.config import AppSettings
from core.domain.models import GenerationRequest
from core.log_setup import configure_logging
from core.range_parser import RangeSpecError
from core.services.generation_pipeline import run_generation

app = typer.Typer(
    name="passgen",
    no_args_is_help=True,
    help="passgen - password generator CLI",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.add_typer(config_cmd.app, name="config")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging on stderr."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _err_console.print("Error: invalid passgen settings (PASSGEN_* env vars or .env file):", markup=False)
        for error in exc.errors():
            field = ".".join(str(loc) for loc in error["loc"]) or "settings"
            _err_console.print(f"  {field}: {error['msg']}", markup=False)
        raise typer.Exit(code=1) from exc
    configure_logging(logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings


def _settings(ctx: typer.Context) -> AppSettings:
    if isinstance(ctx.obj, AppSettings):
        return ctx.obj
    return AppSettings()


@app.command()
def gen(
    ctx: typer.Context,
    length: int | None = typer.Option(None, "-l", "--length", min=1, help="Length of each password [default: 12]."),
    count: int | None = typer.Option(None, "-n", "--count", min=1, help="Number of passwords [default: 1]."),
    lower: bool = typer.Option(False, "--lower", help="Include lowercase letters."),
    upper: bool = typer.Option(False, "--upper", help="Include uppercase letters."),
    digits: bool = typer.Option(False, "--digits", help="Include digits."),
    symbols: bool = typer.Option(False, "--symbols", help="Include symbols."),
    use_all: bool = typer.Option(False, "--all", help="Use all built-in character classes."),
    no_similar: bool = typer.Option(False, "--no-similar", help="Exclude similar characters (0/O, 1/l/I, 5/S)."),
    custom_range: str | None = typer.Option(None, "-g", "--range", help="Custom range, e.g. 'A-F,0-5'."),
    json_output: bool = typer.Option(False, "--json", help="Output a JSON array."),
    dedupe: bool = typer.Option(False, "--dedupe", help="Remove duplicate characters from the alphabet."),
    strict: bool = typer.Option(False, "--strict", help="Fail on malformed custom range parts."),
    output: Path | None = typer.Option(None, "-o", "--output", help="Write the result to a file instead of stdout."),
) -> None:
    """Generate random passwords with custom rules.

    Examples:

      passgen gen -l 16 --all

      passgen gen -n 5 --lower --digits

      passgen gen -g "A-Z,0-9" -l 8
    """

    settings = _settings(ctx)
    try:
        request = GenerationRequest(
            length=length if length is not None else settings.default_length,
            count=count if count is not None else settings.default_count,
            lower=lower,
            upper=upper,
            digits=digits,
            symbols=symbols,
            all_classes=use_all,
            custom_range=custom_range,
            exclude_similar=no_similar,
            dedupe=dedupe or settings.dedupe,
        )
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        outcome = run_generation(request, strict=strict or settings.strict_ranges)
    except RangeSpecError as exc:
        raise typer.BadParameter(str(exc), param_hint="'-g' / '--range'") from exc

    if outcome.empty_charset:
        _err_console.print("Error: no character set selected (use -h for help)", markup=False)
        raise typer.Exit(code=1)

    if output is not None:
        if json_output:
            path = export_passwords_json(passwords=outcome.passwords, output_path=output)
        else:
            path = export_passwords_text(passwords=outcome.passwords, output_path=output)
        logger.info("Wrote %d password(s) to %s", len(outcome.passwords), path)
        return

    if json_output:
        typer.echo(render_passwords_json(outcome.passwords))
    else:
        typer.echo(render_passwords_text(outcome.passwords))


@app.command()
def charset() -> None:
    """Show character sets used for password generation."""

    _console.print(build_charset_table())


@app.command(name="help")
def help_command(
    ctx: typer.Context,
    command: str | None = typer.Argument(None, help="Command to describe."),
) -> None:
    """Show detailed help for a specific command."""

    root_ctx = ctx.parent or ctx
    if command is None:
        typer.echo(root_ctx.get_help())
        raise typer.Exit()

    target = root_ctx.command.get_command(root_ctx, command)
    if target is None:
        _err_console.print(f"Unknown command: {command!r}", markup=False)
        _err_console.print("Run 'passgen help' for usage.", markup=False)
        raise typer.Exit(code=1)

    # Parsing --help prints the command help and exits with code 0.
    target.make_context(command, ["--help"], parent=root_ctx)


def run() -> None:
    app()

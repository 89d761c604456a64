"""
Solitaire CLI
==============

Click-based command-line interface for the Solitaire keystream cipher.
Provides subcommands to encrypt and decrypt messages, print the raw
keystream, and show the keyed deck.

Usage::

    python -m solitaire encrypt CRYPTONOMICON "solitaire"
    python -m solitaire -o text decrypt CRYPTONOMICON "KIRAK SFJAN"
    python -m solitaire keystream "" --count 10
    python -m solitaire deck FOO
    echo "attack at dawn" | python -m solitaire encrypt SECRET -

Input is uppercased and stripped of spaces before it reaches the cipher;
any other non-letter is rejected with exit status 1.  Set
``strict = false`` in the ``[solitaire]`` config table to drop non-letters
instead.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import click

from shared.config import PontifexConfig
from shared.console import PontifexConsole
from shared.logger import enable_library_logging
from shared.models import RunResult

from solitaire import __version__
from solitaire.core.engine import SolitaireEngine
from solitaire.core.errors import InvalidCharacterError
from solitaire.output.console import SolitaireConsoleOutput
from solitaire.output.report import SolitaireReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to Pontifex configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "text"]),
    default=None,
    help="Output format (default from config, else console).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write a JSON report to this file.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log debug output to stderr.",
)
@click.version_option(__version__, prog_name="pontifex")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """Pontifex -- Solitaire card-deck keystream cipher.

    Encrypt and decrypt A-Z text with a deck keyed by a passphrase.
    """
    ctx.ensure_object(dict)

    try:
        pontifex_config = PontifexConfig.load(config)
    except ValueError as exc:
        raise click.ClickException(f"invalid configuration: {exc}") from exc
    if verbose:
        pontifex_config.global_settings.log_level = "DEBUG"
        enable_library_logging("solitaire")

    output_format = output or pontifex_config.solitaire.output_format
    ctx.obj["config"] = pontifex_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = PontifexConsole(quiet=quiet)
    ctx.obj["console"] = console
    ctx.obj["errors"] = PontifexConsole(stderr=True)
    ctx.obj["engine"] = SolitaireEngine(pontifex_config)
    ctx.obj["display"] = SolitaireConsoleOutput(console)
    ctx.obj["reporter"] = SolitaireReportGenerator(version=__version__)

    if output_format == "console" and not quiet:
        console.banner(version=__version__)


def _run(ctx: click.Context, operation: str, action: Callable[[], RunResult]) -> None:
    """Run *action* and emit its result; invalid input exits with status 1."""
    try:
        result = action()
    except InvalidCharacterError as exc:
        ctx.obj["errors"].error(f"failed to {operation}: {exc}")
        ctx.exit(1)
    _handle_output(ctx, result)


def _handle_output(ctx: click.Context, result: RunResult) -> None:
    """Handle output based on the selected format.

    Args:
        ctx: Click context containing configuration.
        result: RunResult to output.
    """
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: SolitaireReportGenerator = ctx.obj["reporter"]
    console: PontifexConsole = ctx.obj["console"]

    if output_format == "text":
        click.echo(result.output)
    elif output_format == "json":
        click.echo(reporter.render_json(result))
    else:
        ctx.obj["display"].display(result)

    if output_file:
        path = reporter.generate_json(result, Path(output_file))
        console.success(f"JSON report saved to: {path}")


def _read_message(message: str) -> str:
    if message == "-":
        return click.get_text_stream("stdin").read().rstrip("\r\n")
    return message


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("passphrase")
@click.argument("message")
@click.pass_context
def encrypt(ctx: click.Context, passphrase: str, message: str) -> None:
    """Encrypt MESSAGE with a deck keyed by PASSPHRASE.

    The plaintext is padded with X to a multiple of five letters.
    Use - as MESSAGE to read from stdin.
    """
    engine: SolitaireEngine = ctx.obj["engine"]
    _run(ctx, "encrypt", lambda: engine.encrypt(passphrase, _read_message(message)))


@cli.command()
@click.argument("passphrase")
@click.argument("message")
@click.pass_context
def decrypt(ctx: click.Context, passphrase: str, message: str) -> None:
    """Decrypt MESSAGE with a deck keyed by PASSPHRASE.

    Block separators are ignored; padding letters are kept.
    Use - as MESSAGE to read from stdin.
    """
    engine: SolitaireEngine = ctx.obj["engine"]
    _run(ctx, "decrypt", lambda: engine.decrypt(passphrase, _read_message(message)))


@cli.command()
@click.argument("passphrase")
@click.option(
    "--count", "-n",
    type=click.IntRange(min=0),
    default=10,
    show_default=True,
    help="Number of keystream values to draw.",
)
@click.pass_context
def keystream(ctx: click.Context, passphrase: str, count: int) -> None:
    """Print the first keystream values of a deck keyed by PASSPHRASE."""
    engine: SolitaireEngine = ctx.obj["engine"]
    _run(ctx, "generate keystream", lambda: engine.keystream(passphrase, count))


@cli.command()
@click.argument("passphrase")
@click.pass_context
def deck(ctx: click.Context, passphrase: str) -> None:
    """Show the deck order after keying with PASSPHRASE."""
    engine: SolitaireEngine = ctx.obj["engine"]
    _run(ctx, "initialize deck", lambda: engine.deck(passphrase))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Solitaire CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()

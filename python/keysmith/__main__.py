"""
CLI interface for Keysmith.
"""

import sys
import getpass
import logging
import click
from typing import Optional

from .config import PasswordConfig
from .clipboard import copy_to_clipboard, CLEAR_AFTER
from .exceptions import ConfigError, ClipboardError
from .utils.password_generator import PasswordGenerator
from .utils.strength import score_password, entropy_bits, theoretical_entropy_bits


logger = logging.getLogger(__name__)


def read_password(stream) -> str:
    """Read a password from a stream, dropping the trailing line ending."""
    return stream.read().rstrip("\r\n")


def format_strength(password: str) -> str:
    """One-line strength summary for display."""
    result = score_password(password)
    return (f"Strength: {result.value}/100 ({result.label.value}), "
            f"entropy: {entropy_bits(password):.1f} bits")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Keysmith - generate random passwords and estimate their strength."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--length", "-l", default=16, type=int, help="Password length (default: 16)")
@click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters")
@click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters")
@click.option("--no-numbers", is_flag=True, help="Exclude digits")
@click.option("--no-symbols", is_flag=True, help="Exclude symbols")
@click.option("--exclude-similar", is_flag=True, help="Exclude similar characters (i, l, 1, L, o, 0, O)")
@click.option("--exclude-ambiguous", is_flag=True, help="Exclude ambiguous punctuation ({ } [ ] ( ) | ` ~ ; : , . < >)")
@click.option("--entropy-level", default=50, type=click.IntRange(0, 100), help="Entropy level 0-100 (advisory, default: 50)")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1), help="Number of passwords to generate")
@click.option("--copy", "-c", is_flag=True, help="Copy the last password to the clipboard")
@click.option("--show-strength/--no-show-strength", default=True, help="Show strength and entropy")
def generate(length: int, no_uppercase: bool, no_lowercase: bool, no_numbers: bool,
             no_symbols: bool, exclude_similar: bool, exclude_ambiguous: bool,
             entropy_level: int, count: int, copy: bool, show_strength: bool) -> None:
    """Generate one or more random passwords."""
    config = PasswordConfig(
        length=length,
        include_uppercase=not no_uppercase,
        include_lowercase=not no_lowercase,
        include_numbers=not no_numbers,
        include_symbols=not no_symbols,
        exclude_similar=exclude_similar,
        exclude_ambiguous=exclude_ambiguous,
        entropy_level=entropy_level,
    )
    generator = PasswordGenerator()

    try:
        passwords = [generator.generate(config) for _ in range(count)]
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    # Guaranteed characters can push the result past the requested length
    produced = len(passwords[-1])
    requested = "" if produced == length else f" (requested {length})"
    click.echo(f"🔐 Generated {produced}-character password{requested} using: {config.describe()}")
    logger.debug("Entropy level %d", entropy_level)

    for password in passwords:
        click.echo(password)
        if show_strength:
            click.echo(f"  {format_strength(password)}")

    if show_strength:
        click.echo(f"Theoretical entropy: {theoretical_entropy_bits(config):.1f} bits")

    if copy:
        try:
            copy_to_clipboard(passwords[-1])
            click.echo(f"🔐 Password copied to clipboard (cleared in {CLEAR_AFTER} seconds).")
        except ClipboardError as e:
            click.echo(str(e), err=True)


@cli.command()
@click.argument("password", required=False)
@click.option("--stdin", is_flag=True, help="Read password from stdin")
def strength(password: Optional[str], stdin: bool) -> None:
    """Estimate the strength of a password."""
    if stdin and password:
        click.echo("Error: Cannot use --stdin with a provided password", err=True)
        sys.exit(1)

    if stdin:
        password = read_password(sys.stdin)
    elif password is None:
        password = getpass.getpass("Enter password: ")

    click.echo(format_strength(password))


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()

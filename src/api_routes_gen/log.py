"""Terminal logging for the generator, written through click."""

import click

LEVELS = ("debug", "info", "warning", "error", "fatal")

_COLORS = {
    "warning": "yellow",
    "error": "red",
    "fatal": "red",
}

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Toggle printing of debug-level messages."""
    global _verbose
    _verbose = enabled


def log(message: str, level: str = "info") -> None:
    """Print a message at the given level.

    debug and info go to stdout, everything above to stderr with the level
    name as prefix.
    """
    if level not in LEVELS:
        raise ValueError(f"Unknown log level: {level}")
    if level == "debug" and not _verbose:
        return

    if level in ("debug", "info"):
        click.echo(message)
        return

    click.secho(f"{level.upper()}: {message}", fg=_COLORS[level], err=True)

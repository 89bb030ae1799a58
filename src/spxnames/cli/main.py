"""Main Typer CLI application for spxnames."""

import logging
import os
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from spxnames import __version__
from spxnames.config.settings import get_settings
from spxnames.messages import Locale

# Create the Typer app
app = typer.Typer(
    name="spxnames",
    help="Validate and generate asset names for spx projects.",
    no_args_is_help=True,
)

# Console for rich output
console = Console()

LOCALES = ("en", "zh")


# Global state for config
class State:
    debug: bool = False
    locale: Locale = "en"
    logger: logging.Logger = logging.getLogger("spxnames")


state = State()


def setup_logging(debug: bool) -> logging.Logger:
    """Configure logging based on debug flag."""
    logger = logging.getLogger("spxnames")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    return logger


def resolve_path(input_path: Optional[str]) -> Optional[Path]:
    """Expand ~ and environment variables in paths."""
    if not input_path:
        return None

    path_str = str(input_path).strip()
    if not path_str:
        return None

    path_str = os.path.expandvars(path_str)
    return Path(path_str).expanduser().resolve()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"spxnames {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", help="Language of printed messages (en or zh)"),
    ] = None,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """spxnames - check and generate sprite, costume, sound and backdrop names."""
    # Load .env file
    load_dotenv()
    settings = get_settings()

    state.debug = debug or settings.debug
    state.logger = setup_logging(state.debug)

    if locale is not None and locale not in LOCALES:
        raise typer.BadParameter(f"must be one of {', '.join(LOCALES)}", param_hint="--locale")
    state.locale = locale or settings.locale

    if state.debug:
        state.logger.debug("Debug mode enabled")
        state.logger.debug(f"Message locale: {state.locale}")


# Import and register subcommands
from spxnames.cli.names import check_cmd, ensure_cmd, normalize_cmd, suggest_cmd, tip_cmd

app.command(name="check")(check_cmd)
app.command(name="suggest")(suggest_cmd)
app.command(name="ensure")(ensure_cmd)
app.command(name="normalize")(normalize_cmd)
app.command(name="tip")(tip_cmd)


if __name__ == "__main__":
    app()

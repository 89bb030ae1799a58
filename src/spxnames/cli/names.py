"""Name checking and generation commands."""

from collections.abc import Callable
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from spxnames.generate import (
    AssetKind,
    NameResolutionError,
    ensure_valid_name,
    get_name,
    name_tip,
    validate_name,
)
from spxnames.keywords import GOPLUS_RESERVED, ReservedWords, ReservedWordsError, load_reserved_words
from spxnames.normalize import NameCase, normalize_asset_name
from spxnames.project.reader import ProjectFileError, read_project

console = Console()

KindOption = Annotated[
    AssetKind,
    typer.Option("--kind", "-k", help="Kind of asset the name is for"),
]
ProjectOption = Annotated[
    Optional[str],
    typer.Option("--project", "-p", help="Project file (JSON or YAML) to check uniqueness against"),
]
SpriteOption = Annotated[
    Optional[str],
    typer.Option("--sprite", "-s", help="Sprite whose costumes a costume name must not clash with"),
]
ReservedOption = Annotated[
    Optional[str],
    typer.Option("--reserved", help="YAML or JSON file with extra reserved words"),
]


def _load_reserved(reserved: Optional[str]) -> ReservedWords:
    """Resolve the reserved words table from the flag or settings."""
    from spxnames.cli.main import resolve_path, state
    from spxnames.config.settings import get_settings

    path = resolve_path(reserved or get_settings().reserved_file)
    if not path:
        return GOPLUS_RESERVED

    state.logger.info(f"Reading extra reserved words from {path}")
    try:
        return load_reserved_words(path)
    except ReservedWordsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


def _load_scope(kind: AssetKind, project: Optional[str], sprite: Optional[str]) -> Any:
    """Load the scope a name of the given kind must be unique within.

    Returns None when no project file is configured, in which case only
    grammar and reserved word checks apply.
    """
    from spxnames.cli.main import resolve_path, state
    from spxnames.config.settings import get_settings

    if sprite and kind is not AssetKind.COSTUME:
        state.logger.warning(f"--sprite only applies to costume names, ignoring it for {kind.value}")

    path = resolve_path(project or get_settings().project_file)
    if not path:
        state.logger.debug("No project file given, skipping uniqueness checks")
        return None

    state.logger.info(f"Reading project from {path}")
    try:
        snapshot = read_project(path)
    except ProjectFileError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if kind is AssetKind.COSTUME:
        if not sprite:
            state.logger.warning("No --sprite given for costume name, skipping uniqueness checks")
            return None
        scope = snapshot.get_sprite(sprite)
        if scope is None:
            console.print(
                f"[red]Error:[/red] Sprite {escape(sprite)} not found in {escape(str(path))}",
                soft_wrap=True,
            )
            raise typer.Exit(1)
        return scope

    if kind is AssetKind.BACKDROP:
        return snapshot.stage

    return snapshot


def _resolve(kind: AssetKind, operation: Callable[..., str], *args: Any) -> str:
    """Run a generation operation, reporting resolver failures."""
    from spxnames.cli.main import state

    try:
        return operation(kind, *args)
    except NameResolutionError as e:
        state.logger.error(f"Name generation failed: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(2)


def check_cmd(
    name: Annotated[str, typer.Argument(help="Name to check")],
    kind: KindOption = AssetKind.SPRITE,
    project: ProjectOption = None,
    sprite: SpriteOption = None,
    reserved: ReservedOption = None,
) -> None:
    """Check whether a name is valid for an asset kind."""
    from spxnames.cli.main import state

    reserved_words = _load_reserved(reserved)
    scope = _load_scope(kind, project, sprite)

    err = validate_name(kind, name, scope, reserved_words)
    if err is not None:
        console.print(f"[red]✗[/red] {err.get(state.locale)}", soft_wrap=True)
        raise typer.Exit(1)

    console.print("[green]✓[/green] valid")


def suggest_cmd(
    base: Annotated[str, typer.Argument(help="Base to derive the name from, such as a file name")] = "",
    kind: KindOption = AssetKind.SPRITE,
    project: ProjectOption = None,
    sprite: SpriteOption = None,
    reserved: ReservedOption = None,
) -> None:
    """Generate a valid, unique name from a base."""
    reserved_words = _load_reserved(reserved)
    scope = _load_scope(kind, project, sprite)

    name = _resolve(kind, get_name, scope, base, reserved_words)
    console.print(name, markup=False, highlight=False, soft_wrap=True)


def ensure_cmd(
    name: Annotated[str, typer.Argument(help="Name to keep if valid, or derive a valid one from")],
    kind: KindOption = AssetKind.SPRITE,
    project: ProjectOption = None,
    sprite: SpriteOption = None,
    reserved: ReservedOption = None,
) -> None:
    """Print the name unchanged if valid, else a valid name derived from it."""
    reserved_words = _load_reserved(reserved)
    scope = _load_scope(kind, project, sprite)

    result = _resolve(kind, ensure_valid_name, name, scope, reserved_words)
    console.print(result, markup=False, highlight=False, soft_wrap=True)


def normalize_cmd(
    source: Annotated[str, typer.Argument(help="String to normalize")],
    case: Annotated[
        NameCase,
        typer.Option("--case", "-c", help="Case style of the result"),
    ] = NameCase.CAMEL,
) -> None:
    """Normalize a string into a name candidate (may print an empty line)."""
    console.print(normalize_asset_name(source, case), markup=False, highlight=False)


def tip_cmd(kind: KindOption = AssetKind.SPRITE) -> None:
    """Show which characters a name may contain."""
    from spxnames.cli.main import state

    console.print(name_tip(kind).get(state.locale), markup=False, soft_wrap=True)

"""Generation of valid, unique asset names."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from spxnames.keywords import GOPLUS_RESERVED, ReservedWords
from spxnames.messages import (
    BACKDROP_NAME_TIP,
    COSTUME_NAME_TIP,
    SOUND_NAME_TIP,
    SPRITE_NAME_TIP,
    LocaleMessage,
)
from spxnames.normalize import NameCase, normalize_asset_name
from spxnames.scopes import ProjectScope, SpriteScope, StageScope
from spxnames.validation import (
    validate_backdrop_name,
    validate_costume_name,
    validate_sound_name,
    validate_sprite_name,
)

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 10_000


class NameResolutionError(RuntimeError):
    """Raised when no valid name is found for a base.

    This means the validator rejects every candidate, which is a bug rather
    than a user input problem.
    """

    pass


class AssetKind(str, Enum):
    """Kinds of named assets."""

    SPRITE = "sprite"
    COSTUME = "costume"
    SOUND = "sound"
    BACKDROP = "backdrop"


@dataclass(frozen=True)
class AssetNamingRule:
    """How names of one asset kind are validated and generated."""

    kind: AssetKind
    case: NameCase
    default_base: str  # used when the base normalizes to ""
    tip: LocaleMessage
    validate: Callable[[str, Any, ReservedWords], Optional[LocaleMessage]]


NAMING_RULES: dict[AssetKind, AssetNamingRule] = {
    AssetKind.SPRITE: AssetNamingRule(
        kind=AssetKind.SPRITE,
        case=NameCase.PASCAL,
        default_base="Sprite",
        tip=SPRITE_NAME_TIP,
        validate=validate_sprite_name,
    ),
    AssetKind.COSTUME: AssetNamingRule(
        kind=AssetKind.COSTUME,
        case=NameCase.CAMEL,
        default_base="costume",
        tip=COSTUME_NAME_TIP,
        validate=validate_costume_name,
    ),
    AssetKind.SOUND: AssetNamingRule(
        kind=AssetKind.SOUND,
        case=NameCase.CAMEL,
        default_base="sound",
        tip=SOUND_NAME_TIP,
        validate=validate_sound_name,
    ),
    AssetKind.BACKDROP: AssetNamingRule(
        kind=AssetKind.BACKDROP,
        case=NameCase.CAMEL,
        default_base="backdrop",
        tip=BACKDROP_NAME_TIP,
        validate=validate_backdrop_name,
    ),
}


def get_valid_name(base: str, is_valid: Callable[[str], bool]) -> str:
    """Find the first valid name among base, base2, base3, ...

    Args:
        base: Name to start from, tried without a suffix first.
        is_valid: Predicate accepting a candidate name.

    Returns:
        The first candidate accepted by is_valid.

    Raises:
        NameResolutionError: If no candidate is accepted within MAX_ATTEMPTS.
    """
    for i in range(1, MAX_ATTEMPTS + 1):
        name = base if i == 1 else f"{base}{i}"
        if is_valid(name):
            if i > 1:
                logger.debug(f"Resolved {base!r} to {name!r} after {i} attempts")
            return name

    logger.error(f"No valid name found for base {base!r} after {MAX_ATTEMPTS} attempts")
    raise NameResolutionError(f"unexpected infinite loop with base {base}")


def name_tip(kind: AssetKind) -> LocaleMessage:
    """Return the allowed-characters tip for an asset kind."""
    return NAMING_RULES[AssetKind(kind)].tip


def validate_name(
    kind: AssetKind,
    name: str,
    scope: Any,
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> Optional[LocaleMessage]:
    """Validate a name of the given kind against its scope."""
    return NAMING_RULES[AssetKind(kind)].validate(name, scope, reserved)


def get_name(
    kind: AssetKind,
    scope: Any,
    base: str = "",
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    """Generate a name of the given kind, unique within its scope.

    The base is normalized with the kind's case style; when nothing usable is
    left the kind's default base is used instead.
    """
    rule = NAMING_RULES[AssetKind(kind)]
    base = normalize_asset_name(base, rule.case) or rule.default_base
    return get_valid_name(base, lambda n: rule.validate(n, scope, reserved) is None)


def ensure_valid_name(
    kind: AssetKind,
    name: str,
    scope: Any,
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    """Return name if it is valid for the kind, else a name derived from it."""
    if validate_name(kind, name, scope, reserved) is None:
        return name
    return get_name(kind, scope, name, reserved)


def get_sprite_name(
    project: Optional[ProjectScope],
    base: str = "",
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return get_name(AssetKind.SPRITE, project, base, reserved)


def ensure_valid_sprite_name(
    name: str,
    project: Optional[ProjectScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return ensure_valid_name(AssetKind.SPRITE, name, project, reserved)


def get_costume_name(
    sprite: Optional[SpriteScope],
    base: str = "",
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return get_name(AssetKind.COSTUME, sprite, base, reserved)


def ensure_valid_costume_name(
    name: str,
    sprite: Optional[SpriteScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return ensure_valid_name(AssetKind.COSTUME, name, sprite, reserved)


def get_sound_name(
    project: Optional[ProjectScope],
    base: str = "",
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return get_name(AssetKind.SOUND, project, base, reserved)


def ensure_valid_sound_name(
    name: str,
    project: Optional[ProjectScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return ensure_valid_name(AssetKind.SOUND, name, project, reserved)


def get_backdrop_name(
    stage: Optional[StageScope],
    base: str = "",
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return get_name(AssetKind.BACKDROP, stage, base, reserved)


def ensure_valid_backdrop_name(
    name: str,
    stage: Optional[StageScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> str:
    return ensure_valid_name(AssetKind.BACKDROP, name, stage, reserved)

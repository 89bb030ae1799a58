"""Asset name validation.

Asset names are compiled to Go+ identifiers, so the rules follow the Go+
identifier grammar. Every validator returns ``None`` for a valid name and a
:class:`LocaleMessage` describing the first violated rule otherwise.
"""

import re
from typing import Optional

from spxnames.keywords import GOPLUS_RESERVED, ReservedWords
from spxnames.messages import LocaleMessage
from spxnames.scopes import ProjectScope, SpriteScope, StageScope, has_named

MAX_NAME_LENGTH = 100

# CJK unified ideographs, ASCII letters, digits and underscore
NAME_PATTERN = re.compile(r"[\u4e00-\u9fa5a-zA-Z_][\u4e00-\u9fa5a-zA-Z0-9_]*")

BLANK_NAME = LocaleMessage(en="The name must not be blank", zh="名字不可为空")
NAME_TOO_LONG = LocaleMessage(
    en=f"The name is too long (maximum is {MAX_NAME_LENGTH} characters)",
    zh=f"名字长度超出限制（最多 {MAX_NAME_LENGTH} 个字符）",
)
INVALID_NAME = LocaleMessage(en="Invalid name", zh="格式不正确")
KEYWORD_CONFLICT = LocaleMessage(en="Conflict with keywords", zh="与关键字冲突")


def name_length(name: str) -> int:
    """Length of a name in UTF-16 code units, as counted by the editor."""
    return len(name.encode("utf-16-le", "surrogatepass")) // 2


def validate_asset_name(
    name: str, reserved: ReservedWords = GOPLUS_RESERVED
) -> Optional[LocaleMessage]:
    """Check a name against the rules shared by every asset kind.

    Checks run in order: blank, too long, grammar, reserved word.
    """
    if name == "":
        return BLANK_NAME
    if name_length(name) > MAX_NAME_LENGTH:
        return NAME_TOO_LONG
    if not NAME_PATTERN.fullmatch(name):
        return INVALID_NAME
    if name in reserved.type_keywords:
        return KEYWORD_CONFLICT
    if name in reserved.keywords:
        return KEYWORD_CONFLICT
    return None


def validate_sprite_name(
    name: str,
    project: Optional[ProjectScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> Optional[LocaleMessage]:
    """Validate a sprite name; sprites and sounds share a namespace."""
    err = validate_asset_name(name, reserved)
    if err is not None:
        return err
    if project is not None:
        if has_named(project.sprites, name):
            return LocaleMessage(en=f"Sprite with name {name} already exists", zh="存在同名的精灵")
        if has_named(project.sounds, name):
            return LocaleMessage(en=f"Sound with name {name} already exists", zh="存在同名的声音")
    return None


def validate_costume_name(
    name: str,
    sprite: Optional[SpriteScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> Optional[LocaleMessage]:
    """Validate a costume name within its sprite."""
    err = validate_asset_name(name, reserved)
    if err is not None:
        return err
    if sprite is not None and has_named(sprite.costumes, name):
        return LocaleMessage(en=f"Costume with name {name} already exists", zh="存在同名的造型")
    return None


def validate_sound_name(
    name: str,
    project: Optional[ProjectScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> Optional[LocaleMessage]:
    """Validate a sound name.

    Sounds follow the sprite rules for now, including the shared namespace.
    """
    return validate_sprite_name(name, project, reserved)


def validate_backdrop_name(
    name: str,
    stage: Optional[StageScope],
    reserved: ReservedWords = GOPLUS_RESERVED,
) -> Optional[LocaleMessage]:
    """Validate a backdrop name within the stage."""
    err = validate_asset_name(name, reserved)
    if err is not None:
        return err
    if stage is not None and has_named(stage.backdrops, name):
        return LocaleMessage(en=f"Backdrop with name {name} already exists", zh="存在同名的背景")
    return None

"""Validation and generation of spx asset names."""

__version__ = "0.1.0"

from spxnames.generate import (
    AssetKind,
    AssetNamingRule,
    NAMING_RULES,
    NameResolutionError,
    ensure_valid_backdrop_name,
    ensure_valid_costume_name,
    ensure_valid_name,
    ensure_valid_sound_name,
    ensure_valid_sprite_name,
    get_backdrop_name,
    get_costume_name,
    get_name,
    get_sound_name,
    get_sprite_name,
    get_valid_name,
    name_tip,
    validate_name,
)
from spxnames.keywords import GOPLUS_RESERVED, ReservedWords, ReservedWordsError, load_reserved_words
from spxnames.messages import (
    BACKDROP_NAME_TIP,
    COSTUME_NAME_TIP,
    SOUND_NAME_TIP,
    SPRITE_NAME_TIP,
    LocaleMessage,
)
from spxnames.normalize import NameCase, normalize_asset_name
from spxnames.validation import (
    validate_asset_name,
    validate_backdrop_name,
    validate_costume_name,
    validate_sound_name,
    validate_sprite_name,
)

__all__ = [
    "__version__",
    "AssetKind",
    "AssetNamingRule",
    "NAMING_RULES",
    "NameResolutionError",
    "ensure_valid_backdrop_name",
    "ensure_valid_costume_name",
    "ensure_valid_name",
    "ensure_valid_sound_name",
    "ensure_valid_sprite_name",
    "get_backdrop_name",
    "get_costume_name",
    "get_name",
    "get_sound_name",
    "get_sprite_name",
    "get_valid_name",
    "name_tip",
    "validate_name",
    "GOPLUS_RESERVED",
    "ReservedWords",
    "ReservedWordsError",
    "load_reserved_words",
    "BACKDROP_NAME_TIP",
    "COSTUME_NAME_TIP",
    "SOUND_NAME_TIP",
    "SPRITE_NAME_TIP",
    "LocaleMessage",
    "NameCase",
    "normalize_asset_name",
    "validate_asset_name",
    "validate_backdrop_name",
    "validate_costume_name",
    "validate_sound_name",
    "validate_sprite_name",
]

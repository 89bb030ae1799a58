"""
Unit tests for name generation and the uniqueness resolver.
"""

import logging

import pytest

from spxnames.generate import (
    MAX_ATTEMPTS,
    NAMING_RULES,
    AssetKind,
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
from spxnames.keywords import GOPLUS_RESERVED
from spxnames.messages import BACKDROP_NAME_TIP, SOUND_NAME_TIP
from spxnames.normalize import NameCase
from spxnames.validation import validate_costume_name, validate_sprite_name


class TestGetValidName:
    """Numeric suffixing until a candidate is accepted."""

    def test_base_first(self):
        assert get_valid_name("Foo", lambda n: True) == "Foo"

    def test_suffix_starts_at_two(self):
        taken = {"Foo"}
        assert get_valid_name("Foo", lambda n: n not in taken) == "Foo2"

    def test_skips_taken_suffixes(self):
        taken = {"Foo", "Foo2", "Foo3"}
        assert get_valid_name("Foo", lambda n: n not in taken) == "Foo4"

    def test_candidates_in_order(self):
        tried = []

        def is_valid(name):
            tried.append(name)
            return len(tried) == 4

        assert get_valid_name("x", is_valid) == "x4"
        assert tried == ["x", "x2", "x3", "x4"]

    def test_always_invalid_fails_after_bounded_attempts(self):
        calls = []

        def never(name):
            calls.append(name)
            return False

        with pytest.raises(NameResolutionError, match="base Foo"):
            get_valid_name("Foo", never)

        assert len(calls) == MAX_ATTEMPTS
        assert calls[-1] == f"Foo{MAX_ATTEMPTS}"

    def test_exhaustion_is_logged(self, caplog):
        with caplog.at_level(logging.ERROR, logger="spxnames"):
            with pytest.raises(NameResolutionError):
                get_valid_name("Bar", lambda n: False)

        assert any("Bar" in r.getMessage() for r in caplog.records)

    def test_is_not_a_validation_message(self):
        assert issubclass(NameResolutionError, RuntimeError)


class TestSpriteNames:
    """Sprite names: pascal case, default Sprite, project scope."""

    def test_existing_sprite_gets_suffix(self, project):
        assert get_sprite_name(project, "Foo") == "Foo2"

    def test_existing_sound_gets_suffix(self, project):
        assert get_sprite_name(project, "boing") == "Boing2"

    def test_default_base(self):
        assert get_sprite_name(None) == "Sprite"
        assert get_sprite_name(None, "精灵") == "Sprite"

    def test_default_base_collision(self, project):
        assert get_sprite_name(project) == "Sprite2"

    def test_normalizes_base(self):
        assert get_sprite_name(None, "my hero.png") == "MyHeroPng"

    def test_long_base(self):
        assert get_sprite_name(None, "a" * 50) == "A" + "a" * 19

    def test_ensure_keeps_valid_unique_name(self, project):
        for name in ["Hero", "hero", "精灵", "_x", "a" * 100]:
            assert ensure_valid_sprite_name(name, project) == name

    def test_ensure_derives_from_invalid_name(self, project):
        assert ensure_valid_sprite_name("Foo", project) == "Foo2"
        assert ensure_valid_sprite_name("my hero!", None) == "MyHero"
        assert ensure_valid_sprite_name("", None) == "Sprite"


class TestSoundNames:
    """Sound names: camel case, default sound, shared namespace with sprites."""

    def test_existing_sound(self, project):
        assert get_sound_name(project, "jump") == "jump2"

    def test_shares_namespace_with_sprites(self, project):
        # Camel case keeps "foo" distinct from sprite "Foo"
        assert get_sound_name(project, "foo") == "foo"
        assert ensure_valid_sound_name("Foo", project) == "foo"

    def test_default_base(self):
        assert get_sound_name(None) == "sound"

    def test_reserved_base(self):
        assert get_sound_name(None, "string") == "string2"


class TestCostumeNames:
    """Costume names: camel case, default costume, sprite scope."""

    def test_existing_costume(self, sprite):
        assert get_costume_name(sprite, "idle") == "idle2"

    def test_default_base(self, sprite):
        assert get_costume_name(None) == "costume"
        assert get_costume_name(sprite, "") == "costume"

    def test_reserved_base(self):
        assert get_costume_name(None, "func") == "func2"

    @pytest.mark.parametrize("name", ["idle", "walk cycle", "", "123", "func", "Run", "跑"])
    def test_ensure_is_idempotent(self, sprite, name):
        once = ensure_valid_costume_name(name, sprite)
        assert ensure_valid_costume_name(once, sprite) == once
        assert validate_costume_name(once, sprite) is None


class TestBackdropNames:
    """Backdrop names: camel case, default backdrop, stage scope."""

    def test_existing_backdrop(self, stage):
        assert get_backdrop_name(stage, "sky") == "sky2"

    def test_default_base_collision(self, stage):
        assert get_backdrop_name(stage) == "backdrop2"

    def test_ensure(self, stage):
        assert ensure_valid_backdrop_name("night", stage) == "night"
        assert ensure_valid_backdrop_name("Sky Blue.jpg", stage) == "skyBlueJpg"


class TestGenericDispatch:
    """Kind-based dispatch used by the command line."""

    def test_rules_cover_every_kind(self):
        assert set(NAMING_RULES) == set(AssetKind)
        assert NAMING_RULES[AssetKind.SPRITE].case is NameCase.PASCAL
        for kind in (AssetKind.COSTUME, AssetKind.SOUND, AssetKind.BACKDROP):
            assert NAMING_RULES[kind].case is NameCase.CAMEL

    def test_get_name_matches_specific_functions(self, project, sprite, stage):
        assert get_name(AssetKind.SPRITE, project, "Foo") == get_sprite_name(project, "Foo")
        assert get_name(AssetKind.COSTUME, sprite, "idle") == get_costume_name(sprite, "idle")
        assert get_name(AssetKind.SOUND, project, "jump") == get_sound_name(project, "jump")
        assert get_name(AssetKind.BACKDROP, stage, "sky") == get_backdrop_name(stage, "sky")

    def test_accepts_kind_value(self):
        assert get_name("costume", None) == "costume"
        assert ensure_valid_name("backdrop", "1st", None) == "st"

    def test_validate_name(self, project):
        assert validate_name(AssetKind.SPRITE, "Foo", project) == validate_sprite_name("Foo", project)
        assert validate_name(AssetKind.SOUND, "Hero", project) is None

    def test_name_tip(self):
        assert name_tip(AssetKind.SOUND) is SOUND_NAME_TIP
        assert name_tip("backdrop") is BACKDROP_NAME_TIP

    def test_injected_reserved_words(self):
        reserved = GOPLUS_RESERVED.extend(keywords=["Hero"])
        assert get_sprite_name(None, "hero", reserved) == "Hero2"
        assert ensure_valid_sprite_name("Hero", None, reserved) == "Hero2"
        assert get_sprite_name(None, "hero") == "Hero"

"""Bilingual user-facing messages."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Locale = Literal["en", "zh"]


class LocaleMessage(BaseModel):
    """A message in English and Chinese, rendered by the caller's UI."""

    model_config = ConfigDict(frozen=True)

    en: str
    zh: str

    def get(self, locale: Locale = "en") -> str:
        """Return the text for the given locale."""
        return self.zh if locale == "zh" else self.en

    def __str__(self) -> str:
        return self.en


SPRITE_NAME_TIP = LocaleMessage(
    en="The sprite name can only contain ASCII letters, digits, and the character _.",
    zh="精灵名称只能包含英文字母、数字及下划线",
)

COSTUME_NAME_TIP = LocaleMessage(
    en="The costume name can only contain ASCII letters, digits, and the character _.",
    zh="造型名称只能包含英文字母、数字及下划线",
)

SOUND_NAME_TIP = LocaleMessage(
    en="The sound name can only contain ASCII letters, digits, and the character _.",
    zh="声音名称只能包含英文字母、数字及下划线",
)

BACKDROP_NAME_TIP = LocaleMessage(
    en="The backdrop name can only contain ASCII letters, digits, and the character _.",
    zh="背景名称只能包含英文字母、数字及下划线",
)

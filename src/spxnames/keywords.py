"""Reserved words of the Go+ identifier grammar.

Asset names are compiled into Go+ identifiers, so they must not collide with
language keywords, predeclared identifiers or builtin type names.
"""

import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class ReservedWordsError(ValueError):
    """Raised when a reserved words file cannot be loaded."""

    pass


@dataclass(frozen=True)
class ReservedWords:
    """Two disjoint reserved sets: keywords and type keywords."""

    keywords: frozenset[str] = field(default_factory=frozenset)
    type_keywords: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, name: object) -> bool:
        return name in self.type_keywords or name in self.keywords

    def __len__(self) -> int:
        return len(self.keywords | self.type_keywords)

    def extend(
        self,
        keywords: Iterable[str] = (),
        type_keywords: Iterable[str] = (),
    ) -> "ReservedWords":
        """Return a new table with the given words added."""
        return ReservedWords(
            keywords=self.keywords | frozenset(keywords),
            type_keywords=self.type_keywords | frozenset(type_keywords),
        )


GOPLUS_KEYWORDS = frozenset(
    {
        # Go keywords
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
        # Predeclared constants and builtin functions
        "true",
        "false",
        "iota",
        "nil",
        "append",
        "cap",
        "clear",
        "close",
        "complex",
        "copy",
        "delete",
        "imag",
        "len",
        "make",
        "max",
        "min",
        "new",
        "panic",
        "print",
        "println",
        "real",
        "recover",
        # Go+ additions
        "main",
        "printf",
        "echo",
        "lambda",
    }
)

GOPLUS_TYPE_KEYWORDS = frozenset(
    {
        "any",
        "bool",
        "byte",
        "comparable",
        "complex64",
        "complex128",
        "error",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    }
)

GOPLUS_RESERVED = ReservedWords(keywords=GOPLUS_KEYWORDS, type_keywords=GOPLUS_TYPE_KEYWORDS)


def _word_list(data: dict[str, Any], key: str, path: Path) -> list[str]:
    words = data.get(key) or []
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise ReservedWordsError(f"'{key}' in {path} must be a list of strings")
    return words


def load_reserved_words(path: Path, base: ReservedWords = GOPLUS_RESERVED) -> ReservedWords:
    """Extend a reserved words table with words read from a file.

    The file is YAML (``.yaml``/``.yml``) or JSON and may contain
    ``keywords`` and ``type_keywords`` lists.

    Args:
        path: Path to the reserved words file.
        base: Table to extend.

    Returns:
        A new ReservedWords including the file's words.

    Raises:
        ReservedWordsError: If the file cannot be read or has the wrong shape.
    """
    try:
        content = path.read_text(encoding="utf-8")
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            data = json.loads(content)
    except OSError as e:
        raise ReservedWordsError(f"Failed to read {path}: {e}") from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ReservedWordsError(f"Failed to parse {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ReservedWordsError(f"{path} must contain a mapping")

    keywords = _word_list(data, "keywords", path)
    type_keywords = _word_list(data, "type_keywords", path)
    logger.debug(
        f"Loaded {len(keywords)} keywords and {len(type_keywords)} type keywords from {path}"
    )
    return base.extend(keywords=keywords, type_keywords=type_keywords)

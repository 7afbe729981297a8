from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Callable, Literal

import regex


PresetName = Literal[
    "all",
    "ascii",
    "numeric",
    "alphabetic",
    "alphanumeric",
    "whitespace",
    "no-whitespace",
    "chinese",
]

CJK_UNIFIED_START = 0x4E00
CJK_UNIFIED_END = 0x9FFF

# Derived properties; unicodedata only exposes general categories.
_ALPHABETIC_RE = regex.compile(r"\p{Alphabetic}")
_WHITE_SPACE_RE = regex.compile(r"\p{White_Space}")


def accept_all(_c: str) -> bool:
    return True


def is_ascii(c: str) -> bool:
    return ord(c) < 0x80


def is_numeric(c: str) -> bool:
    # Any of Nd/Nl/No. Narrower than str.isnumeric(), which also accepts
    # ideographic numerals such as "一".
    return unicodedata.category(c).startswith("N")


def is_alphabetic(c: str) -> bool:
    # Letters plus Nl and Other_Alphabetic marks (e.g. "Ⅻ", "ा").
    return _ALPHABETIC_RE.fullmatch(c) is not None


def is_alphanumeric(c: str) -> bool:
    return is_alphabetic(c) or is_numeric(c)


def is_whitespace(c: str) -> bool:
    # str.isspace() would also accept the U+001C..U+001F separators.
    return _WHITE_SPACE_RE.fullmatch(c) is not None


def is_not_space(c: str) -> bool:
    # Only the literal space is rejected; tabs and newlines still count.
    return c != " "


def is_chinese(c: str) -> bool:
    return CJK_UNIFIED_START <= ord(c) <= CJK_UNIFIED_END


PRESETS: "MappingProxyType[str, Callable[[str], bool]]" = MappingProxyType(
    {
        "all": accept_all,
        "ascii": is_ascii,
        "numeric": is_numeric,
        "alphabetic": is_alphabetic,
        "alphanumeric": is_alphanumeric,
        "whitespace": is_whitespace,
        "no-whitespace": is_not_space,
        "chinese": is_chinese,
    }
)

PRESET_DESCRIPTIONS: "MappingProxyType[str, str]" = MappingProxyType(
    {
        "all": "every character",
        "ascii": "code points below 0x80",
        "numeric": "Unicode numeric categories (Nd, Nl, No)",
        "alphabetic": "Unicode Alphabetic property (letters, Nl, Other_Alphabetic)",
        "alphanumeric": "letters or numeric characters",
        "whitespace": "Unicode White_Space property",
        "no-whitespace": "all but the plain space (tabs/newlines kept)",
        "chinese": "CJK Unified Ideographs, U+4E00..U+9FFF",
    }
)

_ALIASES = {
    "any": "all",
    "everything": "all",
    "digits": "numeric",
    "digit": "numeric",
    "alpha": "alphabetic",
    "letters": "alphabetic",
    "alnum": "alphanumeric",
    "space": "whitespace",
    "nowhitespace": "no-whitespace",
    "no-space": "no-whitespace",
    "cjk": "chinese",
    "han": "chinese",
}


def parse_preset(value: str) -> PresetName:
    v = str(value or "").strip().lower().replace("_", "-")
    v = _ALIASES.get(v, v)
    if v in PRESETS:
        return v  # type: ignore[return-value]
    raise ValueError("preset must be one of: " + "|".join(PRESETS))


def get_predicate(name: str) -> Callable[[str], bool]:
    return PRESETS[parse_preset(name)]

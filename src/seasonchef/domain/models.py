from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar


class Season(Enum):
    ANY = "any"
    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"

    @property
    def help(self) -> str:
        if self is Season.ANY:
            return "Do not filter by season"
        return f"Only provide {self.value} recipes"


class Ethnicity(Enum):
    ANY = "any"
    AMERICAN = "american"
    CHINESE = "chinese"
    EASTERN_EUROPEAN = "eastern-european"
    ETHIOPIAN = "ethiopian"
    FRENCH = "french"
    INDIAN = "indian"
    JAPANESE = "japanese"
    MEDITERRANEAN = "mediterranean"
    MEXICAN = "mexican"
    SPANISH = "spanish"

    @property
    def help(self) -> str:
        if self is Ethnicity.ANY:
            return "Do not filter by ethnicity"
        label = " ".join(part.capitalize() for part in self.value.split("-"))
        return f"Filter for {label} style meals"


# Older recipe files use this spelling.
_ALIASES: dict[str, str] = {"mediteranean": "mediterranean"}

TagT = TypeVar("TagT", Season, Ethnicity)


def parse_tag(enum_cls: type[TagT], text: str) -> TagT:
    if not isinstance(text, str):
        raise ValueError(f"{enum_cls.__name__.lower()} tag must be a string, got {text!r}")
    key = text.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return enum_cls(key)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(
            f"unknown {enum_cls.__name__.lower()} tag {text!r} (expected one of: {allowed})"
        ) from None


def tag_names(enum_cls: type[Season] | type[Ethnicity]) -> list[str]:
    return [member.value for member in enum_cls]


@dataclass(frozen=True)
class Recipe:
    name: str
    seasons: frozenset[Season]
    ethnicities: frozenset[Ethnicity]
    ingredients: tuple[str, ...]
    steps: tuple[str, ...]

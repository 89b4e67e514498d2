from __future__ import annotations

from pathlib import Path


class SeasonchefError(Exception):
    pass


class ConfigError(SeasonchefError):
    pass


class RecipeDirError(SeasonchefError):
    pass


class RecipeParseError(SeasonchefError):
    pass


class RecipeLoadError(SeasonchefError):
    def __init__(self, failures: list[tuple[Path, str]]) -> None:
        self.failures = failures
        lines = [f"Failed to load {len(failures)} recipe file(s):"]
        lines.extend(f"  {message}" for _, message in failures)
        super().__init__("\n".join(lines))

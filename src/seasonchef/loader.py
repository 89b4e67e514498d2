from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .domain import Ethnicity, Recipe, Season, parse_tag
from .errors import RecipeDirError, RecipeLoadError, RecipeParseError

logger = logging.getLogger(__name__)

RECIPE_SUFFIXES = (".yaml", ".yml")


def load_recipes(recipes_dir: str | Path) -> dict[Path, Recipe]:
    """Load every YAML recipe directly inside ``recipes_dir``.

    Files are read in sorted order. Any unreadable or malformed file fails the
    whole load; all such failures are reported together in one
    :class:`RecipeLoadError`.
    """
    root = Path(recipes_dir)
    if not root.exists():
        raise RecipeDirError(f"Recipes directory not found: {root}")
    if not root.is_dir():
        raise RecipeDirError(f"Recipes path is not a directory: {root}")

    try:
        entries = sorted(root.iterdir())
    except OSError as exc:
        raise RecipeDirError(f"Failed to read recipes directory: {root}") from exc

    recipes: dict[Path, Recipe] = {}
    failures: list[tuple[Path, str]] = []
    for path in entries:
        try:
            if not _is_recipe_file(path):
                continue
        except OSError as exc:
            raise RecipeDirError(f"Failed to read recipes directory: {root}") from exc
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            failures.append((path, f"{path}: failed to read file ({exc})"))
            continue
        try:
            recipes[path] = parse_recipe(text, str(path))
        except RecipeParseError as exc:
            failures.append((path, str(exc)))

    if failures:
        raise RecipeLoadError(failures)

    logger.debug("Loaded %d recipe(s) from %s", len(recipes), root)
    return recipes


def parse_recipe(text: str, source: str) -> Recipe:
    try:
        data = yaml.safe_load(text)
    except (yaml.YAMLError, ValueError, TypeError) as exc:
        raise RecipeParseError(f"{source}: invalid YAML ({exc})") from exc

    if not isinstance(data, dict):
        raise RecipeParseError(f"{source}: recipe must be a mapping")

    missing = [key for key in ("name", "seasons", "ethnicities", "ingredients", "steps") if key not in data]
    if missing:
        raise RecipeParseError(f"{source}: missing required keys: {', '.join(missing)}")

    name = data["name"]
    if not isinstance(name, str):
        raise RecipeParseError(f"{source}: name must be a string")

    return Recipe(
        name=name,
        seasons=frozenset(_parse_tags(Season, data["seasons"], "seasons", source)),
        ethnicities=frozenset(_parse_tags(Ethnicity, data["ethnicities"], "ethnicities", source)),
        ingredients=tuple(_string_list(data["ingredients"], "ingredients", source)),
        steps=tuple(_string_list(data["steps"], "steps", source)),
    )


def _is_recipe_file(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() in RECIPE_SUFFIXES


def _parse_tags(enum_cls: Any, value: Any, key: str, source: str) -> list[Any]:
    if not isinstance(value, list):
        raise RecipeParseError(f"{source}: {key} must be a list")
    tags = []
    for item in value:
        try:
            tags.append(parse_tag(enum_cls, item))
        except ValueError as exc:
            raise RecipeParseError(f"{source}: {exc}") from exc
    return tags


def _string_list(value: Any, key: str, source: str) -> list[str]:
    if not isinstance(value, list):
        raise RecipeParseError(f"{source}: {key} must be a list")
    for item in value:
        if not isinstance(item, str):
            raise RecipeParseError(f"{source}: {key} entries must be strings, got {item!r}")
    return list(value)

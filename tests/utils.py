from __future__ import annotations

from pathlib import Path

from seasonchef.domain import Ethnicity, Recipe, Season


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "seasonchef"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


def write_recipe(
    directory: Path,
    filename: str,
    name: str,
    seasons: list[str],
    ethnicities: list[str],
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(
        f"name: {name}\n"
        f"seasons: [{', '.join(seasons)}]\n"
        f"ethnicities: [{', '.join(ethnicities)}]\n"
        "ingredients:\n  - salt\n"
        "steps:\n  - Cook it.\n",
        encoding="utf-8",
    )
    return path


def make_recipe(name: str, seasons: set[Season], ethnicities: set[Ethnicity]) -> Recipe:
    return Recipe(
        name=name,
        seasons=frozenset(seasons),
        ethnicities=frozenset(ethnicities),
        ingredients=("salt",),
        steps=("Cook it.",),
    )

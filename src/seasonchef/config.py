from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .domain import Ethnicity, Season, parse_tag
from .errors import ConfigError

DEFAULT_NUM_RECIPES = 3


@dataclass(frozen=True)
class EffectiveConfig:
    recipes_dir: str
    num_recipes: int
    seasons: tuple[Season, ...]
    ethnicities: tuple[Ethnicity, ...]
    seed: Optional[int]
    config_path: Optional[str]


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/seasonchef"))


def default_config_path() -> Path:
    return _config_root() / "config.toml"


def load_config_file(path: Optional[str] = None) -> tuple[dict[str, Any], Optional[Path]]:
    """Read the TOML config, returning its data and the path it came from.

    Without an explicit ``path`` a missing global config is not an error.
    """
    if path:
        explicit = Path(path)
        if not explicit.exists():
            raise ConfigError(f"Config file not found: {explicit}")
        return _load_toml(explicit), explicit

    global_path = default_config_path()
    if not global_path.exists():
        return {}, None
    return _load_toml(global_path), global_path


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def merge_config(cli: dict[str, Any], file_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = dict(file_cfg)
    merged.update(cli)
    return merged


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    file_cfg, config_path = load_config_file(cli_args.get("config"))
    merged = merge_config(_cli_to_dict(cli_args), file_cfg)

    recipes_dir = merged.get("recipes_dir")
    if not recipes_dir:
        raise ConfigError("recipes_dir is required (set in config or via --recipes-dir)")
    if not isinstance(recipes_dir, str):
        raise ConfigError("recipes_dir must be a string")

    num_recipes = merged.get("num_recipes", DEFAULT_NUM_RECIPES)
    if isinstance(num_recipes, bool) or not isinstance(num_recipes, int):
        raise ConfigError("num_recipes must be an integer")
    if num_recipes < 0:
        raise ConfigError("num_recipes must be non-negative")

    seed = merged.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise ConfigError("seed must be an integer")

    return EffectiveConfig(
        recipes_dir=os.path.expanduser(recipes_dir),
        num_recipes=num_recipes,
        seasons=_tags(Season, merged.get("seasons", []), "seasons"),
        ethnicities=_tags(Ethnicity, merged.get("ethnicities", []), "ethnicities"),
        seed=seed,
        config_path=str(config_path) if config_path else None,
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("recipes_dir", "num_recipes", "seed"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]
    if cli_args.get("season") is not None:
        out["seasons"] = list(cli_args["season"])
    if cli_args.get("ethnicity") is not None:
        out["ethnicities"] = list(cli_args["ethnicity"])
    return out


def _tags(enum_cls: Any, value: Any, key: str) -> tuple[Any, ...]:
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list of tags")
    tags = []
    for item in value:
        if isinstance(item, enum_cls):
            tags.append(item)
            continue
        try:
            tags.append(parse_tag(enum_cls, item))
        except ValueError as exc:
            raise ConfigError(f"Invalid {key} in config: {exc}") from exc
    return tuple(dict.fromkeys(tags))


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [
        f"recipes_dir = {_toml_str(cfg.recipes_dir)}",
        f"num_recipes = {cfg.num_recipes}",
        f"seasons = [{', '.join(_toml_str(tag.value) for tag in cfg.seasons)}]",
        f"ethnicities = [{', '.join(_toml_str(tag.value) for tag in cfg.ethnicities)}]",
    ]
    if cfg.seed is not None:
        lines.append(f"seed = {cfg.seed}")
    return "\n".join(lines) + "\n"


def _toml_str(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'

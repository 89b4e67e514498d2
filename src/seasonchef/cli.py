from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable
from typing import Any

from .config import EffectiveConfig, config_to_toml, resolve_config
from .domain import Ethnicity, Season, parse_tag, tag_names
from .errors import (
    ConfigError,
    RecipeDirError,
    RecipeLoadError,
    RecipeParseError,
    SeasonchefError,
)
from .filters import RecipeFilter
from .loader import load_recipes
from .selector import RecipeSelector

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        cfg = resolve_config(_cli_args_dict(args))
        if args.show_config:
            print(config_to_toml(cfg), end="")
            return 0
        return _cmd_select(cfg)
    except SeasonchefError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seasonchef",
        description="Pick random recipes from a directory, filtered by season and ethnicity.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_tag_help(),
    )
    parser.add_argument(
        "-s",
        "--season",
        nargs="+",
        action="extend",
        type=_tag_type(Season),
        metavar="{" + ",".join(tag_names(Season)) + "}",
        help="The seasonal recipe types to filter to",
    )
    parser.add_argument(
        "-e",
        "--ethnicity",
        nargs="+",
        action="extend",
        type=_tag_type(Ethnicity),
        metavar="{" + ",".join(tag_names(Ethnicity)) + "}",
        help="The ethnicities of recipe types to filter to",
    )
    parser.add_argument(
        "-r",
        "--recipes-dir",
        help="The directory containing the recipes to randomize over in YAML format",
    )
    parser.add_argument(
        "-n",
        "--num-recipes",
        type=_non_negative_int,
        help="The number of recipes to return (default: 3)",
    )
    parser.add_argument("--seed", type=int, help="Seed the random generator for reproducible picks")
    parser.add_argument("--config", help="Path to a TOML config file")
    parser.add_argument("--show-config", action="store_true", help="Print the effective config and exit")
    parser.add_argument("--verbose", action="store_true")
    return parser


def _cmd_select(cfg: EffectiveConfig) -> int:
    recipe_filter = RecipeFilter.from_tags(cfg.seasons, cfg.ethnicities)
    for axis in recipe_filter.empty_axes():
        logger.warning("No %s filter given; no recipes will match. Pass '--%s any' to match all.", axis, axis)

    recipes = load_recipes(cfg.recipes_dir)
    rng = random.Random(cfg.seed) if cfg.seed is not None else None
    selector = RecipeSelector(recipes, recipe_filter, rng=rng)
    selected = selector.select(cfg.num_recipes)
    print([str(path) for path in selected])
    return 0


def _tag_type(enum_cls: Any) -> Callable[[str], Any]:
    def convert(text: str) -> Any:
        try:
            return parse_tag(enum_cls, text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    return convert


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("must be non-negative")
    return value


def _tag_help() -> str:
    lines = ["season tags:"]
    lines.extend(f"  {member.value:<18}{member.help}" for member in Season)
    lines.append("ethnicity tags:")
    lines.extend(f"  {member.value:<18}{member.help}" for member in Ethnicity)
    return "\n".join(lines)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: SeasonchefError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, RecipeDirError):
        return 3
    if isinstance(exc, (RecipeLoadError, RecipeParseError)):
        return 4
    return 1

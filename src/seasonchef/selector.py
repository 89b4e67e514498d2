from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from pathlib import Path

from .domain import Recipe
from .filters import RecipeFilter

logger = logging.getLogger(__name__)


class RecipeSelector:
    def __init__(
        self,
        recipes: Mapping[Path, Recipe],
        recipe_filter: RecipeFilter,
        rng: random.Random | None = None,
    ) -> None:
        self.recipes = recipes
        self.recipe_filter = recipe_filter
        self.rng = rng if rng is not None else random.Random()

    def candidates(self) -> list[Path]:
        return [path for path, recipe in self.recipes.items() if self.recipe_filter.passes(recipe)]

    def select(self, num_recipes: int) -> list[Path]:
        """Pick up to ``num_recipes`` distinct matching recipes uniformly at random."""
        if num_recipes < 0:
            raise ValueError("num_recipes must be non-negative")

        candidates = self.candidates()
        if len(candidates) < num_recipes:
            logger.debug(
                "Only %d recipe(s) match the filters but %d were requested; returning all matches",
                len(candidates),
                num_recipes,
            )
        count = min(num_recipes, len(candidates))
        return self.rng.sample(candidates, count)

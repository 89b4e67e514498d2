from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .domain import Ethnicity, Recipe, Season


@dataclass(frozen=True)
class RecipeFilter:
    """Season and ethnicity constraints for selecting recipes.

    ``any`` on an axis matches every recipe. An empty set is *not* treated as
    ``any``: nothing passes that axis.
    """

    seasons: frozenset[Season]
    ethnicities: frozenset[Ethnicity]

    @classmethod
    def from_tags(cls, seasons: Iterable[Season], ethnicities: Iterable[Ethnicity]) -> RecipeFilter:
        return cls(seasons=frozenset(seasons), ethnicities=frozenset(ethnicities))

    def passes_season(self, recipe: Recipe) -> bool:
        if Season.ANY in self.seasons:
            return True
        return not self.seasons.isdisjoint(recipe.seasons)

    def passes_ethnicity(self, recipe: Recipe) -> bool:
        if Ethnicity.ANY in self.ethnicities:
            return True
        return not self.ethnicities.isdisjoint(recipe.ethnicities)

    def passes(self, recipe: Recipe) -> bool:
        return self.passes_ethnicity(recipe) and self.passes_season(recipe)

    def empty_axes(self) -> list[str]:
        axes: list[str] = []
        if not self.seasons:
            axes.append("season")
        if not self.ethnicities:
            axes.append("ethnicity")
        return axes

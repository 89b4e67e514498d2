from __future__ import annotations

from seasonchef.domain import Ethnicity, Season
from seasonchef.filters import RecipeFilter
from tests.utils import make_recipe


WINTER_FRENCH = make_recipe("Cassoulet", {Season.WINTER}, {Ethnicity.FRENCH})
SUMMER_MEXICAN = make_recipe("Elote", {Season.SUMMER}, {Ethnicity.MEXICAN})
MULTI = make_recipe("Paella", {Season.SPRING, Season.SUMMER}, {Ethnicity.SPANISH, Ethnicity.MEDITERRANEAN})


def test_wildcard_passes_every_recipe() -> None:
    recipe_filter = RecipeFilter.from_tags([Season.ANY], [Ethnicity.ANY])
    for recipe in (WINTER_FRENCH, SUMMER_MEXICAN, MULTI):
        assert recipe_filter.passes(recipe)


def test_wildcard_alongside_other_tags() -> None:
    recipe_filter = RecipeFilter.from_tags([Season.WINTER, Season.ANY], [Ethnicity.INDIAN, Ethnicity.ANY])
    assert recipe_filter.passes(SUMMER_MEXICAN)


def test_season_intersection() -> None:
    recipe_filter = RecipeFilter.from_tags([Season.SUMMER], [Ethnicity.ANY])
    assert not recipe_filter.passes(WINTER_FRENCH)
    assert recipe_filter.passes(SUMMER_MEXICAN)
    assert recipe_filter.passes(MULTI)


def test_both_axes_must_pass() -> None:
    recipe_filter = RecipeFilter.from_tags([Season.SUMMER], [Ethnicity.FRENCH])
    assert recipe_filter.passes_season(SUMMER_MEXICAN)
    assert not recipe_filter.passes_ethnicity(SUMMER_MEXICAN)
    assert not recipe_filter.passes(SUMMER_MEXICAN)


def test_any_shared_tag_is_enough() -> None:
    recipe_filter = RecipeFilter.from_tags([Season.FALL, Season.SPRING], [Ethnicity.MEDITERRANEAN])
    assert recipe_filter.passes(MULTI)


def test_empty_season_filter_matches_nothing() -> None:
    recipe_filter = RecipeFilter.from_tags([], [Ethnicity.ANY])
    for recipe in (WINTER_FRENCH, SUMMER_MEXICAN, MULTI):
        assert not recipe_filter.passes_season(recipe)
        assert not recipe_filter.passes(recipe)
    assert recipe_filter.empty_axes() == ["season"]


def test_empty_ethnicity_filter_matches_nothing() -> None:
    recipe_filter = RecipeFilter.from_tags([Season.ANY], [])
    assert not recipe_filter.passes(MULTI)
    assert recipe_filter.empty_axes() == ["ethnicity"]


def test_passes_is_pure() -> None:
    recipe_filter = RecipeFilter.from_tags([Season.WINTER], [Ethnicity.FRENCH])
    results = {recipe_filter.passes(WINTER_FRENCH) for _ in range(10)}
    assert results == {True}
    assert RecipeFilter.from_tags([], []).empty_axes() == ["season", "ethnicity"]


def test_untagged_recipe_needs_wildcard() -> None:
    untagged = make_recipe("Plain Rice", set(), set())
    assert not RecipeFilter.from_tags([Season.WINTER], [Ethnicity.ANY]).passes(untagged)
    assert RecipeFilter.from_tags([Season.ANY], [Ethnicity.ANY]).passes(untagged)

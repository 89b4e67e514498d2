from .models import Ethnicity, Recipe, Season, parse_tag, tag_names

__all__ = [
    "Ethnicity",
    "Recipe",
    "Season",
    "parse_tag",
    "tag_names",
]

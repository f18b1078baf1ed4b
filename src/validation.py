from typing import Any

from . import schemas
from .errors import IncompleteRecipe, InvalidBody, InvalidTaxonomy
from .normalize import clean_list, clean_text, parse_servings
from .taxonomy import Taxonomy


def validate_recipe(body: Any, taxonomy: Taxonomy) -> schemas.RecipeCreate:
    """Normalize a raw request body into a storable recipe.

    Checks run in a fixed order and stop at the first failure: a missing
    required field raises ``IncompleteRecipe`` before the category and
    subcategory are looked at (``InvalidTaxonomy``).
    """
    if not isinstance(body, dict):
        raise InvalidBody()

    title = clean_text(body.get("title"))
    category = clean_text(body.get("category"))
    subcategory = clean_text(body.get("subcategory"))
    servings = parse_servings(body.get("servings"))
    prep = clean_text(body.get("prep"))
    total = clean_text(body.get("total"))
    ingredients = clean_list(body.get("ingredients"))
    steps = clean_list(body.get("steps"))

    if not (title and category and prep and total and ingredients and steps):
        raise IncompleteRecipe()
    if not taxonomy.accepts(category, subcategory):
        raise InvalidTaxonomy()

    return schemas.RecipeCreate(
        title=title,
        category=category,
        subcategory=subcategory,
        servings=servings,
        prep=prep,
        total=total,
        ingredients=ingredients,
        steps=steps,
    )

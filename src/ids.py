import time

from .normalize import slugify


def now_ms() -> int:
    return int(time.time() * 1000)


def make_recipe_id(title: str, created_at: int) -> str:
    """Build the permanent id of a new recipe.

    The timestamp suffix is the only thing separating two recipes with the
    same title, so two creations within one millisecond collide. Inserts
    surface that as ``DuplicateRecipeId``.
    """
    return f"{slugify(title)}-{created_at}"

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from . import models, schemas
from .errors import DuplicateRecipeId, StorageError
from .ids import make_recipe_id
from .logger import get_logger
from .serialize import dump_list
from .sorting import SortPolicy
from .taxonomy import Taxonomy

logger = get_logger(__name__)


def _columns(recipe: schemas.RecipeCreate) -> dict:
    return {
        "title": recipe.title,
        "category": recipe.category,
        "subcategory": recipe.subcategory,
        "servings": recipe.servings,
        "prep": recipe.prep,
        "total": recipe.total,
        "ingredients_json": dump_list(recipe.ingredients),
        "steps_json": dump_list(recipe.steps),
    }


def get_recipes(db: Session, policy: SortPolicy, taxonomy: Taxonomy):
    return policy(db.query(models.Recipe).all(), taxonomy)


def create_recipe(db: Session, recipe: schemas.RecipeCreate, created_at: int):
    db_recipe = models.Recipe(
        id=make_recipe_id(recipe.title, created_at),
        created_at=created_at,
        **_columns(recipe),
    )
    db.add(db_recipe)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Recipe id collision on insert: {db_recipe.id}")
        raise DuplicateRecipeId()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Insert of recipe {db_recipe.id} failed: {e}")
        raise StorageError("Insert failed")
    db.refresh(db_recipe)
    return db_recipe


def update_recipe(db: Session, recipe_id: str, recipe: schemas.RecipeCreate):
    """Overwrite every mutable column of ``recipe_id``.

    The affected row count is not checked: an unknown id is not an error.
    """
    try:
        db.query(models.Recipe).filter(models.Recipe.id == recipe_id).update(
            _columns(recipe), synchronize_session=False
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Update of recipe {recipe_id} failed: {e}")
        raise StorageError("Update failed")


def delete_recipe(db: Session, recipe_id: str):
    # deleting an unknown id succeeds as well
    try:
        db.query(models.Recipe).filter(models.Recipe.id == recipe_id).delete(
            synchronize_session=False
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Delete of recipe {recipe_id} failed: {e}")
        raise StorageError("Delete failed")

from contextlib import asynccontextmanager
from typing import Any, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import config, crud, schemas
from .db import SessionLocal, init_db
from .errors import InvalidBody, MissingRecipeId, RecipeError
from .ids import now_ms
from .logger import get_logger
from .sorting import SortPolicy, get_sort_policy
from .taxonomy import DEFAULT_TAXONOMY, Taxonomy
from .validation import validate_recipe

logger = get_logger(__name__)


class JSONUTF8Response(JSONResponse):
    media_type = "application/json; charset=utf-8"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB once at startup; fail fast on a bad sort policy name
    get_sort_policy(config.SORT_POLICY)
    init_db()
    logger.info(f"Recipe API ready (sort policy: {config.SORT_POLICY})")
    yield


app = FastAPI(
    title="Recipes", lifespan=lifespan, default_response_class=JSONUTF8Response
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RecipeError)
async def recipe_error_handler(request: Request, exc: RecipeError):
    return JSONUTF8Response(
        status_code=exc.status_code, content={"error": exc.message}
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc!r}",
        exc_info=exc,
    )
    return JSONUTF8Response(
        status_code=500, content={"error": "Internal server error"}
    )


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_taxonomy() -> Taxonomy:
    return DEFAULT_TAXONOMY


def get_policy() -> SortPolicy:
    return get_sort_policy(config.SORT_POLICY)


async def read_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise InvalidBody()


def require_id(id: Optional[str] = None) -> str:
    if not id:
        raise MissingRecipeId()
    return id


@app.get("/api/recipes", response_model=List[schemas.Recipe])
def list_recipes(
    db: Session = Depends(get_db),
    policy: SortPolicy = Depends(get_policy),
    taxonomy: Taxonomy = Depends(get_taxonomy),
):
    return crud.get_recipes(db, policy, taxonomy)


@app.post("/api/recipes", response_model=schemas.Saved)
def create_recipe(
    body: Any = Depends(read_body),
    db: Session = Depends(get_db),
    taxonomy: Taxonomy = Depends(get_taxonomy),
):
    try:
        recipe = validate_recipe(body, taxonomy)
    except RecipeError as e:
        logger.warning(f"Rejected new recipe: {e.message}")
        raise
    db_recipe = crud.create_recipe(db, recipe, created_at=now_ms())
    logger.info(f"Created recipe {db_recipe.id}")
    return {"ok": True, "id": db_recipe.id}


# recipe_id is declared before body so a missing id wins over a bad body
@app.put("/api/recipes", response_model=schemas.Saved)
def update_recipe(
    recipe_id: str = Depends(require_id),
    body: Any = Depends(read_body),
    db: Session = Depends(get_db),
    taxonomy: Taxonomy = Depends(get_taxonomy),
):
    try:
        recipe = validate_recipe(body, taxonomy)
    except RecipeError as e:
        logger.warning(f"Rejected update of {recipe_id}: {e.message}")
        raise
    crud.update_recipe(db, recipe_id, recipe)
    logger.info(f"Updated recipe {recipe_id}")
    return {"ok": True, "id": recipe_id}


@app.delete("/api/recipes", response_model=schemas.Deleted)
def delete_recipe(
    recipe_id: str = Depends(require_id), db: Session = Depends(get_db)
):
    crud.delete_recipe(db, recipe_id)
    logger.info(f"Deleted recipe {recipe_id}")
    return {"ok": True}

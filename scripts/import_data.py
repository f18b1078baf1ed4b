from pathlib import Path

from src import crud
from src.db import SessionLocal, init_db
from src.errors import RecipeError
from src.ids import now_ms
from src.logger import get_logger
from src.recipes import load_recipes
from src.serialize import load_list
from src.taxonomy import DEFAULT_TAXONOMY
from src.validation import validate_recipe

logger = get_logger("import_data")


def from_export(raw):
    """Accept rows as GET /api/recipes returns them (lists as JSON text)."""
    if not isinstance(raw, dict):
        return raw
    record = dict(raw)
    for name in ("ingredients", "steps"):
        encoded = record.pop(f"{name}_json", None)
        if name not in record and encoded is not None:
            record[name] = load_list(encoded)
    return record


def import_records(db, records, started_at=None):
    """Validate and insert ``records``; returns (added, skipped).

    Each record gets its own millisecond so ids from one run never collide.
    """
    started_at = started_at if started_at is not None else now_ms()
    added = skipped = 0
    for offset, raw in enumerate(records):
        try:
            recipe = validate_recipe(from_export(raw), DEFAULT_TAXONOMY)
            crud.create_recipe(db, recipe, created_at=started_at + offset)
        except (RecipeError, ValueError) as e:
            title = raw.get("title") if isinstance(raw, dict) else None
            reason = e.message if isinstance(e, RecipeError) else f"bad list column: {e}"
            logger.warning(f"Skipping record {offset} ({title!r}): {reason}")
            skipped += 1
            continue
        added += 1
    return added, skipped


def main():
    init_db()
    p = Path(__file__).resolve().parents[1] / 'data' / 'recipes.json'
    if not p.exists():
        logger.error(f'{p} not found')
        return
    db = SessionLocal()
    try:
        added, skipped = import_records(db, load_recipes(p))
    finally:
        db.close()
    logger.info(f'Imported {added} recipes, skipped {skipped}')


if __name__ == '__main__':
    main()

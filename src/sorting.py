from typing import Callable, Dict, Iterable, List

from .taxonomy import Taxonomy

SortPolicy = Callable[[Iterable, Taxonomy], List]


def _fold(s) -> str:
    return (s or "").casefold()


def ranked(rows, taxonomy: Taxonomy) -> list:
    """Category rank, then the category's subcategory priority, then
    subcategory and title alphabetically (case-insensitive)."""
    return sorted(
        rows,
        key=lambda r: (
            taxonomy.category_rank(r.category),
            taxonomy.subcategory_rank(r.category, r.subcategory),
            _fold(r.subcategory),
            _fold(r.title),
        ),
    )


def alphabetical(rows, taxonomy: Taxonomy) -> list:
    return sorted(
        rows,
        key=lambda r: (
            taxonomy.category_rank(r.category),
            _fold(r.subcategory),
            _fold(r.title),
        ),
    )


def newest(rows, taxonomy: Taxonomy) -> list:
    # taxonomy unused; kept so every policy has the same signature
    return sorted(rows, key=lambda r: (-(r.created_at or 0), _fold(r.title)))


SORT_POLICIES: Dict[str, SortPolicy] = {
    "ranked": ranked,
    "alphabetical": alphabetical,
    "newest": newest,
}


def get_sort_policy(name: str) -> SortPolicy:
    try:
        return SORT_POLICIES[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"unknown sort policy {name!r}; expected one of {sorted(SORT_POLICIES)}"
        ) from None

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

# Labels are stored verbatim in the `recipes` table, so they must not be
# translated or re-cased.
CATEGORIES: Tuple[str, ...] = (
    "Frühstück",
    "Hauptspeise",
    "Bakery",
    "Snacks & Desserts",
    "Drinks",
)

SUBCATEGORIES: Dict[str, List[str]] = {
    "Frühstück": ["Brot & Aufstriche", "Sonstiges"],
    "Hauptspeise": [
        "Burger, Wraps & Bowls",
        "Vegetarische Gerichte",
        "Suppen & Eintöpfe",
        "Pasta & Nudeln",
        "Pizza",
        "Reis & Getreidegerichte",
        "Internationale Küche & Currys",
        "Snacks, Beilage & Fingerfood",
        "Basics & Saucen",
        "Curry-Paste",
    ],
    "Bakery": ["Kuchen & Torten", "Plätzchen & Kleingebäck", "Sonstiges Gebäck"],
    # empty list: any subcategory is accepted
    "Snacks & Desserts": [],
    "Drinks": ["Alkoholische Getränke", "Nicht-alkoholische Getränke"],
}

# Display priority for subcategories; categories not listed here sort their
# subcategories alphabetically.
SUBCATEGORY_RANKS: Dict[str, List[str]] = {
    "Frühstück": ["Brot & Aufstriche", "Sonstiges"],
    "Drinks": ["Alkoholische Getränke", "Nicht-alkoholische Getränke"],
}

UNRANKED = 99


@dataclass(frozen=True)
class Taxonomy:
    """Fixed category/subcategory table shared by validation and sorting.

    Category rank is the 1-based position in ``categories``; anything not in
    the table ranks after every known category. Subcategory rank is the
    1-based position in the category's rank table, or ``UNRANKED``.
    """

    categories: Tuple[str, ...]
    subcategories: Mapping[str, Tuple[str, ...]]
    subcategory_ranks: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def build(
        cls,
        categories,
        subcategories: Mapping[str, List[str]],
        subcategory_ranks: Optional[Mapping[str, List[str]]] = None,
    ) -> "Taxonomy":
        categories = tuple(categories)
        unknown = set(subcategories) - set(categories)
        if unknown:
            raise ValueError(f"subcategories for unknown categories: {sorted(unknown)}")
        ranks = subcategory_ranks or {}
        for cat, ranked in ranks.items():
            allowed = subcategories.get(cat, [])
            stray = [s for s in ranked if allowed and s not in allowed]
            if cat not in categories or stray:
                raise ValueError(f"rank table for {cat!r} does not match the taxonomy")
        return cls(
            categories=categories,
            subcategories=MappingProxyType(
                {c: tuple(subcategories.get(c, ())) for c in categories}
            ),
            subcategory_ranks=MappingProxyType(
                {c: tuple(r) for c, r in ranks.items()}
            ),
        )

    def is_category(self, category: str) -> bool:
        return category in self.subcategories

    def allowed_subcategories(self, category: str) -> Tuple[str, ...]:
        return self.subcategories.get(category, ())

    def accepts(self, category: str, subcategory: str) -> bool:
        """True if the pair may be stored.

        The subcategory is optional. It is only checked when one was given and
        the category restricts its subcategories.
        """
        if not self.is_category(category):
            return False
        allowed = self.allowed_subcategories(category)
        if subcategory and allowed:
            return subcategory in allowed
        return True

    def category_rank(self, category: str) -> int:
        try:
            return self.categories.index(category) + 1
        except ValueError:
            return len(self.categories) + 1

    def subcategory_rank(self, category: str, subcategory: str) -> int:
        ranked = self.subcategory_ranks.get(category, ())
        if subcategory in ranked:
            return ranked.index(subcategory) + 1
        return UNRANKED


DEFAULT_TAXONOMY = Taxonomy.build(CATEGORIES, SUBCATEGORIES, SUBCATEGORY_RANKS)

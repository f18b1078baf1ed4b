import re
import unicodedata
from typing import Any, List

# Leading integer, the way JavaScript's parseInt reads it: "12 people" -> 12
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_NON_SLUG = re.compile(r"[^a-z0-9]+")

# servings is stored in a signed 64-bit INTEGER column
SERVINGS_MAX = 2**63 - 1

SLUG_MAX_LENGTH = 64
SLUG_FALLBACK = "rezept"


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def clean_list(value: Any) -> List[str]:
    """Trim every element and drop the empty ones; non-lists become []."""
    if not isinstance(value, list):
        return []
    items = [clean_text(v) for v in value]
    return [i for i in items if i]


def parse_servings(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 1
    m = _LEADING_INT.match(str(value))
    if not m:
        return 1
    return min(max(1, int(m.group(1))), SERVINGS_MAX)


def _strip_diacritics(s: str) -> str:
    decomposed = unicodedata.normalize("NFD", s)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def slugify(title: str) -> str:
    """Lower-case ASCII slug of ``title``: "Café  Crème!" -> "cafe-creme"."""
    w = _strip_diacritics((title or "").lower())
    w = _NON_SLUG.sub("-", w).strip("-")
    return w[:SLUG_MAX_LENGTH] or SLUG_FALLBACK

import json
from typing import List

# ingredients and steps are stored as JSON text columns; nothing else in the
# package should call json on them directly.


def dump_list(items: List[str]) -> str:
    return json.dumps(list(items), ensure_ascii=False)


def load_list(text: str) -> List[str]:
    if not text:
        return []
    value = json.loads(text)
    if not isinstance(value, list):
        raise ValueError("expected a JSON array")
    return [str(v) for v in value]

import json
from pathlib import Path


def load_recipes(path):
    """Load raw recipe records from a JSON file.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        list: list of recipe dictionaries, empty if the file is missing.
    """
    p = Path(path)
    if not p.exists():
        return []
    with p.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{p} must contain a JSON array of recipes")
    return data

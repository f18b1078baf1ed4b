"""
config.py
---------
Loads settings from the environment (and a local .env file) and exposes
them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── Database ──────────────────────────────────────────────
DATABASE_URL: str = os.getenv("RECIPES_DATABASE_URL", "sqlite:///./recipes.db")

# ── Read path ─────────────────────────────────────────────
# one of: ranked, alphabetical, newest
SORT_POLICY: str = os.getenv("RECIPES_SORT_POLICY", "ranked")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("RECIPES_LOG_LEVEL", "INFO").upper()

# ── HTTP ──────────────────────────────────────────────────
_raw_origins = os.getenv("RECIPES_CORS_ORIGINS", "*")
CORS_ORIGINS: list[str] = [
    o.strip() for o in _raw_origins.split(",") if o.strip()
] or ["*"]

HOST: str = os.getenv("RECIPES_HOST", "127.0.0.1")
PORT: int = int(os.getenv("RECIPES_PORT", "8000"))

from sqlalchemy import Column, Integer, String, Text
from .db import Base


class Recipe(Base):
    # Only `id` is constrained; writes go through validation, but rows may
    # also come from older tables with NULL columns.
    __tablename__ = "recipes"
    id = Column(String, primary_key=True)  # <slug>-<created_at>
    title = Column(Text)
    category = Column(Text)
    subcategory = Column(Text, default="")
    servings = Column(Integer, default=1)
    prep = Column(Text)
    total = Column(Text)
    ingredients_json = Column(Text)  # JSON-encoded list
    steps_json = Column(Text)  # JSON-encoded list
    created_at = Column(Integer)  # ms since epoch

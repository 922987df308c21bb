"""Shared FastAPI dependencies."""

from functools import lru_cache

from docquery.config import get_settings
from docquery.services.content.engine import ContentEngine


@lru_cache(maxsize=1)
def get_engine() -> ContentEngine:
    """Return the process-wide engine; its cache lives as long as the app."""
    return ContentEngine.from_settings(get_settings())

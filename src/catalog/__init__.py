"""Furniture catalog — items and their default dimensions."""

from .models import FurnitureItem
from .defaults import (
    DEFAULT_DIMENSIONS, FALLBACK_DIMENSIONS,
    get_default_dimensions, resolve_dimensions,
)

__all__ = [
    # Models
    "FurnitureItem",
    # Defaults
    "DEFAULT_DIMENSIONS", "FALLBACK_DIMENSIONS",
    "get_default_dimensions", "resolve_dimensions",
]

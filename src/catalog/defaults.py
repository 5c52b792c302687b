"""Default furniture dimensions, used when a model can't be measured."""

from __future__ import annotations

import logging
from typing import Callable

from src.pipeline.placer.models import Dimensions

from .models import FurnitureItem


log = logging.getLogger(__name__)


# Width × height × depth in metres, per furniture type.
DEFAULT_DIMENSIONS: dict[str, Dimensions] = {
    "sofa":      Dimensions(width=2.0, height=0.9, depth=0.9),
    "bed":       Dimensions(width=1.6, height=0.5, depth=2.0),
    "chair":     Dimensions(width=0.5, height=0.9, depth=0.5),
    "table":     Dimensions(width=1.2, height=0.75, depth=0.8),
    "desk":      Dimensions(width=1.2, height=0.75, depth=0.6),
    "wardrobe":  Dimensions(width=1.2, height=2.0, depth=0.6),
    "shelf":     Dimensions(width=0.8, height=1.8, depth=0.3),
    "cabinet":   Dimensions(width=0.8, height=0.9, depth=0.5),
    "lamp":      Dimensions(width=0.3, height=1.5, depth=0.3),
}

FALLBACK_DIMENSIONS = Dimensions(width=1.0, height=1.0, depth=1.0)


def get_default_dimensions(furniture_type: str) -> Dimensions:
    """Dimensions for *furniture_type*, or a 1 m cube for unknown types."""
    return DEFAULT_DIMENSIONS.get(furniture_type.lower(), FALLBACK_DIMENSIONS)


def resolve_dimensions(
    item: FurnitureItem,
    measure: Callable[[str], Dimensions] | None = None,
) -> Dimensions:
    """Measure the item's model, falling back to the type table.

    *measure* is the asset collaborator (loads the model at a path and
    returns its size).  Any error it raises falls back to the defaults.
    """
    if item.model_path and measure is not None:
        try:
            return measure(item.model_path)
        except Exception as exc:
            log.warning("Could not measure %s (%s): %s; using %s defaults",
                        item.id, item.model_path, exc, item.type)
    return get_default_dimensions(item.type)

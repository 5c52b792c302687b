"""Catalog dataclasses: furniture items offered to the user."""

from __future__ import annotations

from dataclasses import dataclass

from src.pipeline.placer.models import (
    Dimensions, PlacementCandidate, Vec3, DEFAULT_ROTATION, DEFAULT_SCALE,
)


@dataclass
class FurnitureItem:
    id: str
    name: str
    type: str                           # "sofa" | "bed" | "chair" | ...
    model_path: str | None = None       # 3D asset; None for primitive boxes
    description: str = ""

    def to_candidate(
        self,
        dimensions: Dimensions,
        *,
        rotation: float = DEFAULT_ROTATION,
        scale: Vec3 = DEFAULT_SCALE,
    ) -> PlacementCandidate:
        """Build a candidate; rotation and scale default to identity."""
        return PlacementCandidate(
            dimensions=dimensions,
            rotation=rotation,
            scale=scale,
            name=self.name,
        )

"""Shared room fixtures for placer tests.

  - unit_cube(): 1×1×1 object
  - make_saturated_room(): ten 1 m wide slabs spanning the whole default
    room, so no object with a footprint fits anywhere
"""

from __future__ import annotations

from src.pipeline.placer import Dimensions, PlacementCandidate, PlacedObject


UNIT = Dimensions(width=1.0, height=1.0, depth=1.0)


def unit_cube(name: str = "cube") -> PlacementCandidate:
    return PlacementCandidate(dimensions=UNIT, name=name)


def make_origin_scene() -> list[PlacedObject]:
    """One unit cube at the origin."""
    return [unit_cube("origin_cube").at((0.0, 0.0, 0.0))]


def make_saturated_room() -> list[PlacedObject]:
    """Slabs 1 m wide and 9.6 m deep centred on x = -4.5 .. 4.5."""
    slab = Dimensions(width=1.0, height=1.0, depth=9.6)
    return [
        PlacedObject(dimensions=slab, position=(-4.5 + i, 0.0, 0.0), name=f"slab_{i}")
        for i in range(10)
    ]

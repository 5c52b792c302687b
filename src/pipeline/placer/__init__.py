"""Placer — decides where a piece of furniture may go in the room.

Submodules:
  models        Input/output dataclasses and placement defaults.
  geometry      Bounding-box computation, overlap and room containment.
  engine        Validity test, first-fit grid search and placement flow.
  serialization JSON conversion (parse_scene, scene_to_dict, ...).
"""

from .models import (
    Vec3, Dimensions, PlacementCandidate, PlacedObject, AABB,
    PlacementResult, InvalidGeometryError, check_position,
    DEFAULT_POSITION, DEFAULT_ROTATION, DEFAULT_SCALE, NO_SPACE_MESSAGE,
    PLACED, RELOCATED, NO_SPACE,
)
from .geometry import compute_bounding_box, boxes_overlap, box_inside_room
from .engine import (
    is_valid_position, iter_search_grid, find_valid_position, place_object,
)
from .serialization import (
    parse_placed_object, parse_scene, placed_object_to_dict, scene_to_dict,
    placement_result_to_dict,
)

__all__ = [
    # Models
    "Vec3", "Dimensions", "PlacementCandidate", "PlacedObject", "AABB",
    "PlacementResult", "InvalidGeometryError", "check_position",
    "DEFAULT_POSITION", "DEFAULT_ROTATION", "DEFAULT_SCALE", "NO_SPACE_MESSAGE",
    "PLACED", "RELOCATED", "NO_SPACE",
    # Geometry
    "compute_bounding_box", "boxes_overlap", "box_inside_room",
    # Engine
    "is_valid_position", "iter_search_grid", "find_valid_position", "place_object",
    # Serialization
    "parse_placed_object", "parse_scene", "placed_object_to_dict",
    "scene_to_dict", "placement_result_to_dict",
]

"""Low-level geometry helpers for the placer."""

from __future__ import annotations

from shapely.affinity import rotate as shapely_rotate
from shapely.geometry import Polygon

from src.pipeline.config import RoomBounds

from .models import AABB, Dimensions, Vec3


def footprint_halfdims(
    dimensions: Dimensions, scale: Vec3,
) -> tuple[float, float]:
    """Return (half_width, half_depth) of the scaled footprint."""
    return (
        dimensions.width / 2 * scale[0],
        dimensions.depth / 2 * scale[2],
    )


def compute_bounding_box(
    position: Vec3,
    dimensions: Dimensions,
    scale: Vec3,
    yaw: float,
) -> AABB:
    """AABB of an object scaled by *scale* and rotated by *yaw* about Y.

    The footprint rectangle is rotated in the X/Z plane about the object's
    position and its bounds are taken, so the box is tight on X and Z for
    any yaw.  Height is not rotated: the object rests on its position, so
    ``min_y = position.y`` and ``max_y = position.y + height * scale.y``.
    """
    x, y, z = position
    hw, hd = footprint_halfdims(dimensions, scale)
    height = dimensions.height * scale[1]

    footprint = Polygon([
        (x - hw, z - hd), (x + hw, z - hd),
        (x + hw, z + hd), (x - hw, z + hd),
    ])
    if yaw:
        footprint = shapely_rotate(
            footprint, yaw, origin=(x, z), use_radians=True,
        )
    min_x, min_z, max_x, max_z = footprint.bounds

    return AABB(
        min_x=min_x, max_x=max_x,
        min_y=y, max_y=y + height,
        min_z=min_z, max_z=max_z,
    )


def boxes_overlap(a: AABB, b: AABB) -> bool:
    """True if two boxes overlap with positive depth on all three axes.

    Boxes that only touch (``a.max_x == b.min_x``) do not overlap.
    """
    return (
        a.min_x < b.max_x and a.max_x > b.min_x
        and a.min_y < b.max_y and a.max_y > b.min_y
        and a.min_z < b.max_z and a.max_z > b.min_z
    )


def box_inside_room(bbox: AABB, room: RoomBounds) -> bool:
    """Check that a box stays within the room's walls (Y is unbounded)."""
    return not (
        bbox.min_x < room.min_x
        or bbox.max_x > room.max_x
        or bbox.min_z < room.min_z
        or bbox.max_z > room.max_z
    )

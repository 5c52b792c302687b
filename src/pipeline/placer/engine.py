"""Main placement engine — validity test and first-fit grid search."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from src.pipeline.config import ROOM_RULES, RoomRules

from .geometry import compute_bounding_box, boxes_overlap, box_inside_room
from .models import (
    PlacementCandidate, PlacedObject, PlacementResult, Vec3,
    DEFAULT_POSITION, NO_SPACE_MESSAGE, PLACED, RELOCATED, NO_SPACE,
)


log = logging.getLogger(__name__)


# ── Validity test ──────────────────────────────────────────────────


def is_valid_position(
    candidate_position: Vec3,
    candidate: PlacementCandidate | PlacedObject,
    placed_objects: Iterable[PlacedObject],
    *,
    rules: RoomRules = ROOM_RULES,
) -> bool:
    """Check whether *candidate* may occupy *candidate_position*.

    Returns False as soon as the candidate's box overlaps a placed object,
    or if it sticks out of the room.  Touching a neighbour or a wall is
    allowed.  Nothing is mutated or retained.
    """
    box = compute_bounding_box(
        candidate_position,
        candidate.dimensions,
        candidate.scale,
        candidate.rotation,
    )

    for other in placed_objects:
        other_box = compute_bounding_box(
            other.position, other.dimensions, other.scale, other.rotation,
        )
        if boxes_overlap(box, other_box):
            return False

    return box_inside_room(box, rules.room)


# ── Search ─────────────────────────────────────────────────────────


def iter_search_grid(rules: RoomRules = ROOM_RULES) -> Iterator[Vec3]:
    """Yield grid positions in scan order: X ascending, then Z ascending.

    Coordinates come from integer indices so a long scan does not
    accumulate float drift.
    """
    start, _ = rules.search_range
    step = rules.search_step
    n = rules.grid_size
    for i in range(n):
        x = start + i * step
        for j in range(n):
            yield (x, rules.floor_y, start + j * step)


def find_valid_position(
    candidate: PlacementCandidate | PlacedObject,
    placed_objects: Iterable[PlacedObject],
    *,
    rules: RoomRules = ROOM_RULES,
) -> Vec3 | None:
    """Return the first grid position where *candidate* fits.

    First-fit, not nearest-fit: the result depends only on the scan order.
    Returns None when no grid point is free.
    """
    placed = list(placed_objects)
    tested = 0
    for pos in iter_search_grid(rules):
        tested += 1
        if is_valid_position(pos, candidate, placed, rules=rules):
            log.debug("Found free slot at (%.2f, %.2f, %.2f) after %d grid points",
                      pos[0], pos[1], pos[2], tested)
            return pos

    log.debug("No free slot among %d grid points (%d placed objects)",
              tested, len(placed))
    return None


# ── Placement flow ─────────────────────────────────────────────────


def place_object(
    candidate: PlacementCandidate,
    placed_objects: Iterable[PlacedObject],
    *,
    position: Vec3 = DEFAULT_POSITION,
    rules: RoomRules = ROOM_RULES,
) -> PlacementResult:
    """Try *position* first, then fall back to the grid search.

    The caller owns the scene: this never appends to *placed_objects*.
    Commit ``result.placed`` when ``result.ok``; otherwise show
    ``result.message`` and leave the scene unchanged.
    """
    placed = list(placed_objects)
    label = candidate.name or "object"

    if is_valid_position(position, candidate, placed, rules=rules):
        log.info("Placed %s at requested (%.2f, %.2f, %.2f)",
                 label, position[0], position[1], position[2])
        return PlacementResult(status=PLACED, placed=candidate.at(position))

    found = find_valid_position(candidate, placed, rules=rules)
    if found is None:
        log.warning("Cannot place %s: no free grid point among %d placed objects",
                    label, len(placed))
        return PlacementResult(status=NO_SPACE, message=NO_SPACE_MESSAGE)

    log.info("Relocated %s from (%.2f, %.2f, %.2f) to (%.2f, %.2f, %.2f)",
             label, position[0], position[1], position[2],
             found[0], found[1], found[2])
    return PlacementResult(status=RELOCATED, placed=candidate.at(found))

"""Shared room constants for the placement engine.

These values describe the fixed room the furniture is placed in and the
grid the resolver scans when a requested position is taken.  Both the
**validity test** (room containment) and the **search** (candidate grid)
derive their parameters from this single source of truth.

Pass a different ``RoomRules`` to the engine to place objects in another
room shape; the module-level ``ROOM_RULES`` is the default room.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class RoomBounds:
    """Horizontal extent of the room, in metres.

    There is no vertical bound: the room is treated as unbounded in height.
    """

    min_x: float = -5.0
    max_x: float = 5.0
    min_z: float = -4.8
    max_z: float = 4.8

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_z > self.max_z:
            raise ValueError(
                f"Room bounds are inverted: x=[{self.min_x}, {self.max_x}] "
                f"z=[{self.min_z}, {self.max_z}]"
            )


@dataclass(frozen=True)
class RoomRules:
    """Room bounds plus the search grid used to find a free slot."""

    room: RoomBounds = field(default_factory=RoomBounds)
    """Walls every placed object must stay inside."""

    search_step: float = 0.5
    """Grid spacing on both X and Z."""

    search_range: tuple[float, float] = (-5.0, 5.0)
    """Inclusive (start, stop) of the scan on both X and Z.

    Wider than the default room's Z bound; points outside the room are
    rejected by the containment check."""

    floor_y: float = 0.0
    """Height at which searched positions are placed."""

    def __post_init__(self) -> None:
        if self.search_step <= 0:
            raise ValueError(f"search_step must be > 0, got {self.search_step}")
        start, stop = self.search_range
        if start > stop:
            raise ValueError(f"search_range is inverted: {self.search_range}")

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def grid_size(self) -> int:
        """Number of grid coordinates per axis."""
        start, stop = self.search_range
        return int(math.floor((stop - start) / self.search_step + 1e-9)) + 1


# Default room, importable everywhere.
ROOM_RULES = RoomRules()

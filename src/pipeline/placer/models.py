"""Placer input/output dataclasses and placement defaults."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vec3 = tuple[float, float, float]


class InvalidGeometryError(ValueError):
    """Raised when dimensions, scale or a position are malformed."""

    def __init__(self, field_name: str, value: object, reason: str) -> None:
        self.field_name = field_name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field_name} {value!r}: {reason}")


def _check_finite(field_name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise InvalidGeometryError(field_name, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidGeometryError(field_name, value, "must be finite")


def _check_non_negative(field_name: str, value: float) -> None:
    _check_finite(field_name, value)
    if value < 0:
        raise InvalidGeometryError(field_name, value, "must be >= 0")


def _check_vec3(field_name: str, vec: Vec3, *, non_negative: bool = False) -> None:
    if len(vec) != 3:
        raise InvalidGeometryError(field_name, vec, "must have 3 components")
    check = _check_non_negative if non_negative else _check_finite
    for axis, v in zip("xyz", vec):
        check(f"{field_name}.{axis}", v)


def check_position(position: Vec3) -> Vec3:
    """Validate a requested position and return it as a tuple."""
    _check_vec3("position", position)
    return tuple(position)


# ── Defaults ───────────────────────────────────────────────────────
# Applied when a candidate is built or a scene is parsed, never inside
# the engine.

DEFAULT_POSITION: Vec3 = (0.0, 0.0, 0.0)
DEFAULT_ROTATION = 0.0      # yaw, radians
DEFAULT_SCALE: Vec3 = (1.0, 1.0, 1.0)

NO_SPACE_MESSAGE = "No space available for this furniture"


# ── Geometry inputs ────────────────────────────────────────────────


@dataclass(frozen=True)
class Dimensions:
    """Unscaled size of an object in its local frame (metres)."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        _check_non_negative("dimensions.width", self.width)
        _check_non_negative("dimensions.height", self.height)
        _check_non_negative("dimensions.depth", self.depth)


@dataclass(frozen=True)
class PlacementCandidate:
    """An object the caller wants to add, before it has a position."""

    dimensions: Dimensions
    rotation: float = DEFAULT_ROTATION     # yaw about Y, radians
    scale: Vec3 = DEFAULT_SCALE
    name: str = ""

    def __post_init__(self) -> None:
        _check_finite("rotation", self.rotation)
        _check_vec3("scale", self.scale, non_negative=True)

    def at(self, position: Vec3) -> PlacedObject:
        """Return this candidate committed at *position*."""
        return PlacedObject(
            dimensions=self.dimensions,
            position=tuple(position),
            rotation=self.rotation,
            scale=self.scale,
            name=self.name,
        )


@dataclass(frozen=True)
class PlacedObject:
    """An object already committed to the scene."""

    dimensions: Dimensions
    position: Vec3 = DEFAULT_POSITION
    rotation: float = DEFAULT_ROTATION
    scale: Vec3 = DEFAULT_SCALE
    name: str = ""

    def __post_init__(self) -> None:
        _check_vec3("position", self.position)
        _check_finite("rotation", self.rotation)
        _check_vec3("scale", self.scale, non_negative=True)


@dataclass(frozen=True)
class AABB:
    """World-space axis-aligned bounding box."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float


# ── Output ─────────────────────────────────────────────────────────

PLACED = "placed"           # requested position accepted
RELOCATED = "relocated"     # grid search found another position
NO_SPACE = "no_space"       # grid exhausted


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of one placement attempt.

    ``placed`` is the object the caller should commit to its scene, or
    None when the room has no space left at the search resolution.
    """

    status: str
    placed: PlacedObject | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.placed is not None

    @property
    def position(self) -> Vec3 | None:
        return self.placed.position if self.placed is not None else None

"""Placement serialization — JSON conversion of scenes and results.

Missing pose fields are filled from the placement defaults here, so the
engine never has to deal with absent values.
"""

from __future__ import annotations

from .models import (
    Dimensions, PlacedObject, PlacementResult, InvalidGeometryError, Vec3,
    DEFAULT_POSITION, DEFAULT_SCALE,
)


def _parse_vec3(data: dict, key: str, default: Vec3) -> Vec3:
    raw = data.get(key)
    if raw is None:
        return default
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise InvalidGeometryError(key, raw, "expected a list of 3 numbers")
    return (raw[0], raw[1], raw[2])


def _parse_yaw(data: dict) -> float:
    """Read the Y component of a three-axis Euler rotation."""
    raw = data.get("rotation")
    if raw is None:
        return 0.0
    if not isinstance(raw, (list, tuple)) or len(raw) != 3:
        raise InvalidGeometryError("rotation", raw, "expected a list of 3 numbers")
    return raw[1]


def parse_dimensions(data: dict) -> Dimensions:
    try:
        return Dimensions(
            width=data["width"],
            height=data["height"],
            depth=data["depth"],
        )
    except (KeyError, TypeError) as exc:
        raise InvalidGeometryError("dimensions", data, "expected width/height/depth") from exc


def _parse_name(data: dict) -> str:
    raw = data.get("name")
    if raw is None:
        return ""
    if not isinstance(raw, str):
        raise InvalidGeometryError("name", raw, "expected a string")
    return raw


def parse_placed_object(data: dict) -> PlacedObject:
    """Parse one scene entry into a PlacedObject."""
    if not isinstance(data, dict):
        raise InvalidGeometryError("furniture entry", data, "expected an object")
    if "dimensions" not in data:
        raise InvalidGeometryError("dimensions", None, "missing")
    return PlacedObject(
        dimensions=parse_dimensions(data["dimensions"]),
        position=_parse_vec3(data, "position", DEFAULT_POSITION),
        rotation=_parse_yaw(data),
        scale=_parse_vec3(data, "scale", DEFAULT_SCALE),
        name=_parse_name(data),
    )


def parse_scene(data: dict) -> list[PlacedObject]:
    """Parse a scene snapshot ``{"furniture": [...]}``."""
    if not isinstance(data, dict):
        raise InvalidGeometryError("scene", data, "expected an object with a \"furniture\" list")
    entries = data.get("furniture", [])
    if not isinstance(entries, list):
        raise InvalidGeometryError("furniture", entries, "expected a list")
    return [parse_placed_object(entry) for entry in entries]


def placed_object_to_dict(obj: PlacedObject) -> dict:
    """Serialize a PlacedObject to a JSON-safe dict."""
    return {
        "name": obj.name,
        "dimensions": {
            "width": obj.dimensions.width,
            "height": obj.dimensions.height,
            "depth": obj.dimensions.depth,
        },
        "position": list(obj.position),
        "rotation": [0.0, obj.rotation, 0.0],
        "scale": list(obj.scale),
    }


def scene_to_dict(objects: list[PlacedObject]) -> dict:
    return {"furniture": [placed_object_to_dict(o) for o in objects]}


def placement_result_to_dict(result: PlacementResult) -> dict:
    """Serialize a PlacementResult for the command line output."""
    return {
        "status": result.status,
        "position": list(result.position) if result.position is not None else None,
        **({"object": placed_object_to_dict(result.placed)} if result.placed else {}),
        **({"message": result.message} if result.message else {}),
    }

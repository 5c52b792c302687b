"""
Room placer — entry point.

Usage:
    python -m src place scene.json --type chair
    python -m src place scene.json --width 1 --height 1 --depth 1 --at 2 0 0
    python -m src check scene.json --type sofa --at 0 0 3
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from src.catalog import FurnitureItem, resolve_dimensions
from src.pipeline.placer import (
    Dimensions, PlacementCandidate, InvalidGeometryError,
    DEFAULT_POSITION, DEFAULT_SCALE, check_position, is_valid_position, place_object,
    parse_scene, scene_to_dict, placement_result_to_dict,
)


log = logging.getLogger("roomplacer")


def _add_object_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("scene", help="Path to scene.json ({\"furniture\": [...]})")
    p.add_argument("--type", default="", help="Furniture type for default dimensions")
    p.add_argument("--name", default="", help="Display name of the new object")
    p.add_argument("--width", type=float, default=None)
    p.add_argument("--height", type=float, default=None)
    p.add_argument("--depth", type=float, default=None)
    p.add_argument("--yaw", type=float, default=0.0, help="Rotation about Y in radians")
    p.add_argument("--scale", type=float, nargs=3, default=None, metavar=("SX", "SY", "SZ"))
    p.add_argument("--at", type=float, nargs=3, default=None, metavar=("X", "Y", "Z"),
                   help="Requested position (default: origin)")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="roomplacer", description="Place furniture in a bounded room")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    pl = sub.add_parser("place", help="Place an object, searching for space if needed")
    _add_object_args(pl)
    pl.add_argument("--output", default=None, help="Write the updated scene here")

    ch = sub.add_parser("check", help="Report whether a position is free")
    _add_object_args(ch)

    return p


def _build_candidate(args: argparse.Namespace) -> PlacementCandidate:
    item = FurnitureItem(
        id=args.name or args.type or "object",
        name=args.name or args.type,
        type=args.type,
    )
    dims = resolve_dimensions(item)
    dims = Dimensions(
        width=args.width if args.width is not None else dims.width,
        height=args.height if args.height is not None else dims.height,
        depth=args.depth if args.depth is not None else dims.depth,
    )
    scale = tuple(args.scale) if args.scale is not None else DEFAULT_SCALE
    return item.to_candidate(dims, rotation=args.yaw, scale=scale)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    scene_path = Path(args.scene)
    try:
        placed = parse_scene(json.loads(scene_path.read_text(encoding="utf-8")))
        candidate = _build_candidate(args)
        position = check_position(args.at) if args.at is not None else DEFAULT_POSITION
    except (OSError, json.JSONDecodeError, InvalidGeometryError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if args.cmd == "check":
        valid = is_valid_position(position, candidate, placed)
        print(json.dumps({"position": list(position), "valid": valid}))
        return 0 if valid else 1

    result = place_object(candidate, placed, position=position)
    print(json.dumps(placement_result_to_dict(result), indent=2))
    if not result.ok:
        print(f"Cannot add {candidate.name or 'object'} to scene: {result.message}",
              file=sys.stderr)
        return 1

    if args.output:
        out = Path(args.output)
        out.write_text(json.dumps(scene_to_dict(placed + [result.placed]), indent=2),
                       encoding="utf-8")
        log.info("Wrote %d objects to %s", len(placed) + 1, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())

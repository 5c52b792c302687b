"""Tests for the ``python -m src`` entry point."""

from __future__ import annotations

import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from src.__main__ import main
from src.catalog import DEFAULT_DIMENSIONS
from src.pipeline.placer import scene_to_dict, parse_scene
from tests.room_fixture import make_origin_scene, make_saturated_room


class TestCli(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write_scene(self, objects) -> Path:
        path = self.tmp / "scene.json"
        path.write_text(json.dumps(scene_to_dict(objects)), encoding="utf-8")
        return path

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_place_relocates_and_writes_scene(self):
        scene = self._write_scene(make_origin_scene())
        output = self.tmp / "out.json"
        code, out, _ = self._run(
            "place", str(scene), "--width", "1", "--height", "1", "--depth", "1",
            "--output", str(output),
        )
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["position"], [-4.5, 0.0, -4.0])
        written = parse_scene(json.loads(output.read_text(encoding="utf-8")))
        self.assertEqual(len(written), 2)

    def test_place_no_space(self):
        scene = self._write_scene(make_saturated_room())
        code, out, err = self._run("place", str(scene), "--type", "chair")
        self.assertEqual(code, 1)
        self.assertEqual(json.loads(out)["status"], "no_space")
        self.assertIn("No space available for this furniture", err)

    def test_check(self):
        scene = self._write_scene(make_origin_scene())
        code, out, _ = self._run("check", str(scene), "--type", "chair", "--at", "2", "0", "0")
        self.assertEqual(code, 0)
        self.assertTrue(json.loads(out)["valid"])
        code, out, _ = self._run("check", str(scene), "--type", "chair")
        self.assertEqual(code, 1)
        self.assertFalse(json.loads(out)["valid"])

    def test_bad_input(self):
        code, _, err = self._run("place", str(self.tmp / "missing.json"))
        self.assertEqual(code, 2)
        scene = self._write_scene([])
        code, _, err = self._run("place", str(scene), "--width", "-1")
        self.assertEqual(code, 2)
        self.assertIn("dimensions.width", err)

    def test_malformed_scene_structure(self):
        """Scenes that aren't {"furniture": [objects]} exit with status 2."""
        path = self.tmp / "scene.json"
        for raw in ("[]", '{"furniture": null}', '{"furniture": [1]}', '{"furniture": {}}'):
            path.write_text(raw, encoding="utf-8")
            for cmd in ("place", "check"):
                code, out, err = self._run(cmd, str(path), "--type", "chair")
                self.assertEqual(code, 2, f"{cmd} {raw}")
                self.assertEqual(out, "")
                self.assertIn("Error:", err)

    def test_non_finite_position(self):
        scene = self._write_scene(make_origin_scene())
        for cmd in ("place", "check"):
            code, out, err = self._run(cmd, str(scene), "--type", "chair", "--at", "nan", "0", "0")
            self.assertEqual(code, 2)
            self.assertEqual(out, "")
            self.assertIn("position.x", err)
            code, _, err = self._run(cmd, str(scene), "--type", "chair", "--at", "0", "0", "inf")
            self.assertEqual(code, 2)
            self.assertIn("position.z", err)

    def test_non_finite_pose(self):
        scene = self._write_scene([])
        code, _, err = self._run("check", str(scene), "--type", "chair", "--yaw", "nan")
        self.assertEqual(code, 2)
        self.assertIn("rotation", err)
        code, _, err = self._run("place", str(scene), "--scale", "1", "nan", "1")
        self.assertEqual(code, 2)
        self.assertIn("scale.y", err)

    def test_type_uses_catalog_defaults(self):
        scene = self._write_scene([])
        code, out, _ = self._run("place", str(scene), "--type", "sofa", "--yaw", "0.5")
        self.assertEqual(code, 0)
        obj = json.loads(out)["object"]
        sofa = DEFAULT_DIMENSIONS["sofa"]
        self.assertEqual(obj["name"], "sofa")
        self.assertEqual(obj["dimensions"], {
            "width": sofa.width, "height": sofa.height, "depth": sofa.depth,
        })
        self.assertEqual(obj["rotation"], [0.0, 0.5, 0.0])

    def test_dimension_flags_override_catalog(self):
        scene = self._write_scene([])
        code, out, _ = self._run("place", str(scene), "--type", "bed", "--width", "1.2",
                                 "--name", "Guest bed")
        self.assertEqual(code, 0)
        obj = json.loads(out)["object"]
        self.assertEqual(obj["name"], "Guest bed")
        self.assertEqual(obj["dimensions"]["width"], 1.2)
        self.assertEqual(obj["dimensions"]["depth"], DEFAULT_DIMENSIONS["bed"].depth)


if __name__ == "__main__":
    unittest.main()

import json
from pathlib import Path

from typer.testing import CliRunner

from artecode.cli import app
from artecode.ir.examples import DEFAULT_SCENE

runner = CliRunner()


def test_compile_scene_file(tmp_path: Path):
    scene_file = tmp_path / "scene.json"
    scene_file.write_text(json.dumps(DEFAULT_SCENE.to_dict()), encoding="utf-8")
    result = runner.invoke(app, ["compile", str(scene_file)])
    assert result.exit_code == 0
    assert "ellipse(mouseX, mouseY, 50, 50);" in result.output


def test_compile_rejects_invalid_canvas(tmp_path: Path):
    scene_file = tmp_path / "scene.json"
    scene_file.write_text(json.dumps({"canvas": {"width": -1, "height": 10}, "elements": []}), encoding="utf-8")
    result = runner.invoke(app, ["compile", str(scene_file)])
    assert result.exit_code != 0


def test_compile_writes_output_file(tmp_path: Path):
    scene_file = tmp_path / "scene.json"
    out = tmp_path / "sketch.js"
    scene_file.write_text(json.dumps(DEFAULT_SCENE.to_dict()), encoding="utf-8")
    result = runner.invoke(app, ["compile", str(scene_file), "--output", str(out)])
    assert result.exit_code == 0
    assert "function draw() {" in out.read_text(encoding="utf-8")


def test_example_lists_and_compiles():
    listing = runner.invoke(app, ["example"])
    assert "orbiting-circle" in listing.output
    result = runner.invoke(app, ["example", "orbiting-circle"])
    assert result.exit_code == 0
    assert "cos(frameCount * 0.02) * 150" in result.output


def test_validate_exit_codes(tmp_path: Path):
    bad = tmp_path / "bad.js"
    bad.write_text('function setup(){} function draw(){ eval("x"); }', encoding="utf-8")
    result = runner.invoke(app, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "eval() is not allowed" in result.output

    good = tmp_path / "good.js"
    runner.invoke(app, ["example", "simple-shapes", "--output", str(good)])
    result = runner.invoke(app, ["validate", str(good)])
    assert result.exit_code == 0


def test_describe_sketch(tmp_path: Path):
    sketch_file = tmp_path / "sketch.json"
    sketch_file.write_text(json.dumps({"shapes": [], "canvasWidth": 800, "canvasHeight": 600}), encoding="utf-8")
    result = runner.invoke(app, ["describe", str(sketch_file)])
    assert result.exit_code == 0
    assert "Create a blank p5.js sketch with a light gray background" in result.output


def test_prompt_rejects_overlong_text():
    result = runner.invoke(app, ["prompt", "x" * 501])
    assert result.exit_code != 0
    ok = runner.invoke(app, ["prompt", "a spinning square"])
    assert ok.exit_code == 0
    assert "User request: a spinning square" in ok.output

"""CLI interface."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from artecode.compiler.scene_compiler import scene_to_code
from artecode.errors import InputConstraintError
from artecode.ir.examples import BLOCK_EXAMPLE_SCENES, EXAMPLE_SCENES, get_example_scene
from artecode.ir.scene_model import Scene, require_valid_scene
from artecode.ir.sketch import SketchData
from artecode.tools.code_validator import validate_generated_code
from artecode.tools.generation import build_generation_prompt
from artecode.tools.sketch_describer import generate_description, get_sketch_summary
from artecode.utils.config import settings

app = typer.Typer(add_completion=False)


@app.callback()
def main() -> None:
    """Compile scenes to p5.js sketches and validate sketch code."""
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def _load_json(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read {path}: {exc}") from exc


def _emit(code: str, output: Optional[Path]) -> None:
    if output is None:
        typer.echo(code)
    else:
        output.write_text(code + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output}")


@app.command("compile")
def compile_scene(
    scene_file: Path = typer.Argument(..., help="Scene JSON exported from the visual editor."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the sketch here instead of stdout."),
):
    """Compile a scene file into sketch source."""
    try:
        scene = require_valid_scene(Scene.model_validate(_load_json(scene_file)))
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid scene: {exc}") from exc
    except InputConstraintError as exc:
        raise typer.BadParameter("; ".join(exc.errors)) from exc
    _emit(scene_to_code(scene), output)


@app.command()
def example(
    name: Optional[str] = typer.Argument(None, help="Example scene name; omit to list them."),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
):
    """Compile a bundled example scene."""
    if name is None:
        for example_name in [*EXAMPLE_SCENES, *BLOCK_EXAMPLE_SCENES]:
            typer.echo(example_name)
        return
    try:
        scene = get_example_scene(name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0])) from exc
    _emit(scene_to_code(scene), output)


@app.command()
def validate(
    code_file: Path = typer.Argument(..., help="Sketch source to check."),
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Override STRICT_TEMPLATE_CHECKS."),
):
    """Validate sketch source; exits 1 when the code would be rejected."""
    try:
        code = code_file.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {code_file}: {exc}") from exc
    result = validate_generated_code(code, strict=strict)
    typer.echo(json.dumps(result.to_dict(), indent=2))
    if not result.accepted:
        raise typer.Exit(code=1)


@app.command()
def describe(sketch_file: Path = typer.Argument(..., help="Sketch shapes JSON from the drawing canvas.")):
    """Describe a freehand sketch as a generation prompt."""
    try:
        sketch = SketchData.model_validate(_load_json(sketch_file))
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid sketch: {exc}") from exc
    typer.echo(generate_description(sketch))
    typer.echo(f"({get_sketch_summary(sketch)})", err=True)


@app.command()
def prompt(text: str = typer.Argument(..., help="What the sketch should do.")):
    """Print the full generation prompt for a request."""
    try:
        typer.echo(build_generation_prompt(text))
    except InputConstraintError as exc:
        raise typer.BadParameter("; ".join(exc.errors)) from exc


if __name__ == "__main__":
    app()

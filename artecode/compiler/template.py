"""Canonical sketch template.

Every sketch, generated or compiled, has the same shape: optional
preload(), setup(), draw(), then optional helpers and event handlers, each
section under a banner comment.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

SECTION_RULE = "// " + "=" * 44
INSTANCE_MODE_TOKEN = "new p5("
SETUP_SIGNATURE = "function setup()"
DRAW_SIGNATURE = "function draw()"


@dataclass
class SketchTemplate:
    setup: str
    draw: str
    preload: Optional[str] = None
    helpers: Optional[str] = None
    events: Optional[str] = None


@dataclass
class StructureCheckResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


def _banner(title: str) -> List[str]:
    return [SECTION_RULE, f"// {title}", SECTION_RULE]


def assemble(template: SketchTemplate) -> str:
    """Render template sections into sketch source text."""
    sections: List[str] = []

    if template.preload:
        sections.extend(_banner("PRELOAD"))
        sections.extend(["function preload() {", template.preload, "}", ""])

    sections.extend(_banner("SETUP"))
    sections.extend([f"{SETUP_SIGNATURE} {{", template.setup, "}", ""])

    sections.extend(_banner("DRAW"))
    sections.extend([f"{DRAW_SIGNATURE} {{", template.draw, "}"])

    if template.helpers:
        sections.append("")
        sections.extend(_banner("HELPER FUNCTIONS"))
        sections.append(template.helpers)

    if template.events:
        sections.append("")
        sections.extend(_banner("EVENT HANDLERS"))
        sections.append(template.events)

    return "\n".join(sections)


def check_structure(code: str) -> StructureCheckResult:
    """Check that ``code`` has the template's required functions and uses global mode."""
    errors: List[str] = []

    if SETUP_SIGNATURE not in code:
        errors.append("Missing required function: setup()")

    if DRAW_SIGNATURE not in code:
        errors.append("Missing required function: draw()")

    if INSTANCE_MODE_TOKEN in code:
        errors.append("Instance mode not allowed. Use global mode (setup/draw).")

    return StructureCheckResult(valid=not errors, errors=errors)


DEFAULT_TEMPLATE = SketchTemplate(
    setup="  createCanvas(800, 600);\n  background(20);",
    draw=(
        "  // Draw colorful circles that follow the mouse\n"
        "  fill(random(255), random(255), random(255), 150);\n"
        "  noStroke();\n"
        "  ellipse(mouseX, mouseY, 50, 50);"
    ),
)

BLANK_TEMPLATE = SketchTemplate(
    setup="  createCanvas(400, 400);\n  background(220);",
    draw="  // Your code here",
)

EXAMPLE_TEMPLATES: Dict[str, SketchTemplate] = {
    "animation": SketchTemplate(
        setup="  createCanvas(400, 400);\n  background(220);",
        draw=(
            "  background(220, 10); // Fade effect\n"
            "  \n"
            "  // Animated circle\n"
            "  let x = width / 2 + cos(frameCount * 0.05) * 100;\n"
            "  let y = height / 2 + sin(frameCount * 0.05) * 100;\n"
            "  \n"
            "  fill(100, 150, 255);\n"
            "  ellipse(x, y, 50, 50);"
        ),
    ),
    "interactive": SketchTemplate(
        setup="  createCanvas(400, 400);\n  background(220);",
        draw=(
            "  background(220);\n"
            "  \n"
            "  // Circle follows mouse\n"
            "  fill(255, 100, 100);\n"
            "  ellipse(mouseX, mouseY, 50, 50);"
        ),
        events=(
            "function mousePressed() {\n"
            "  // Change background on click\n"
            "  background(random(255), random(255), random(255));\n"
            "}"
        ),
    ),
    "generative": SketchTemplate(
        setup="  createCanvas(400, 400);\n  background(20);\n  noLoop(); // Draw once",
        draw=(
            "  // Generative pattern\n"
            "  for (let i = 0; i < 100; i++) {\n"
            "    let x = random(width);\n"
            "    let y = random(height);\n"
            "    let size = random(5, 30);\n"
            "    \n"
            "    fill(random(255), random(255), random(255), 150);\n"
            "    noStroke();\n"
            "    ellipse(x, y, size, size);\n"
            "  }"
        ),
    ),
    "rainbow-trail": SketchTemplate(
        setup="  createCanvas(windowWidth, windowHeight);\n  background(20);\n  colorMode(HSB);",
        draw=(
            "  // Rainbow trail effect\n"
            "  let hue = (frameCount * 2) % 360;\n"
            "  fill(hue, 80, 100, 0.3);\n"
            "  noStroke();\n"
            "  ellipse(mouseX, mouseY, 40, 40);"
        ),
    ),
    "bouncing-ball": SketchTemplate(
        setup="  createCanvas(400, 400);\n  background(220);",
        draw=(
            "  background(220);\n"
            "  \n"
            "  // Bouncing ball\n"
            "  let x = width / 2 + cos(frameCount * 0.1) * 150;\n"
            "  let y = height / 2 + abs(sin(frameCount * 0.15)) * 150;\n"
            "  \n"
            "  fill(100, 150, 255);\n"
            "  ellipse(x, y, 50, 50);"
        ),
    ),
}

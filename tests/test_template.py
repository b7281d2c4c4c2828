import pytest

from artecode.compiler.template import (
    BLANK_TEMPLATE,
    DEFAULT_TEMPLATE,
    EXAMPLE_TEMPLATES,
    SketchTemplate,
    assemble,
    check_structure,
)
from artecode.tools.code_validator import validate_generated_code


def test_assemble_setup_and_draw_only():
    code = assemble(SketchTemplate(setup="  createCanvas(400, 400);", draw="  background(220);"))
    assert code == "\n".join(
        [
            "// ============================================",
            "// SETUP",
            "// ============================================",
            "function setup() {",
            "  createCanvas(400, 400);",
            "}",
            "",
            "// ============================================",
            "// DRAW",
            "// ============================================",
            "function draw() {",
            "  background(220);",
            "}",
        ]
    )


def test_assemble_optional_sections_in_order():
    code = assemble(
        SketchTemplate(
            preload="  img = loadImage('a.png');",
            setup="  createCanvas(10, 10);",
            draw="  image(img, 0, 0);",
            helpers="function helper() {}",
            events="function mousePressed() {}",
        )
    )
    positions = [code.index(marker) for marker in ("// PRELOAD", "// SETUP", "// DRAW", "// HELPER FUNCTIONS", "// EVENT HANDLERS")]
    assert positions == sorted(positions)
    assert "function preload() {" in code
    assert code.endswith("function mousePressed() {}")


def test_absent_optional_sections_leave_no_stubs():
    code = assemble(SketchTemplate(setup="", draw="", preload="", helpers=None))
    assert "PRELOAD" not in code
    assert "HELPER" not in code
    assert "EVENT" not in code
    assert "function setup() {\n\n}" in code
    assert code.endswith("function draw() {\n\n}")


def test_assembled_templates_pass_structure_check():
    for template in (DEFAULT_TEMPLATE, BLANK_TEMPLATE, SketchTemplate(setup="  a();", draw="  b();")):
        result = check_structure(assemble(template))
        assert result.valid
        assert result.errors == []


def test_check_structure_collects_all_errors():
    result = check_structure("const sketch = new p5(s);")
    assert not result.valid
    assert result.errors == [
        "Missing required function: setup()",
        "Missing required function: draw()",
        "Instance mode not allowed. Use global mode (setup/draw).",
    ]


@pytest.mark.parametrize("name", sorted(EXAMPLE_TEMPLATES))
def test_example_templates_assemble_to_valid_sketches(name):
    code = assemble(EXAMPLE_TEMPLATES[name])
    assert check_structure(code).valid
    assert validate_generated_code(code).accepted


def test_interactive_template_has_event_handlers():
    code = assemble(EXAMPLE_TEMPLATES["interactive"])
    assert "// EVENT HANDLERS" in code
    assert code.endswith("function mousePressed() {\n  // Change background on click\n  background(random(255), random(255), random(255));\n}")

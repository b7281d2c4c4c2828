"""Scene compiler.

Components:
- block_compiler: behavior blocks -> ordered draw() lines
- effects_compiler: enabled visual effects -> trailing draw() lines
- scene_compiler: scene -> setup()/draw() bodies -> sketch source
- template: canonical section layout and structural check
"""

from artecode.compiler.block_compiler import block_priority, combine_blocks, generate_block_code
from artecode.compiler.effects_compiler import generate_effects_code
from artecode.compiler.scene_compiler import (
    generate_draw,
    generate_element_code,
    generate_position_code,
    generate_setup,
    generate_style_code,
    scene_to_code,
)
from artecode.compiler.template import (
    BLANK_TEMPLATE,
    DEFAULT_TEMPLATE,
    EXAMPLE_TEMPLATES,
    SketchTemplate,
    StructureCheckResult,
    assemble,
    check_structure,
)

__all__ = [
    "block_priority",
    "combine_blocks",
    "generate_block_code",
    "generate_effects_code",
    "generate_draw",
    "generate_element_code",
    "generate_position_code",
    "generate_setup",
    "generate_style_code",
    "scene_to_code",
    "BLANK_TEMPLATE",
    "DEFAULT_TEMPLATE",
    "EXAMPLE_TEMPLATES",
    "SketchTemplate",
    "StructureCheckResult",
    "assemble",
    "check_structure",
]

"""Behavior block compiler.

Turns an element's blocks into draw() lines. Blocks are ordered by a fixed
priority class and, per axis, the first block to claim it wins; later
blocks on the same axis are dropped.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from artecode.ir.behavior_blocks import (
    BehaviorBlock,
    BounceBlock,
    CirclePathBlock,
    ClickToChangeBlock,
    FollowMouseBlock,
    JitterBlock,
    OscillateBlock,
    PerlinNoiseBlock,
    PulseBlock,
    RainbowBlock,
    RotateBlock,
)
from artecode.ir.colors import format_number as num
from artecode.ir.scene_model import CircleShape, RectangleShape, SceneElement

logger = logging.getLogger(__name__)

BLOCK_PRIORITY = {
    "oscillate": 1,
    "bounce": 1,
    "circlePath": 1,
    "rotate": 1,
    "perlinNoise": 2,
    "jitter": 3,
    "pulse": 4,
    "rainbow": 4,
    "followMouse": 5,
    "clickToChange": 6,
}
UNKNOWN_PRIORITY = 10


def block_priority(block: BehaviorBlock) -> int:
    return BLOCK_PRIORITY.get(block.type, UNKNOWN_PRIORITY)


def _base_coordinate(element: SceneElement, axis: str) -> float:
    shape = element.type
    if isinstance(shape, (CircleShape, RectangleShape)):
        return shape.x if axis == "x" else shape.y
    return 0


def generate_block_code(block: BehaviorBlock, element: SceneElement) -> List[str]:
    """Code for a single block; unknown and event-driven blocks yield nothing."""
    lines: List[str] = []

    if isinstance(block, OscillateBlock):
        base = _base_coordinate(element, block.axis)
        lines.append(f"  let {block.axis} = {num(base)} + sin(frameCount * {num(block.speed)}) * {num(block.range)};")

    elif isinstance(block, RotateBlock):
        # Opens a transform bracket; the scene compiler closes it after the shape.
        lines.append("  push();")
        lines.append("  translate(width / 2, height / 2);")
        lines.append(f"  rotate(frameCount * {num(block.speed)});")
        lines.append("  translate(-width / 2, -height / 2);")

    elif isinstance(block, BounceBlock):
        span = block.max - block.min
        lines.append(
            f"  let {block.axis} = {num(block.min)} + abs(sin(frameCount * {num(block.speed)})) * {num(span)};"
        )

    elif isinstance(block, CirclePathBlock):
        lines.append(f"  let x = width / 2 + cos(frameCount * {num(block.speed)}) * {num(block.radius)};")
        lines.append(f"  let y = height / 2 + sin(frameCount * {num(block.speed)}) * {num(block.radius)};")

    elif isinstance(block, PerlinNoiseBlock):
        base = _base_coordinate(element, block.axis)
        lines.append(
            f"  let {block.axis} = {num(base)} + noise(frameCount * {num(block.speed)}) * {num(block.scale)};"
        )

    elif isinstance(block, JitterBlock):
        amount = num(block.amount)
        lines.append(f"  let jitterX = random(-{amount}, {amount});")
        lines.append(f"  let jitterY = random(-{amount}, {amount});")

    elif isinstance(block, PulseBlock):
        lines.append(
            f"  let alpha = map(sin(frameCount * {num(block.speed)}), -1, 1, "
            f"{num(block.min_alpha)}, {num(block.max_alpha)});"
        )

    elif isinstance(block, RainbowBlock):
        lines.append(f"  let hue = (frameCount * {num(block.speed)}) % 360;")

    elif isinstance(block, FollowMouseBlock):
        shape = element.type
        if isinstance(shape, (CircleShape, RectangleShape)):
            lines.append(f"  let x = lerp({num(shape.x)}, mouseX, {num(block.speed)});")
            lines.append(f"  let y = lerp({num(shape.y)}, mouseY, {num(block.speed)});")

    elif isinstance(block, ClickToChangeBlock):
        # Handled by event handlers, not per-frame code.
        pass

    else:
        logger.debug("Skipping unknown behavior block type %r on element %s", block.type, element.id)

    return lines


def combine_blocks(blocks: Sequence[BehaviorBlock], element: SceneElement) -> List[str]:
    """Compile ``blocks`` for ``element`` in priority order, dropping axis conflicts."""
    lines: List[str] = []
    used_axes = set()

    # sorted() is stable: equal priorities keep their input order
    for block in sorted(blocks, key=block_priority):
        axis = getattr(block, "axis", None)
        if axis:
            if axis in used_axes:
                logger.debug("Dropping %s block on element %s: axis %s already claimed", block.type, element.id, axis)
                continue
            used_axes.add(axis)
        lines.extend(generate_block_code(block, element))

    return lines

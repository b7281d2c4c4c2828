"""Prompt-side helpers around the external code generation model.

No provider calls happen here: the request layer sends
``build_generation_prompt`` to the model and passes the reply through
``extract_code`` and ``review_generated_code``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional

from artecode.errors import InputConstraintError
from artecode.tools.code_validator import CodeValidationResult, validate_generated_code
from artecode.utils.config import settings

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a p5.js code generator for ArteCode, a creative coding toolkit.

STRICT REQUIREMENTS:
1. Always use the following template structure:
   // ============================================
   // SETUP
   // ============================================
   function setup() {
     // Setup code here
   }

   // ============================================
   // DRAW
   // ============================================
   function draw() {
     // Draw code here
   }

2. Use ONLY p5.js global mode (never use new p5(...))
3. Write clean, readable, well-commented code
4. Use descriptive variable names
5. Keep code simple and understandable
6. No external libraries or imports
7. No unsafe code (eval, fetch, DOM manipulation, etc.)

AVAILABLE p5.js FUNCTIONS:
- Canvas: createCanvas, background, colorMode, frameRate
- Shapes: ellipse, rect, line, triangle, arc, quad, bezier
- Colors: fill, stroke, noFill, noStroke, strokeWeight, colorMode
- Transform: translate, rotate, scale, push, pop
- Math: sin, cos, tan, abs, sqrt, pow, map, lerp, noise, random, constrain
- Input: mouseX, mouseY, mousePressed, keyPressed, key, keyCode
- Time: frameCount, millis
- Text: text, textSize, textAlign

STYLE GUIDELINES:
- Add comments explaining what each section does
- Use frameCount for animations
- Use sin/cos for smooth motion
- Use map() for value ranges
- Use lerp() for smooth transitions
- Keep setup() simple (canvas, color mode, frame rate)
- Put all animation logic in draw()
- Always call background() in draw() to clear the canvas
- Use meaningful variable names (e.g., ballX, circleSize, waveSpeed)

EXAMPLES OF GOOD CODE:

Example 1 - Simple Animation:
// ============================================
// SETUP
// ============================================
function setup() {
  createCanvas(800, 600);
}

// ============================================
// DRAW
// ============================================
function draw() {
  background(220);
  
  // Circle moves in wave pattern
  let x = width / 2;
  let y = height / 2 + sin(frameCount * 0.05) * 100;
  
  fill(100, 150, 255);
  noStroke();
  ellipse(x, y, 50, 50);
}

Example 2 - Interactive:
// ============================================
// SETUP
// ============================================
function setup() {
  createCanvas(800, 600);
}

// ============================================
// DRAW
// ============================================
function draw() {
  background(220);
  
  // Circle follows mouse
  fill(255, 100, 100);
  noStroke();
  ellipse(mouseX, mouseY, 50, 50);
}

Generate ONLY the code, no explanations before or after."""

_OPEN_FENCE_RE = re.compile(r"^```[a-zA-Z]*\n")
_CLOSE_FENCE_RE = re.compile(r"\n?```$")


class GenerationRejectedError(ValueError):
    """Raised when model output fails template or security checks."""

    def __init__(self, message: str, result: CodeValidationResult):
        super().__init__(message)
        self.result = result


@dataclass
class GenerationReview:
    accepted: bool
    code: str
    result: CodeValidationResult
    reason: Optional[str] = None


def validate_prompt(prompt: Any) -> str:
    """Reject prompts that are empty, not text, or longer than ``settings.max_prompt_length``."""
    if not isinstance(prompt, str) or not prompt.strip():
        raise InputConstraintError(["Invalid prompt"])
    if len(prompt) > settings.max_prompt_length:
        raise InputConstraintError([f"Prompt too long (max {settings.max_prompt_length} characters)"])
    return prompt


def create_user_prompt(user_input: str) -> str:
    return f"""User request: {user_input}

Generate a p5.js sketch that:
1. Follows the strict template structure shown above
2. Is well-commented with clear explanations
3. Uses simple, understandable patterns
4. Can be easily modified visually afterward
5. Includes only safe, p5.js-compatible code"""


def build_generation_prompt(user_input: str) -> str:
    """Full prompt for the model; the request is checked first."""
    validate_prompt(user_input)
    return f"{SYSTEM_PROMPT}\n\n{create_user_prompt(user_input)}"


def extract_code(reply: str) -> str:
    """Strip a surrounding markdown code fence from a model reply."""
    cleaned = (reply or "").strip()
    # either fence may be missing
    cleaned = _OPEN_FENCE_RE.sub("", cleaned, count=1)
    cleaned = _CLOSE_FENCE_RE.sub("", cleaned, count=1)
    return cleaned.strip()


def review_generated_code(code: str, strict: Optional[bool] = None) -> GenerationReview:
    result = validate_generated_code(code, strict=strict)
    reason = None
    if not result.valid:
        reason = "Generated code does not comply with template"
    elif not result.safe:
        reason = "Generated code contains unsafe patterns"
    return GenerationReview(accepted=result.accepted, code=code, result=result, reason=reason)


def ensure_accepted(code: str, strict: Optional[bool] = None) -> GenerationReview:
    review = review_generated_code(code, strict=strict)
    if not review.accepted:
        logger.info("Rejecting generated code: %s", review.reason)
        raise GenerationRejectedError(review.reason or "Generated code rejected", review.result)
    return review

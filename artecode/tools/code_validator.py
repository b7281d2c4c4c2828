"""Validation for sketch source from the model or the scene compiler.

Three independent checks (template compliance, security, runtime
compatibility) always run together so callers see every problem at once.
None of them raise; callers decide what to reject.
"""
from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, Optional

from artecode.compiler.template import DRAW_SIGNATURE, INSTANCE_MODE_TOKEN, SECTION_RULE, SETUP_SIGNATURE
from artecode.utils.config import settings

logger = logging.getLogger(__name__)


_UNSAFE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"eval\s*\(", re.IGNORECASE), "eval() is not allowed"),
    (re.compile(r"Function\s*\(", re.IGNORECASE), "Function constructor is not allowed"),
    (re.compile(r"fetch\s*\(", re.IGNORECASE), "fetch() is not allowed"),
    (re.compile(r"XMLHttpRequest", re.IGNORECASE), "XMLHttpRequest is not allowed"),
    (re.compile(r"import\s+", re.IGNORECASE), "import statements are not allowed"),
    (re.compile(r"require\s*\(", re.IGNORECASE), "require() is not allowed"),
    (re.compile(r"\.innerHTML", re.IGNORECASE), "innerHTML manipulation is not allowed"),
    (re.compile(r"document\.", re.IGNORECASE), "Direct DOM manipulation is not allowed"),
    (re.compile(r"window\.", re.IGNORECASE), "Window object access is not allowed"),
    (re.compile(r"<script", re.IGNORECASE), "Script tags are not allowed"),
    (re.compile(r"localStorage", re.IGNORECASE), "localStorage access is not allowed"),
    (re.compile(r"sessionStorage", re.IGNORECASE), "sessionStorage access is not allowed"),
    (re.compile(r"indexedDB", re.IGNORECASE), "indexedDB access is not allowed"),
)

DRAWING_FUNCTIONS = (
    "createCanvas",
    "background",
    "fill",
    "stroke",
    "ellipse",
    "rect",
    "line",
    "triangle",
    "arc",
    "push",
    "pop",
    "translate",
    "rotate",
    "scale",
)

_SETUP_SYNTAX_RE = re.compile(r"function\s+setup\s*\(\s*\)\s*\{")
_DRAW_SYNTAX_RE = re.compile(r"function\s+draw\s*\(\s*\)\s*\{")
_CANVAS_IN_SETUP_RE = re.compile(r"function\s+setup\s*\([^)]*\)\s*\{[^}]*createCanvas", re.DOTALL)


@dataclass
class TemplateComplianceResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class SecurityResult:
    safe: bool
    violations: List[str] = field(default_factory=list)


@dataclass
class CompatibilityResult:
    compatible: bool
    warnings: List[str] = field(default_factory=list)


@dataclass
class CodeValidationResult:
    valid: bool
    safe: bool
    compatible: bool
    errors: List[str] = field(default_factory=list)
    violations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        """Structural or security problems reject; compatibility only warns."""
        return self.valid and self.safe

    def to_dict(self) -> dict:
        return asdict(self)


def validate_template_compliance(code: str, strict: Optional[bool] = None) -> TemplateComplianceResult:
    """Check the canonical template shape.

    ``strict`` adds the signature-followed-by-brace checks; it defaults to
    ``settings.strict_template_checks``.
    """
    if strict is None:
        strict = settings.strict_template_checks
    errors: List[str] = []

    if SETUP_SIGNATURE not in code:
        errors.append("Missing setup() function")

    if DRAW_SIGNATURE not in code:
        errors.append("Missing draw() function")

    # either the named banner or the section rule counts
    if "// SETUP" not in code and SECTION_RULE not in code:
        errors.append("Missing SETUP section comment")

    if "// DRAW" not in code and SECTION_RULE not in code:
        errors.append("Missing DRAW section comment")

    if INSTANCE_MODE_TOKEN in code:
        errors.append("Instance mode not allowed - use global mode only")

    if strict:
        if not _SETUP_SYNTAX_RE.search(code):
            errors.append("setup() function has incorrect syntax")
        if not _DRAW_SYNTAX_RE.search(code):
            errors.append("draw() function has incorrect syntax")

    return TemplateComplianceResult(valid=not errors, errors=errors)


def _scan_patterns(code: str, patterns: Iterable[tuple[re.Pattern[str], str]]) -> List[str]:
    return [message for pattern, message in patterns if pattern.search(code)]


def validate_security(code: str) -> SecurityResult:
    violations = _scan_patterns(code, _UNSAFE_PATTERNS)
    return SecurityResult(safe=not violations, violations=violations)


def validate_compatibility(code: str) -> CompatibilityResult:
    warnings: List[str] = []

    uses_drawing_functions = any(name in code for name in DRAWING_FUNCTIONS)
    if not uses_drawing_functions:
        warnings.append("Code does not appear to use p5.js functions")

    if not _CANVAS_IN_SETUP_RE.search(code):
        warnings.append("createCanvas() should be called in setup()")

    if "canvas." in code:
        warnings.append("Direct canvas manipulation detected - use p5.js functions instead")

    if "ctx." in code:
        warnings.append("Direct context manipulation detected - use p5.js functions instead")

    return CompatibilityResult(compatible=uses_drawing_functions, warnings=warnings)


def validate_generated_code(code: str, strict: Optional[bool] = None) -> CodeValidationResult:
    """Run every check over ``code`` and merge the results."""
    template_check = validate_template_compliance(code, strict=strict)
    security_check = validate_security(code)
    compatibility_check = validate_compatibility(code)

    result = CodeValidationResult(
        valid=template_check.valid,
        safe=security_check.safe,
        compatible=compatibility_check.compatible,
        errors=template_check.errors,
        violations=security_check.violations,
        warnings=compatibility_check.warnings,
    )
    if not result.safe:
        logger.warning("Sketch code failed security scan: %s", "; ".join(result.violations))
    elif not result.valid:
        logger.info("Sketch code does not follow the template: %s", "; ".join(result.errors))
    return result

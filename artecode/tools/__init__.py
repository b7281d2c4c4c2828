"""Checks and prompt helpers around generated sketch code.

Components:
- code_validator: template compliance, security and compatibility scans
- sketch_describer: freehand shapes -> generation prompt
- generation: prompt construction, prompt checks and model reply review
"""

from artecode.tools.code_validator import (
    CodeValidationResult,
    CompatibilityResult,
    SecurityResult,
    TemplateComplianceResult,
    validate_compatibility,
    validate_generated_code,
    validate_security,
    validate_template_compliance,
)

from artecode.tools.sketch_describer import describe_shape, generate_description, get_sketch_summary

from artecode.tools.generation import (
    SYSTEM_PROMPT,
    GenerationRejectedError,
    GenerationReview,
    build_generation_prompt,
    create_user_prompt,
    ensure_accepted,
    extract_code,
    review_generated_code,
    validate_prompt,
)

__all__ = [
    # Validation
    "CodeValidationResult",
    "CompatibilityResult",
    "SecurityResult",
    "TemplateComplianceResult",
    "validate_compatibility",
    "validate_generated_code",
    "validate_security",
    "validate_template_compliance",
    # Sketch description
    "describe_shape",
    "generate_description",
    "get_sketch_summary",
    # Generation
    "SYSTEM_PROMPT",
    "GenerationRejectedError",
    "GenerationReview",
    "build_generation_prompt",
    "create_user_prompt",
    "ensure_accepted",
    "extract_code",
    "review_generated_code",
    "validate_prompt",
]

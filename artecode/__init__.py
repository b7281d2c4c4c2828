"""Scene-to-sketch code generation and validation for p5.js animations."""

__version__ = "0.1.0"

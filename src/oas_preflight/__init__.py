"""oas-preflight - pre-upload linter for OpenAPI documents

This is the core library that provides:
- run_preflight: Load, check and lint a document in one pass
- Structural and naming/compatibility checks
- RuleEngine: Pluggable external linter (Spectral by default)
- Text and JSON reporting
"""

from oas_preflight.core import render_json, render_text, run_preflight
from oas_preflight.engines import RuleEngine, SpectralEngine
from oas_preflight.models import Finding, Severity, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "run_preflight",
    "render_json",
    "render_text",
    "RuleEngine",
    "SpectralEngine",
    "Finding",
    "Severity",
    "ValidationResult",
]

"""Data models for oas-preflight"""

from .findings import CheckResult, Finding, Severity, ValidationResult

__all__ = [
    "Finding",
    "Severity",
    "CheckResult",
    "ValidationResult",
]

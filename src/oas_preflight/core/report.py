"""Render preflight results as text or JSON and map them to exit codes"""

from pathlib import Path

from oas_preflight.models import ValidationResult

EXIT_PASSED = 0
EXIT_ERRORS = 1
EXIT_FATAL = 2


def exit_code(result: ValidationResult) -> int:
    """Map a result to the process exit code"""
    if result.is_fatal:
        return EXIT_FATAL
    return EXIT_PASSED if result.success else EXIT_ERRORS


def render_json(result: ValidationResult) -> str:
    """Serialize the result for machine consumption"""
    return result.model_dump_json(indent=2)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def render_text(
    result: ValidationResult,
    spec_path: str | Path,
    max_size_kb: float,
    max_warnings: int = 5,
) -> str:
    """
    Render a bordered human-readable report.

    Args:
        result: Result to render
        spec_path: Path of the checked document (only the file name is shown)
        max_size_kb: Size limit shown next to the document size
        max_warnings: Number of warnings itemized before summarizing the rest

    Returns:
        Report text
    """
    lines: list[str] = [
        "",
        f"OpenAPI Preflight Linter - {Path(spec_path).name}",
        "=" * 50,
    ]

    if result.size_kb is not None:
        lines.append(f"Size: {result.size_kb} KB (limit: ~{max_size_kb:g} KB)")
    lines.append("")

    if result.is_fatal:
        lines.append(f"FATAL: {result.fatal}")
        return "\n".join(lines)

    error_count = len(result.errors)
    warning_count = len(result.warnings)

    if error_count == 0:
        lines.append("✓ PASSED - Ready for upload")
        if warning_count > 0:
            lines.append(f"  ({_plural(warning_count, 'warning')} - optional to fix)")
    else:
        lines.append(f"✗ FAILED - {_plural(error_count, 'error')} must be fixed")
    lines.append("")

    if result.errors:
        lines.append("Errors:")
        lines.append("-" * 40)
        for error in result.errors:
            lines.append(f"✗ {error.message}")
            if error.path:
                lines.append(f"  at: {error.path}")
            if error.code:
                lines.append(f"  rule: {error.code}")
            lines.append("")

    if result.warnings:
        lines.append("Warnings (optional):")
        lines.append("-" * 40)
        for warning in result.warnings[:max_warnings]:
            lines.append(f"⚠ {warning.message}")
            if warning.path:
                lines.append(f"  at: {warning.path}")
            lines.append("")
        remaining = warning_count - max_warnings
        if remaining > 0:
            lines.append(f"  ... and {_plural(remaining, 'more warning')}")
            lines.append("")

    return "\n".join(lines)

"""Preflight pipeline: load, check, lint and merge"""

import logging
from pathlib import Path

from oas_preflight.config import Settings, get_settings
from oas_preflight.core.compatibility import check_compatibility
from oas_preflight.core.loader import load_document
from oas_preflight.core.structure import check_structure
from oas_preflight.engines import RuleEngine, SpectralEngine
from oas_preflight.exceptions import DocumentLoadError, RuleEngineError
from oas_preflight.models import CheckResult, ValidationResult

logger = logging.getLogger(__name__)


def merge_results(
    precheck: CheckResult,
    compatibility: CheckResult,
    engine: CheckResult,
    size_kb: float | None = None,
) -> ValidationResult:
    """
    Combine stage results into one ValidationResult.

    Errors come from the pre-check and the engine; warnings from the engine
    followed by the compatibility checker. Warnings never affect success.
    """
    return ValidationResult(
        success=precheck.success and engine.success,
        size_kb=size_kb,
        errors=[*precheck.errors, *engine.errors],
        warnings=[*engine.warnings, *compatibility.warnings],
    )


def run_preflight(
    spec_path: str | Path,
    engine: RuleEngine | None = None,
    settings: Settings | None = None,
    ruleset_path: str | Path | None = None,
) -> ValidationResult:
    """
    Validate a candidate document end to end.

    A fatal condition (missing file, invalid JSON, engine not runnable)
    stops the run and returns a result with ``fatal`` set and no findings.

    Args:
        spec_path: Path to the JSON document
        engine: Rule engine to consult (default: Spectral from settings)
        settings: Settings to use (default: cached environment settings)
        ruleset_path: Ruleset override (default: from settings)

    Returns:
        ValidationResult for the document
    """
    settings = settings or get_settings()
    engine = engine or SpectralEngine(
        command=settings.engine_command,
        timeout=settings.engine_timeout,
    )
    ruleset = Path(ruleset_path) if ruleset_path else settings.resolve_ruleset_path()

    try:
        document = load_document(spec_path, max_size_kb=settings.max_size_kb)
    except DocumentLoadError as e:
        logger.debug(f"Loading failed: {e}")
        return ValidationResult.fatal_result(str(e), size_kb=e.size_kb)

    precheck = CheckResult(
        errors=[*document.size_check.errors, *check_structure(document.content).errors]
    )
    compatibility = check_compatibility(document.content)

    try:
        engine_result = engine.lint(document.path, ruleset)
    except RuleEngineError as e:
        logger.error(f"❌ {engine.name} failed: {e}")
        return ValidationResult.fatal_result(str(e), size_kb=document.size_kb)

    result = merge_results(precheck, compatibility, engine_result, size_kb=document.size_kb)
    logger.info(f"Preflight finished for {document.path}: {result!r}")
    return result

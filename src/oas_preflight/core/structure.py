"""Required top-level field checks for OpenAPI documents"""

from typing import Any

from oas_preflight.models import CheckResult

MISSING_OPENAPI_MESSAGE = "The OpenAPI document must have an openapi field."
MISSING_TITLE_MESSAGE = "The OpenAPI document must have a title under info -> title."


def has_openapi_field(spec: Any) -> bool:
    """
    Check that the document declares a non-empty ``openapi`` version marker.

    Examples:
        >>> has_openapi_field({"openapi": "3.0.0"})
        True
        >>> has_openapi_field({"swagger": "2.0"})
        False
    """
    return isinstance(spec, dict) and bool(spec.get("openapi"))


def has_info_title(spec: Any) -> bool:
    """
    Check that the document declares a non-empty ``info.title``.

    Examples:
        >>> has_info_title({"info": {"title": "API"}})
        True
        >>> has_info_title({"info": "API"})
        False
    """
    if not isinstance(spec, dict):
        return False

    info = spec.get("info")
    return isinstance(info, dict) and bool(info.get("title"))


def check_structure(spec: Any) -> CheckResult:
    """
    Run the mandatory field checks against a parsed document.

    Both checks are non-fatal; each violation adds one error.

    Args:
        spec: Decoded document (normally a dict)

    Returns:
        CheckResult with zero, one or two errors
    """
    result = CheckResult()

    if not has_openapi_field(spec):
        result.add_error("$.openapi", MISSING_OPENAPI_MESSAGE)

    if not has_info_title(spec):
        result.add_error("$.info.title", MISSING_TITLE_MESSAGE)

    return result

"""
Naming and compatibility checks for the downstream integration platform.

The platform silently drops operations it cannot name, deprecated operations
and cookie parameters, and reserves some parameter names for its own request
processing. Everything reported here is a warning: the document can still be
uploaded, but parts of it will not survive the import.
"""

import logging
from typing import Any

from oas_preflight.models import CheckResult

logger = logging.getLogger(__name__)

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

# Lowercase; parameter names are compared case-insensitively
RESERVED_PARAMETER_NAMES = frozenset(
    {
        "body",
        "id",
        "ids",
        "filter",
        "filters",
        "query",
        "search",
        "q",
        "headers",
        "header",
        "params",
        "page",
        "per_page",
        "page_size",
        "limit",
        "offset",
        "cursor",
        "sort",
    }
)


def is_reserved_parameter_name(name: Any) -> bool:
    """
    Check a parameter name against the reserved set.

    Examples:
        >>> is_reserved_parameter_name("Filter")
        True
        >>> is_reserved_parameter_name("petId")
        False
    """
    return isinstance(name, str) and name.lower() in RESERVED_PARAMETER_NAMES


def resolve_local_ref(spec: dict, ref: Any) -> Any:
    """
    Resolve a document-local ``$ref`` such as ``#/components/parameters/Limit``.

    Returns None for external or unresolvable references.

    Examples:
        >>> spec = {"components": {"parameters": {"Limit": {"name": "limit"}}}}
        >>> resolve_local_ref(spec, "#/components/parameters/Limit")
        {'name': 'limit'}
        >>> resolve_local_ref(spec, "common.yaml#/Limit") is None
        True
    """
    if not isinstance(ref, str) or not ref.startswith("#/"):
        return None

    node: Any = spec
    for token in ref[2:].split("/"):
        key = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and key in node:
            node = node[key]
        elif isinstance(node, list) and key.isdigit() and int(key) < len(node):
            node = node[int(key)]
        else:
            return None
    return node


def _dereference(spec: dict, param: Any) -> Any:
    """Follow a chain of local ``$ref`` objects to the parameter they point at"""
    seen: set[str] = set()
    while isinstance(param, dict) and "$ref" in param:
        ref = param["$ref"]
        if not isinstance(ref, str) or ref in seen:
            return None
        seen.add(ref)
        param = resolve_local_ref(spec, ref)
    return param


def _check_parameters(spec: dict, parameters: Any, location: str, result: CheckResult) -> None:
    """Check a ``parameters`` list declared at ``location``"""
    if not isinstance(parameters, list):
        return

    for index, param in enumerate(parameters):
        param = _dereference(spec, param)
        if not isinstance(param, dict):
            continue

        param_path = f"{location}.parameters.{index}"
        name = param.get("name")

        if param.get("in") == "cookie":
            result.add_warning(
                param_path,
                f"Cookie parameter '{name}' is not supported and will be ignored on import.",
            )

        if is_reserved_parameter_name(name):
            result.add_warning(
                param_path,
                f"Parameter name '{name}' is reserved and may collide with internal "
                "request processing. Consider renaming it.",
            )


def _check_operation(spec: dict, operation: dict, location: str, result: CheckResult) -> None:
    """Check one operation object"""
    if not operation.get("summary") and not operation.get("operationId"):
        result.add_warning(
            location,
            "Operation has neither a summary nor an operationId and will be dropped on import.",
        )

    if operation.get("deprecated") is True:
        result.add_warning(location, "Deprecated operation will be dropped on import.")

    _check_parameters(spec, operation.get("parameters"), location, result)


def check_compatibility(spec: Any) -> CheckResult:
    """
    Walk every declared operation and parameter for platform incompatibilities.

    Args:
        spec: Decoded document (normally a dict)

    Returns:
        CheckResult containing warnings only

    Examples:
        >>> spec = {"paths": {"/pets": {"get": {"deprecated": True}}}}
        >>> len(check_compatibility(spec).warnings)
        2
    """
    result = CheckResult()

    if not isinstance(spec, dict):
        return result

    paths = spec.get("paths")
    if not isinstance(paths, dict):
        return result

    operation_count = 0

    for path, path_item in paths.items():
        if not isinstance(path_item, dict):
            continue

        path_location = f"paths.{path}"
        _check_parameters(spec, path_item.get("parameters"), path_location, result)

        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if not isinstance(operation, dict):
                continue

            operation_count += 1
            _check_operation(spec, operation, f"{path_location}.{method}", result)

    logger.debug(
        f"Checked {operation_count} operations, {len(result.warnings)} compatibility warnings"
    )
    return result

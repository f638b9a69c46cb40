"""Core checks, pipeline and reporting"""

from .compatibility import (
    HTTP_METHODS,
    RESERVED_PARAMETER_NAMES,
    check_compatibility,
    is_reserved_parameter_name,
    resolve_local_ref,
)
from .loader import INVALID_JSON_MESSAGE, LoadedDocument, file_size_kb, load_document
from .pipeline import merge_results, run_preflight
from .report import exit_code, render_json, render_text
from .structure import check_structure, has_info_title, has_openapi_field

__all__ = [
    # Loading
    "INVALID_JSON_MESSAGE",
    "LoadedDocument",
    "file_size_kb",
    "load_document",
    # Checks
    "check_structure",
    "has_openapi_field",
    "has_info_title",
    "HTTP_METHODS",
    "RESERVED_PARAMETER_NAMES",
    "check_compatibility",
    "is_reserved_parameter_name",
    "resolve_local_ref",
    # Pipeline and reporting
    "merge_results",
    "run_preflight",
    "exit_code",
    "render_json",
    "render_text",
]

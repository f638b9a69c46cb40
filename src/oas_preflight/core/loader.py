"""Load candidate OpenAPI documents from disk"""

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from oas_preflight.exceptions import DocumentLoadError
from oas_preflight.models import CheckResult

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = (
    "The OpenAPI document is not valid JSON. Please correct the document and try again."
)
TOO_DEEP_MESSAGE = "The OpenAPI document is nested too deeply to be parsed."


@dataclass
class LoadedDocument:
    """A decoded document, kept only for the duration of a run"""

    path: Path
    size_kb: float
    content: Any
    size_check: CheckResult = field(default_factory=CheckResult)


def file_size_kb(path: Path) -> float:
    """Size of a file in kilobytes, rounded half-up to one decimal"""
    size_bytes = path.stat().st_size
    return math.floor(size_bytes / 1024 * 10 + 0.5) / 10


def load_document(path: str | Path, max_size_kb: float) -> LoadedDocument:
    """
    Read and decode a candidate document.

    Oversized files are reported as a non-fatal error in ``size_check`` and
    are still decoded.

    Args:
        path: Path to the JSON document
        max_size_kb: Size limit of the downstream platform

    Returns:
        LoadedDocument with the decoded content

    Raises:
        DocumentLoadError: If the file is missing, unreadable or is not valid JSON
    """
    spec_path = Path(path)

    if not spec_path.is_file():
        raise DocumentLoadError(f"File not found: {path}")

    size_kb = file_size_kb(spec_path)
    size_check = CheckResult()

    if size_kb > max_size_kb:
        logger.debug(f"Document is {size_kb}KB, limit is {max_size_kb}KB")
        size_check.add_error(
            "",
            f"File size {size_kb}KB exceeds the ~{max_size_kb:g}KB upload limit. "
            "Reduce the document (for example with a subset of its paths) before uploading.",
        )

    try:
        text = spec_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.debug(f"Failed to decode {spec_path}: {e}")
        raise DocumentLoadError(INVALID_JSON_MESSAGE, size_kb=size_kb) from e
    except OSError as e:
        raise DocumentLoadError(f"Could not read {path}: {e}", size_kb=size_kb) from e

    try:
        content = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Failed to decode {spec_path}: {e}")
        raise DocumentLoadError(INVALID_JSON_MESSAGE, size_kb=size_kb) from e
    except RecursionError as e:
        raise DocumentLoadError(TOO_DEEP_MESSAGE, size_kb=size_kb) from e

    return LoadedDocument(path=spec_path, size_kb=size_kb, content=content, size_check=size_check)

"""Spectral CLI adapter"""

import json
import logging
import shutil
import subprocess
from pathlib import Path
from typing import Any

from oas_preflight.engines.base import RuleEngine
from oas_preflight.exceptions import EngineNotInstalledError, RuleEngineError
from oas_preflight.models import CheckResult, Finding, Severity

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = ("npx", "@stoplight/spectral-cli")
NOT_INSTALLED_MESSAGE = "Spectral not installed. Run: npm install -g @stoplight/spectral-cli"

# Spectral severity codes; 2 (info) and 3 (hint) are not reported
SPECTRAL_ERROR = 0
SPECTRAL_WARNING = 1

# Spectral exits 0 when clean and 1 when results reach the fail severity
SPECTRAL_LINT_EXIT_CODES = (0, 1)

# Shell convention for "command not found"
EXIT_COMMAND_NOT_FOUND = 127


def _to_finding(item: dict, severity: Severity) -> Finding:
    """Normalize one Spectral result into a Finding"""
    path = item.get("path") or []
    line = None

    range_ = item.get("range")
    if isinstance(range_, dict) and isinstance(range_.get("start"), dict):
        start_line = range_["start"].get("line")
        if isinstance(start_line, int):
            line = start_line

    code = item.get("code")

    return Finding(
        path=".".join(str(segment) for segment in path),
        message=str(item.get("message", "")),
        severity=severity,
        code=str(code) if code is not None else None,
        line=line,
    )


def parse_spectral_output(stdout: str) -> CheckResult:
    """
    Parse Spectral ``--format json`` output.

    Args:
        stdout: Raw standard output of the Spectral process

    Returns:
        CheckResult with severity 0 results as errors and 1 as warnings

    Raises:
        ValueError: If the output is not a JSON array
    """
    result = CheckResult()

    if not stdout.strip():
        return result

    items: Any = json.loads(stdout)
    if not isinstance(items, list):
        raise ValueError(f"Expected a JSON array from Spectral, got {type(items).__name__}")

    for item in items:
        if not isinstance(item, dict):
            continue

        severity = item.get("severity")
        if severity == SPECTRAL_ERROR:
            result.errors.append(_to_finding(item, Severity.ERROR))
        elif severity == SPECTRAL_WARNING:
            result.warnings.append(_to_finding(item, Severity.WARNING))

    return result


class SpectralEngine(RuleEngine):
    """
    Runs the Spectral CLI as a subprocess.

    Features:
    - Explicit availability check before spawning
    - Optional timeout on the subprocess wait
    - Unparsable output degrades to an empty result
    """

    name = "Spectral"

    def __init__(
        self,
        command: list[str] | tuple[str, ...] | None = None,
        timeout: float | None = None,
    ) -> None:
        """
        Initialize the Spectral adapter.

        Args:
            command: Command prefix that launches Spectral (default: npx)
            timeout: Seconds to wait for Spectral, None waits forever
        """
        self.command = list(command or DEFAULT_COMMAND)
        self.timeout = timeout

    def build_args(self, document_path: Path, ruleset_path: Path) -> list[str]:
        return [
            *self.command,
            "lint",
            str(document_path),
            "--ruleset",
            str(ruleset_path),
            "--format",
            "json",
        ]

    def is_available(self) -> bool:
        """Check that the launcher executable can be found"""
        return shutil.which(self.command[0]) is not None

    def lint(self, document_path: Path, ruleset_path: Path) -> CheckResult:
        if not self.is_available():
            logger.error(f"❌ Executable not found: {self.command[0]}")
            raise EngineNotInstalledError(NOT_INSTALLED_MESSAGE)

        args = self.build_args(document_path, ruleset_path)
        logger.info(f"🔍 Running Spectral: {' '.join(args)}")

        try:
            proc = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise EngineNotInstalledError(NOT_INSTALLED_MESSAGE) from e
        except subprocess.TimeoutExpired as e:
            raise RuleEngineError(f"Spectral did not finish within {self.timeout} seconds") from e
        except OSError as e:
            raise RuleEngineError(f"Failed to run Spectral: {e}") from e

        if proc.returncode == EXIT_COMMAND_NOT_FOUND:
            logger.error(f"❌ Spectral could not be started: {(proc.stderr or '').strip()}")
            raise EngineNotInstalledError(NOT_INSTALLED_MESSAGE)

        try:
            result = parse_spectral_output(proc.stdout or "")
        except ValueError as e:
            logger.warning(
                f"⚠️  Could not parse Spectral output (exit code {proc.returncode}): {e}. "
                "Continuing without Spectral findings."
            )
            if proc.stderr:
                logger.debug(f"Spectral stderr: {proc.stderr.strip()}")
            return CheckResult()

        if not (proc.stdout or "").strip() and proc.returncode not in SPECTRAL_LINT_EXIT_CODES:
            logger.warning(
                f"⚠️  Spectral exited with code {proc.returncode} without output, "
                f"continuing without Spectral findings: {(proc.stderr or '').strip()}"
            )

        logger.info(
            f"✅ Spectral reported {len(result.errors)} errors, {len(result.warnings)} warnings"
        )
        return result

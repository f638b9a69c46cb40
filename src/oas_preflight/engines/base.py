"""Base class for external rule engines"""

from abc import ABC, abstractmethod
from pathlib import Path

from oas_preflight.models import CheckResult


class RuleEngine(ABC):
    """An external linter consulted for schema and style rules"""

    name: str = "rule engine"

    @abstractmethod
    def lint(self, document_path: Path, ruleset_path: Path) -> CheckResult:
        """
        Lint a document with the given ruleset.

        Args:
            document_path: Path to the document on disk
            ruleset_path: Path to the ruleset definition file

        Returns:
            CheckResult with the engine's errors and warnings

        Raises:
            EngineNotInstalledError: If the engine is not available
            RuleEngineError: If the engine could not be run
        """
        pass

"""Fatal conditions that stop a preflight run"""


class PreflightError(Exception):
    """Base class for fatal preflight errors"""


class DocumentLoadError(PreflightError):
    """The document could not be read or decoded"""

    def __init__(self, message: str, size_kb: float | None = None) -> None:
        super().__init__(message)
        self.size_kb = size_kb


class RuleEngineError(PreflightError):
    """The external rule engine could not be run"""


class EngineNotInstalledError(RuleEngineError):
    """The external rule engine executable is not available"""

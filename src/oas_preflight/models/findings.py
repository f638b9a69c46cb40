"""Finding and validation result data models"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Severity(str, Enum):
    """Finding severity"""

    ERROR = "error"
    WARNING = "warning"


class Finding(BaseModel):
    """One reported issue, located by a dotted path into the document"""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    path: str = ""
    message: str
    severity: Severity
    code: str | None = None  # rule code, engine findings only
    line: int | None = None  # source line as reported by the engine


class CheckResult(BaseModel):
    """Findings produced by a single checking stage"""

    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    def add_error(self, path: str, message: str, code: str | None = None) -> None:
        self.errors.append(Finding(path=path, message=message, severity=Severity.ERROR, code=code))

    def add_warning(self, path: str, message: str, code: str | None = None) -> None:
        self.warnings.append(
            Finding(path=path, message=message, severity=Severity.WARNING, code=code)
        )


class ValidationResult(BaseModel):
    """Combined outcome of a preflight run"""

    success: bool
    fatal: str | None = None
    size_kb: float | None = None
    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)

    @classmethod
    def fatal_result(cls, message: str, size_kb: float | None = None) -> "ValidationResult":
        """Build a result for a condition that stopped the pipeline"""
        return cls(success=False, fatal=message, size_kb=size_kb)

    @property
    def is_fatal(self) -> bool:
        return self.fatal is not None

    def __repr__(self) -> str:
        return (
            f"ValidationResult(success={self.success}, fatal={self.fatal!r}, "
            f"errors={len(self.errors)}, warnings={len(self.warnings)})"
        )

"""Shared fixtures for preflight tests"""

import json
from pathlib import Path

import pytest

from oas_preflight.config import Settings, get_settings
from oas_preflight.engines import RuleEngine
from oas_preflight.models import CheckResult


class FakeEngine(RuleEngine):
    """Rule engine stand-in that returns a canned result or raises"""

    name = "FakeEngine"

    def __init__(self, result: CheckResult | None = None, error: Exception | None = None) -> None:
        self.result = result or CheckResult()
        self.error = error
        self.calls: list[tuple[Path, Path]] = []

    def lint(self, document_path: Path, ruleset_path: Path) -> CheckResult:
        self.calls.append((document_path, ruleset_path))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Force settings to be reloaded after environment changes"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings with a throwaway ruleset file"""
    ruleset = tmp_path / "ruleset.yaml"
    ruleset.write_text("extends: [[spectral:oas, recommended]]\n")
    return Settings(ruleset_path=str(ruleset))


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def make_engine():
    """Factory for engines with canned results"""
    return FakeEngine


@pytest.fixture
def write_spec(tmp_path: Path):
    """Write a document (dict or raw text) and return its path"""

    def _write(content: dict | str, name: str = "spec.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write

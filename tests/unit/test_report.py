"""Tests for text/JSON rendering and exit codes"""

import json

from oas_preflight.core import exit_code, render_json, render_text
from oas_preflight.models import Finding, Severity, ValidationResult


def _warnings(count: int) -> list[Finding]:
    return [
        Finding(path=f"paths./w{i}", message=f"Warning {i}", severity=Severity.WARNING)
        for i in range(count)
    ]


class TestExitCode:
    """Tests for exit_code function"""

    def test_passed(self) -> None:
        assert exit_code(ValidationResult(success=True)) == 0

    def test_errors(self) -> None:
        assert exit_code(ValidationResult(success=False)) == 1

    def test_fatal(self) -> None:
        assert exit_code(ValidationResult.fatal_result("File not found: x")) == 2

    def test_warnings_do_not_change_exit_code(self) -> None:
        assert exit_code(ValidationResult(success=True, warnings=_warnings(3))) == 0


class TestRenderJson:
    """Tests for render_json function"""

    def test_serializes_result(self) -> None:
        """Test the structured output carries every field"""
        result = ValidationResult(
            success=False,
            size_kb=12.3,
            errors=[
                Finding(
                    path="$.openapi",
                    message="Missing",
                    severity=Severity.ERROR,
                    code="rule-x",
                    line=3,
                )
            ],
            warnings=_warnings(1),
        )

        data = json.loads(render_json(result))

        assert data["success"] is False
        assert data["fatal"] is None
        assert data["size_kb"] == 12.3
        assert data["errors"][0] == {
            "path": "$.openapi",
            "message": "Missing",
            "severity": "error",
            "code": "rule-x",
            "line": 3,
        }
        assert data["warnings"][0]["severity"] == "warning"

    def test_fatal_result(self) -> None:
        data = json.loads(render_json(ValidationResult.fatal_result("boom")))
        assert data["fatal"] == "boom"
        assert data["errors"] == []
        assert data["warnings"] == []


class TestRenderText:
    """Tests for render_text function"""

    def test_header(self) -> None:
        """Test file name and size line"""
        text = render_text(
            ValidationResult(success=True, size_kb=1.5), "/some/dir/api.json", max_size_kb=500
        )
        assert "OpenAPI Preflight Linter - api.json" in text
        assert "=" * 50 in text
        assert "Size: 1.5 KB (limit: ~500 KB)" in text

    def test_passed_banner(self) -> None:
        text = render_text(ValidationResult(success=True, size_kb=1.0), "a.json", 500)
        assert "✓ PASSED - Ready for upload" in text
        assert "Errors:" not in text
        assert "Warnings" not in text

    def test_passed_with_warnings(self) -> None:
        text = render_text(
            ValidationResult(success=True, warnings=_warnings(1)), "a.json", 500
        )
        assert "(1 warning - optional to fix)" in text

    def test_failed_lists_errors(self) -> None:
        """Test error items show message, location and rule"""
        result = ValidationResult(
            success=False,
            errors=[
                Finding(path="$.openapi", message="Missing openapi", severity=Severity.ERROR),
                Finding(
                    path="paths./a",
                    message="Bad path",
                    severity=Severity.ERROR,
                    code="path-params",
                ),
            ],
        )

        text = render_text(result, "a.json", 500)

        assert "✗ FAILED - 2 errors must be fixed" in text
        assert "✗ Missing openapi" in text
        assert "  at: $.openapi" in text
        assert "  rule: path-params" in text

    def test_error_without_path_or_code(self) -> None:
        result = ValidationResult(
            success=False,
            errors=[Finding(message="Too big", severity=Severity.ERROR)],
        )
        text = render_text(result, "a.json", 500)
        assert "✗ FAILED - 1 error must be fixed" in text
        assert "at:" not in text
        assert "rule:" not in text

    def test_warnings_are_truncated(self) -> None:
        """Test only the first five warnings are itemized"""
        text = render_text(ValidationResult(success=True, warnings=_warnings(8)), "a.json", 500)

        assert "⚠ Warning 4" in text
        assert "⚠ Warning 5" not in text
        assert "... and 3 more warnings" in text

    def test_custom_warning_limit(self) -> None:
        text = render_text(
            ValidationResult(success=True, warnings=_warnings(3)), "a.json", 500, max_warnings=2
        )
        assert "... and 1 more warning" in text
        assert "more warnings" not in text

    def test_fatal_report(self) -> None:
        """Test fatal results show only the header and the message"""
        text = render_text(ValidationResult.fatal_result("File not found: a.json"), "a.json", 500)

        assert "FATAL: File not found: a.json" in text
        assert "Size:" not in text
        assert "PASSED" not in text
        assert "FAILED" not in text

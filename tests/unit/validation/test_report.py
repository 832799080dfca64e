"""Tests for ValidationReport and failure rendering."""

from fieldrules.errors import FailureKind, ValidationErrors
from fieldrules.validation.report import ValidationFailure, ValidationReport


class TestValidationFailure:
    """Test single failure entries."""

    def test_message(self):
        """Test failure message and string form."""
        failure = ValidationFailure("ID", FailureKind.LENGTH_MISMATCH)
        assert failure.message == "len doesn't satisfy the rule"
        assert str(failure) == "field: ID, error: len doesn't satisfy the rule"

    def test_messages_are_stable(self):
        """Test the fixed message per failure kind."""
        assert FailureKind.OUT_OF_SET.message == "value doesn't belong to the set"
        assert FailureKind.OUT_OF_BOUNDS.message == "values is less or over the limit"
        assert FailureKind.PATTERN_MISMATCH.message == "value doesn't satisfy the regexp"


class TestValidationReport:
    """Test ValidationReport aggregation."""

    def test_empty_report(self):
        """Test an empty report is ok and renders empty."""
        report = ValidationReport()
        assert report.ok
        assert len(report) == 0
        assert not report
        assert report.render() == ""

    def test_add_preserves_order(self):
        """Test failures keep insertion order."""
        report = ValidationReport()
        report.add("ID", FailureKind.LENGTH_MISMATCH)
        report.add("Role", FailureKind.OUT_OF_SET)
        report.add("ID", FailureKind.PATTERN_MISMATCH)

        assert not report.ok
        assert len(report) == 3
        assert [f.field for f in report] == ["ID", "Role", "ID"]
        assert report.fields() == ["ID", "Role"]

    def test_render_legacy_format(self):
        """Test rendering with the trailing space format."""
        report = ValidationReport()
        report.add("ID", FailureKind.LENGTH_MISMATCH)
        report.add("Role", FailureKind.OUT_OF_SET)

        expected = (
            "field: ID, error: len doesn't satisfy the rule "
            "field: Role, error: value doesn't belong to the set "
        )
        assert report.render() == expected

    def test_to_dict(self):
        """Test dictionary export."""
        report = ValidationReport()
        report.add("age", FailureKind.OUT_OF_BOUNDS)

        assert report.to_dict() == {
            "status": "fail",
            "total_failures": 1,
            "failures": [
                {
                    "field": "age",
                    "kind": "out_of_bounds",
                    "message": "values is less or over the limit",
                }
            ],
        }
        assert ValidationReport().to_dict()["status"] == "pass"


class TestValidationErrors:
    """Test the aggregate exception."""

    def test_carries_report(self):
        """Test the exception exposes its report."""
        report = ValidationReport()
        report.add("id", FailureKind.LENGTH_MISMATCH)
        error = ValidationErrors(report)

        assert error.report is report
        assert error.failures == [ValidationFailure("id", FailureKind.LENGTH_MISMATCH)]
        assert str(error) == report.render()

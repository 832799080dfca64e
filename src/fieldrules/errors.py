"""Error taxonomy for fieldrules.

Two tiers: structural errors abort a validation pass immediately, while
validation failures are aggregated into a report and raised once at the end.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fieldrules.validation.report import ValidationReport


class FailureKind(str, Enum):
    """Recoverable per-field, per-rule validation outcomes."""
    LENGTH_MISMATCH = "length_mismatch"
    OUT_OF_SET = "out_of_set"
    OUT_OF_BOUNDS = "out_of_bounds"
    PATTERN_MISMATCH = "pattern_mismatch"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


# Rendered into report text; existing consumers compare these verbatim.
_FAILURE_MESSAGES = {
    FailureKind.LENGTH_MISMATCH: "len doesn't satisfy the rule",
    FailureKind.OUT_OF_SET: "value doesn't belong to the set",
    FailureKind.OUT_OF_BOUNDS: "values is less or over the limit",
    FailureKind.PATTERN_MISMATCH: "value doesn't satisfy the regexp",
}


class FieldRulesError(Exception):
    """Base class for every error raised by fieldrules."""
    pass


class StructuralError(FieldRulesError):
    """A problem with the rules or types themselves, not with the data."""

    message = "structural error"

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(self.message)


class WrongValueError(StructuralError):
    """Raised when a rule string or one of its parameters is malformed."""

    message = "error during parsing input"

    def __init__(self, rule: str, detail: str = ""):
        self.rule = rule
        super().__init__(detail)


class UnsupportedTypeError(StructuralError):
    """Raised when a rule is applied to a value type it cannot handle."""

    message = "unsupported type for validation"

    def __init__(self, value_type: type, field: str | None = None, detail: str = ""):
        self.value_type = value_type
        self.field = field
        super().__init__(detail)


class ValidationErrors(FieldRulesError):
    """Raised by ``validate`` when at least one field violates its rules."""

    def __init__(self, report: "ValidationReport"):
        self.report = report
        super().__init__(report.render())

    @property
    def failures(self):
        return self.report.failures

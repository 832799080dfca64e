"""fieldrules - declarative validation of record fields.

Fields carry rule strings such as ``len:36`` or ``in:admin,staff|len:5``;
``validate`` checks every tagged field and reports every violation found.
"""

__version__ = "0.1.0"
__author__ = "fieldrules contributors"
__description__ = "Declarative rule-string validation for dataclasses and pydantic models"

from fieldrules.config import FieldRulesConfig, ValidationConfig
from fieldrules.errors import (
    FailureKind,
    FieldRulesError,
    StructuralError,
    UnsupportedTypeError,
    ValidationErrors,
    WrongValueError,
)
from fieldrules.validation import (
    FieldSpec,
    ValidationFailure,
    ValidationReport,
    Validator,
    collect,
    rule,
    rule_field,
    validate,
)

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "validate",
    "collect",
    "Validator",
    "rule",
    "rule_field",
    "FieldSpec",
    "ValidationFailure",
    "ValidationReport",
    "FailureKind",
    "FieldRulesError",
    "StructuralError",
    "WrongValueError",
    "UnsupportedTypeError",
    "ValidationErrors",
    "FieldRulesConfig",
    "ValidationConfig",
]

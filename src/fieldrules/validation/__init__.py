"""Record validation: field enumeration, walking and failure reporting."""

from .fields import FieldDescriptor, FieldSpec, is_record, iter_fields, rule, rule_field
from .framework import Validator, collect, validate
from .report import ValidationFailure, ValidationReport
from .walker import FieldWalker

__all__ = [
    "Validator",
    "validate",
    "collect",
    "FieldWalker",
    "FieldSpec",
    "FieldDescriptor",
    "iter_fields",
    "is_record",
    "rule",
    "rule_field",
    "ValidationFailure",
    "ValidationReport",
]

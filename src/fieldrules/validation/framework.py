"""Validation entry points."""

import logging
from typing import Any

from ..config import FieldRulesConfig, create_default_config
from ..errors import ValidationErrors
from .report import ValidationReport
from .walker import FieldWalker

logger = logging.getLogger(__name__)


class Validator:
    """Validates records according to a configuration.

    Holds no per-call state; one instance may be shared across threads.
    """

    def __init__(self, config: FieldRulesConfig | None = None):
        self.config = config or create_default_config()

    def _walker(self) -> FieldWalker:
        return FieldWalker(
            tag_key=self.config.validation.tag_key,
            strict=self.config.validation.strict,
        )

    def collect(self, record: Any) -> ValidationReport:
        """Validate a record and return the report, empty on success.

        Raises:
            StructuralError: On malformed rules or unsupported types
        """
        return self._walker().walk(record)

    def validate(self, record: Any) -> None:
        """Validate a record.

        Raises:
            ValidationErrors: If any field violates its rules
            StructuralError: On malformed rules or unsupported types
        """
        report = self.collect(record)
        if report:
            logger.debug(f"Validation failed for fields: {', '.join(report.fields())}")
            raise ValidationErrors(report)


def validate(record: Any, config: FieldRulesConfig | None = None) -> None:
    """Validate a record with the given or default configuration."""
    Validator(config).validate(record)


def collect(record: Any, config: FieldRulesConfig | None = None) -> ValidationReport:
    """Validate a record and return its report instead of raising."""
    return Validator(config).collect(record)

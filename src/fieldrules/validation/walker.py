"""Walk a record's fields and evaluate their rules.

The walker never returns partial results: a structural error on any field
aborts the pass and discards failures already collected.
"""

import logging
from typing import Any

from ..errors import StructuralError, UnsupportedTypeError
from ..rules.parser import parse_rules
from ..rules.sequence import evaluate_token
from .fields import DEFAULT_TAG_KEY, FieldDescriptor, is_record, iter_fields
from .report import ValidationReport

logger = logging.getLogger(__name__)


class FieldWalker:
    """Evaluates every tagged field of a record."""

    def __init__(self, tag_key: str = DEFAULT_TAG_KEY, strict: bool = False):
        self.tag_key = tag_key
        self.strict = strict

    def walk(self, record: Any) -> ValidationReport:
        """Validate all fields of a record.

        Args:
            record: Dataclass instance, pydantic model instance, or object
                declaring ``__validate_fields__``

        Returns:
            Report of every (field, rule) violation; empty when all pass

        Raises:
            UnsupportedTypeError: If ``record`` is not a record, or a rule is
                applied to a value type it does not accept
            WrongValueError: If a rule string is malformed
        """
        if not is_record(record):
            raise UnsupportedTypeError(type(record), detail="top-level value is not a record")

        report = ValidationReport()
        for descriptor in iter_fields(record, self.tag_key):
            self._walk_field(descriptor, report)

        logger.debug(
            f"Validated {type(record).__name__}: {len(report)} failure(s)"
        )
        return report

    def _walk_field(self, descriptor: FieldDescriptor, report: ValidationReport) -> None:
        name = descriptor.name
        if descriptor.rule is None:
            return
        if descriptor.value is None:
            logger.debug(f"Skipping field {name}: no value")
            return
        if is_record(descriptor.value):
            logger.debug(f"Skipping field {name}: nested record")
            return

        try:
            tokens = parse_rules(descriptor.rule, strict=self.strict)
            for token in tokens:
                failure = evaluate_token(descriptor.value, token)
                if failure is not None:
                    logger.debug(f"Field {name} failed rule {token.kind.value}: {failure.message}")
                    report.add(name, failure)
        except StructuralError as e:
            if isinstance(e, UnsupportedTypeError) and e.field is None:
                e.field = name
            logger.debug(f"Aborting validation at field {name}: {e} ({e.detail})")
            raise

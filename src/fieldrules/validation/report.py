"""Ordered collection of per-field validation failures."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..errors import FailureKind


@dataclass(frozen=True)
class ValidationFailure:
    """A single field that violated a single rule."""
    field: str
    kind: FailureKind

    @property
    def message(self) -> str:
        return self.kind.message

    def __str__(self) -> str:
        return f"field: {self.field}, error: {self.message}"


@dataclass
class ValidationReport:
    """Failures in field declaration order, then rule order within a field."""
    failures: list[ValidationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def add(self, field_name: str, kind: FailureKind) -> None:
        """Append a failure."""
        self.failures.append(ValidationFailure(field_name, kind))

    def fields(self) -> list[str]:
        """Names of failing fields, without duplicates, in report order."""
        return list(dict.fromkeys(failure.field for failure in self.failures))

    def render(self) -> str:
        """Render the report in the legacy single-line text format.

        Every entry is followed by a space, including the last one.
        """
        return "".join(f"{failure} " for failure in self.failures)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "status": "pass" if self.ok else "fail",
            "total_failures": len(self.failures),
            "failures": [
                {
                    "field": failure.field,
                    "kind": failure.kind.value,
                    "message": failure.message,
                }
                for failure in self.failures
            ],
        }

    def __len__(self) -> int:
        return len(self.failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self.failures)

    def __bool__(self) -> bool:
        return bool(self.failures)

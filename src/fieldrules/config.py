"""Configuration management for fieldrules using Pydantic models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UnknownRulePolicy(str, Enum):
    """What to do with rule tokens whose prefix is not recognized."""
    IGNORE = "ignore"
    STRICT = "strict"


class ValidationConfig(BaseModel):
    """Validation configuration section."""
    tag_key: str = Field(alias="tagKey", default="validate")
    unknown_rules: UnknownRulePolicy = Field(alias="unknownRules", default=UnknownRulePolicy.IGNORE)

    @field_validator("tag_key")
    @classmethod
    def validate_tag_key(cls, v):
        if not v or not v.strip():
            raise ValueError("tag_key must be a non-empty string")
        if v != v.strip():
            raise ValueError(f"tag_key must not have surrounding whitespace, got: {v!r}")
        return v

    @property
    def strict(self) -> bool:
        return self.unknown_rules == UnknownRulePolicy.STRICT

    model_config = ConfigDict(populate_by_name=True)


class FieldRulesConfig(BaseModel):
    """Complete fieldrules configuration model."""
    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    model_config = ConfigDict(extra="forbid")


def create_default_config() -> FieldRulesConfig:
    """Create default configuration: ``validate`` tag key, unknown rules ignored."""
    return FieldRulesConfig()

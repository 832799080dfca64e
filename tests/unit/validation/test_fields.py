"""Tests for record field enumeration."""

from dataclasses import dataclass, field

import pytest
from pydantic import BaseModel, Field

from fieldrules.validation.fields import (
    FieldDescriptor,
    FieldSpec,
    is_record,
    iter_fields,
    rule,
    rule_field,
)
from records import Account, App, Nested, Response, User


class Point:
    __validate_fields__ = [
        FieldSpec("x", "min:0"),
        ("y", "max:10"),
        FieldSpec("label", "len:3", accessor=lambda p: p.name),
        FieldSpec("z"),
    ]

    def __init__(self, x, y, name):
        self.x = x
        self.y = y
        self.z = 0
        self.name = name


class TestRuleHelpers:
    """Test rule and rule_field helpers."""

    def test_rule_stores_metadata(self):
        """Test rule puts the rule string in dataclass metadata."""
        f = rule("len:3", default="abc", metadata={"other": 1})
        assert f.metadata["validate"] == "len:3"
        assert f.metadata["other"] == 1
        assert f.default == "abc"

    def test_rule_custom_tag_key(self):
        """Test rule honours a custom tag key."""
        assert rule("len:3", tag_key="check").metadata == {"check": "len:3"}

    def test_rule_field_stores_extra(self):
        """Test rule_field merges into json_schema_extra."""
        info = rule_field("len:3", default="abc", json_schema_extra={"example": "xyz"})
        assert info.json_schema_extra == {"example": "xyz", "validate": "len:3"}
        assert info.default == "abc"


class TestIsRecord:
    """Test record detection."""

    def test_records(self):
        """Test dataclass, pydantic and explicit records are detected."""
        assert is_record(App(version="1.0.0"))
        assert is_record(Account(login="abcde", level=1))
        assert is_record(Point(1, 2, "abc"))

    @pytest.mark.parametrize("value", [5, "text", [1, 2], {"a": 1}, None, App, Account, Point])
    def test_non_records(self, value):
        """Test primitives and classes are not records."""
        assert not is_record(value)


class TestIterFields:
    """Test field enumeration per record style."""

    def test_dataclass_order_and_rules(self):
        """Test dataclass fields come back in declaration order."""
        user = User(id="1", age=51)
        descriptors = list(iter_fields(user))
        assert [d.name for d in descriptors] == [
            "id", "name", "age", "email", "role", "phones", "meta"
        ]
        assert descriptors[0] == FieldDescriptor("id", "1", "len:36")
        assert descriptors[1].rule is None
        assert descriptors[2] == FieldDescriptor("age", 51, "min:18|max:50")

    def test_dataclass_custom_tag_key(self):
        """Test only the configured tag key is read."""
        @dataclass
        class Tagged:
            a: str = field(default="x", metadata={"check": "len:1"})
            b: str = rule("len:2", default="yy")

        descriptors = list(iter_fields(Tagged(), tag_key="check"))
        assert [(d.name, d.rule) for d in descriptors] == [("a", "len:1"), ("b", None)]

    def test_pydantic_model(self):
        """Test pydantic fields and their rules."""
        account = Account(login="abcde", level=2, tags=["a"])
        descriptors = list(iter_fields(account))
        assert [(d.name, d.value, d.rule) for d in descriptors] == [
            ("login", "abcde", "len:5"),
            ("level", 2, "min:1|max:3"),
            ("tags", ["a"], "in:a,b,c"),
            ("note", "", None),
        ]

    def test_pydantic_callable_extra_ignored(self):
        """Test a callable json_schema_extra carries no rule."""
        class Model(BaseModel):
            value: str = Field(default="", json_schema_extra=lambda schema: None)

        assert [d.rule for d in iter_fields(Model())] == [None]

    def test_explicit_fields(self):
        """Test the explicit field list with accessors."""
        descriptors = list(iter_fields(Point(1, 20, "abcd")))
        assert descriptors == [
            FieldDescriptor("x", 1, "min:0"),
            FieldDescriptor("y", 20, "max:10"),
            FieldDescriptor("label", "abcd", "len:3"),
            FieldDescriptor("z", 0, None),
        ]

    def test_nested_value_is_reported_not_walked(self):
        """Test nested records are yielded as plain values."""
        inner = Response(code=200)
        descriptors = list(iter_fields(Nested(resp=inner, name="Struct")))
        assert [d.name for d in descriptors] == ["resp", "name"]
        assert descriptors[0].value is inner

    def test_non_record_yields_nothing(self):
        """Test a non-record yields no fields."""
        assert list(iter_fields(5)) == []

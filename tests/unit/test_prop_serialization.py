"""Tests for JSX prop serialization."""

from __future__ import annotations

import json
import logging
from enum import Enum

import pytest

from capsule_studio.compiler.props import (
    PropValueKind,
    classify_prop_value,
    serialize_prop,
    serialize_props,
)


class Variant(str, Enum):
    PRIMARY = "primary"
    DANGER = "danger"


def _json_payload(attribute: str, key: str) -> str:
    """Strip ``key={`` and ``}`` from a JSON-valued attribute."""
    prefix = f"{key}={{"
    assert attribute.startswith(prefix)
    assert attribute.endswith("}")
    return attribute[len(prefix) : -1]


class TestClassifyPropValue:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            ("text", PropValueKind.STRING),
            ("", PropValueKind.STRING),
            (0, PropValueKind.NUMBER),
            (-3, PropValueKind.NUMBER),
            (2.5, PropValueKind.NUMBER),
            (True, PropValueKind.BOOLEAN),
            (False, PropValueKind.BOOLEAN),
            ([1, 2], PropValueKind.JSON),
            ((1, 2), PropValueKind.JSON),
            ({"a": 1}, PropValueKind.JSON),
            (None, PropValueKind.JSON),
            ({1, 2}, PropValueKind.UNSUPPORTED),
            (object(), PropValueKind.UNSUPPORTED),
            (len, PropValueKind.UNSUPPORTED),
        ],
    )
    def test_kinds(self, value: object, kind: PropValueKind) -> None:
        assert classify_prop_value(value) is kind

    def test_bool_is_not_a_number(self) -> None:
        assert classify_prop_value(True) is not PropValueKind.NUMBER


class TestSerializeProp:
    def test_string_is_quoted(self) -> None:
        assert serialize_prop("text", "Go") == 'text="Go"'

    def test_string_that_looks_like_identifier_stays_quoted(self) -> None:
        assert serialize_prop("variant", "primary") == 'variant="primary"'

    def test_str_enum_member_uses_its_value(self) -> None:
        assert classify_prop_value(Variant.PRIMARY) is PropValueKind.STRING
        assert serialize_prop("variant", Variant.PRIMARY) == 'variant="primary"'

    def test_string_quotes_are_not_escaped(self) -> None:
        assert serialize_prop("say", 'He said "hi"') == 'say="He said "hi""'

    def test_integer(self) -> None:
        assert serialize_prop("initial", 10) == "initial={10}"

    def test_float(self) -> None:
        assert serialize_prop("change", 12.5) == "change={12.5}"

    def test_booleans_use_js_literals(self) -> None:
        assert serialize_prop("open", True) == "open={true}"
        assert serialize_prop("open", False) == "open={false}"

    def test_none_is_null(self) -> None:
        assert serialize_prop("value", None) == "value={null}"

    def test_array_json_round_trips(self) -> None:
        items = ["User John signed up", "New order received"]
        attribute = serialize_prop("items", items)
        assert attribute == 'items={["User John signed up","New order received"]}'
        assert json.loads(_json_payload(attribute, "items")) == items

    def test_nested_object_json_round_trips(self) -> None:
        fields = [
            {"name": "email", "label": "Email", "type": "email", "required": True},
            {"name": "age", "label": "Age", "min": 0, "options": None},
        ]
        attribute = serialize_prop("fields", fields)
        assert json.loads(_json_payload(attribute, "fields")) == fields

    def test_tuple_serializes_as_array(self) -> None:
        assert serialize_prop("data", (10, 25)) == "data={[10,25]}"

    def test_non_ascii_kept_verbatim(self) -> None:
        assert serialize_prop("tags", ["über"]) == 'tags={["über"]}'

    def test_unsupported_value_dropped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="capsule_studio.compiler.props"):
            assert serialize_prop("onClick", lambda: None) is None
        assert "onClick" in caplog.text

    def test_unserializable_json_value_dropped(self) -> None:
        assert serialize_prop("config", {"handler": object()}) is None


class TestSerializeProps:
    def test_joins_with_single_spaces_in_order(self) -> None:
        result = serialize_props({"text": "Go", "count": 2, "on": True})
        assert result == 'text="Go" count={2} on={true}'

    def test_dropped_entries_leave_no_whitespace(self) -> None:
        result = serialize_props({"a": "x", "cb": object(), "b": 1, "s": {1}})
        assert result == 'a="x" b={1}'

    def test_str_enum_agrees_between_string_and_json(self) -> None:
        result = serialize_props({"variant": Variant.DANGER, "variants": [Variant.DANGER]})
        assert result == 'variant="danger" variants={["danger"]}'

    def test_empty_mapping(self) -> None:
        assert serialize_props({}) == ""

    def test_all_dropped(self) -> None:
        assert serialize_props({"cb": object()}) == ""

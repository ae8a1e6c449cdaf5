"""
Prop serialization for generated call sites.

Each prop value is classified into a closed set of kinds. Unsupported values
are dropped from the attribute string rather than failing the assembly.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class PropValueKind(str, Enum):
    """How a prop value is written into JSX."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"
    UNSUPPORTED = "unsupported"


def classify_prop_value(value: Any) -> PropValueKind:
    """Classify a prop value by its runtime type."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return PropValueKind.BOOLEAN
    if isinstance(value, str):
        return PropValueKind.STRING
    if isinstance(value, (int, float)):
        return PropValueKind.NUMBER
    if value is None or isinstance(value, (list, tuple, dict)):
        return PropValueKind.JSON
    return PropValueKind.UNSUPPORTED


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def serialize_prop(key: str, value: Any) -> str | None:
    """
    Serialize one prop as a JSX attribute.

    Strings are interpolated raw: an embedded double quote corrupts the
    output and is not escaped.

    Returns:
        The attribute text, or None when the value cannot be serialized.
    """
    kind = classify_prop_value(value)

    if kind is PropValueKind.STRING:
        # str.__str__ keeps (str, Enum) members as their value, not "Cls.MEMBER"
        return f'{key}="{str.__str__(value)}"'
    if kind is PropValueKind.BOOLEAN:
        return f"{key}={{{'true' if value else 'false'}}}"
    if kind is PropValueKind.NUMBER:
        return f"{key}={{{_to_json(value)}}}"
    if kind is PropValueKind.JSON:
        try:
            return f"{key}={{{_to_json(value)}}}"
        except (TypeError, ValueError) as e:
            logger.warning("Dropping prop %r: value is not JSON serializable (%s)", key, e)
            return None

    logger.warning("Dropping prop %r: unsupported value type %s", key, type(value).__name__)
    return None


def serialize_props(props: Mapping[str, Any]) -> str:
    """Serialize a props mapping to space-separated JSX attributes, skipping dropped props."""
    attributes = (serialize_prop(key, value) for key, value in props.items())
    return " ".join(attr for attr in attributes if attr)

"""
Per-instance identifier derivation and declaration renaming.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Leading declaration header only; catalog snippets start with a newline.
_DECLARATION_RE = re.compile(r"^(\s*function\s+)(\w+)")


def capitalize(value: str) -> str:
    """Uppercase the first character, leaving the rest (hyphens included) untouched."""
    return value[:1].upper() + value[1:]


def component_name(capsule_id: str, instance_id: str) -> str:
    """
    Call-site identifier for one instance.

    ``multi-step-form`` / ``a`` gives ``Multi-step-form_a``; hyphens are kept.
    """
    return f"{capitalize(capsule_id)}_{instance_id}"


def rename_declaration(code: str, instance_id: str) -> str:
    """
    Append ``_<instance_id>`` to the leading function declaration name.

    Only the first header is rewritten. References to the old name inside
    the body are left as they are.
    """
    renamed, count = _DECLARATION_RE.subn(
        lambda m: f"{m.group(1)}{m.group(2)}_{instance_id}", code, count=1
    )
    if not count:
        logger.debug("No leading function declaration to rename for instance %s", instance_id)
    return renamed

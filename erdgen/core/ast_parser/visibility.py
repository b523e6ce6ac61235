"""Rust visibility modifiers -> diagram visibility."""

import re
from typing import Optional

import tree_sitter

from .models import Visibility
from .utils import get_child_by_type, node_text

_RESTRICTED_RE = re.compile(r"^pub\s*\(\s*(?:in\s+)?(.*?)\s*\)$", re.DOTALL)


def resolve_visibility_text(text: Optional[str], default: Visibility) -> Visibility:
    """Map visibility modifier source text to a Visibility.

    `pub(self)` is private, any other restricted form (`pub(crate)`,
    `pub(super)`, `pub(in path)`, bare `crate`) is internal, plain `pub`
    is public and a missing modifier inherits `default`. Never returns
    PROTECTED.
    """
    if text is None:
        return default

    text = text.strip()
    if not text:
        return default

    restricted = _RESTRICTED_RE.match(text)
    if restricted:
        if restricted.group(1) == "self":
            return Visibility.PRIVATE
        return Visibility.INTERNAL

    if text == "crate":
        return Visibility.INTERNAL

    return Visibility.PUBLIC


def resolve_visibility(
    node: Optional[tree_sitter.Node], source: bytes, default: Visibility
) -> Visibility:
    """Resolve the visibility of an item, field or function node.

    Accepts either the declaration node itself or its `visibility_modifier`.
    """
    if node is None:
        return default
    if node.type != "visibility_modifier":
        node = get_child_by_type(node, "visibility_modifier")
        if node is None:
            return default
    return resolve_visibility_text(node_text(node, source), default)

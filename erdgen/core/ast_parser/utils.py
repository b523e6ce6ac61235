"""Syntax tree helpers.

Node text access, attribute inspection and doc-comment collection shared
by the extractors.
"""

import re
from typing import List, Optional

import tree_sitter

# Sibling node types that attach to the item or field that follows them
ANNOTATION_NODE_TYPES = frozenset({
    "attribute_item",
    "line_comment",
    "block_comment",
})

# Type node kinds syn would call a plain `Type::Path`
PATH_TYPE_NODES = frozenset({
    "type_identifier",
    "primitive_type",
    "scoped_type_identifier",
    "generic_type",
})

_RAW_STRING_RE = re.compile(r'^r(#*)"(.*)"\1$', re.DOTALL)
_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F_]+\}|x[0-9a-fA-F]{2}|\n\s*|.)", re.DOTALL)
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "0": "\0",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def node_text(node: tree_sitter.Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def get_child_by_type(node: tree_sitter.Node, type_name: str) -> Optional[tree_sitter.Node]:
    for child in node.children:
        if child.type == type_name:
            return child
    return None


def preceding_annotations(node: tree_sitter.Node) -> List[tree_sitter.Node]:
    """Collect attributes and comments directly above a node, in source order.

    tree-sitter-rust keeps outer attributes and doc comments as siblings
    of the item they decorate rather than as its children.
    """
    annotations = []
    prev = node.prev_sibling
    while prev is not None and prev.type in ANNOTATION_NODE_TYPES:
        annotations.insert(0, prev)
        prev = prev.prev_sibling
    return annotations


def attribute_path(node: tree_sitter.Node, source: bytes) -> Optional[str]:
    """Return the path of an `attribute_item`, e.g. "doc" for `#[doc = "..."]`."""
    attribute = get_child_by_type(node, "attribute")
    if attribute is None or not attribute.named_children:
        return None
    return node_text(attribute.named_children[0], source)


def attribute_string_value(node: tree_sitter.Node, source: bytes) -> Optional[str]:
    """Return the string value of a name-value attribute, if it has one."""
    attribute = get_child_by_type(node, "attribute")
    if attribute is None:
        return None
    value = attribute.child_by_field_name("value")
    if value is None or value.type not in ("string_literal", "raw_string_literal"):
        return None
    return unquote_string_literal(node_text(value, source))


def unquote_string_literal(text: str) -> str:
    """Decode a Rust string literal (plain or raw) to its value."""
    raw = _RAW_STRING_RE.match(text)
    if raw:
        return raw.group(2)

    body = text[1:-1] if len(text) >= 2 and text[0] == '"' and text[-1] == '"' else text
    return _ESCAPE_RE.sub(_decode_escape, body)


def _decode_escape(match: "re.Match[str]") -> str:
    esc = match.group(1)
    if esc.startswith("u{"):
        return chr(int(esc[2:-1].replace("_", ""), 16))
    if esc.startswith("x"):
        return chr(int(esc[1:], 16))
    if esc.startswith("\n"):
        # Line continuation swallows the newline and leading whitespace
        return ""
    return _SIMPLE_ESCAPES.get(esc, "\\" + esc)


def doc_lines(annotations: List[tree_sitter.Node], source: bytes) -> List[str]:
    """Extract documentation text from doc comments and `#[doc]` attributes.

    Returns one entry per doc attribute or `///` line, which is the same
    granularity the compiler uses when it desugars doc comments.
    """
    lines: List[str] = []
    for node in annotations:
        if node.type == "attribute_item":
            if attribute_path(node, source) == "doc":
                value = attribute_string_value(node, source)
                if value is not None:
                    lines.append(value)

        elif node.type == "line_comment":
            text = node_text(node, source).rstrip("\r\n")
            if text.startswith("///") and not text.startswith("////"):
                lines.append(text[3:])

        elif node.type == "block_comment":
            text = node_text(node, source)
            if text.startswith("/**") and not text.startswith("/***") and len(text) > 4:
                lines.append(text[3:-2])
    return lines


def is_path_type(node: Optional[tree_sitter.Node]) -> bool:
    return node is not None and node.type in PATH_TYPE_NODES


def path_type_name(node: tree_sitter.Node, source: bytes) -> str:
    """Return the last path segment of a path type, without generic arguments.

    `std::vec::Vec<String>` -> "Vec", `u32` -> "u32".
    """
    if node.type == "generic_type":
        inner = node.child_by_field_name("type")
        if inner is not None:
            return path_type_name(inner, source)
    if node.type == "scoped_type_identifier":
        name = node.child_by_field_name("name")
        if name is not None:
            return node_text(name, source)
    return node_text(node, source)

"""Return-type normalization.

Reduces a tree-sitter type node to a small structural representation and
renders it as the flat text shown in method lines:

    &Self            -> &Widget
    *mut Self        -> *const Widget
    [u8; 4]          -> [u8; 4]
    (Option<T>)      -> (Option)

Shapes the diagram cannot represent raise ValueError, which aborts the run.
"""

from dataclasses import dataclass
from typing import Optional, Union

import tree_sitter

from .utils import get_child_by_type, is_path_type, node_text, path_type_name

SELF_TYPE_NAME = "Self"


@dataclass(frozen=True)
class PathType:
    name: str


@dataclass(frozen=True)
class SelfType:
    """Placeholder for `Self`, replaced by the owning class when rendered."""


@dataclass(frozen=True)
class ReferenceType:
    inner: "TypeRef"


@dataclass(frozen=True)
class PointerType:
    inner: "TypeRef"
    qualifier: Optional[str] = None  # "const" for both *const and *mut


@dataclass(frozen=True)
class ParenType:
    inner: "TypeRef"


@dataclass(frozen=True)
class ArrayType:
    inner: "TypeRef"
    length: str


TypeRef = Union[PathType, SelfType, ReferenceType, PointerType, ParenType, ArrayType]


def build_type_ref(node: tree_sitter.Node, source: bytes) -> TypeRef:
    """Convert a type node into a TypeRef.

    Raises:
        ValueError: If the type shape is not supported
    """
    if is_path_type(node):
        name = path_type_name(node, source)
        if name == SELF_TYPE_NAME:
            return SelfType()
        return PathType(name)

    if node.type == "reference_type":
        return ReferenceType(build_type_ref(_inner_type(node, "type"), source))

    if node.type == "pointer_type":
        qualified = any(c.type in ("const", "mutable_specifier") for c in node.children)
        return PointerType(
            build_type_ref(_inner_type(node, "type"), source),
            qualifier="const" if qualified else None,
        )

    if node.type == "parenthesized_type" or _is_parenthesized_tuple(node):
        return ParenType(build_type_ref(node.named_children[0], source))

    if node.type == "array_type":
        length = node.child_by_field_name("length")
        if length is not None and length.type == "integer_literal":
            return ArrayType(
                build_type_ref(_inner_type(node, "element"), source),
                node_text(length, source),
            )

    raise ValueError(
        f"Expected ReturnType! Unsupported return type `{node_text(node, source)}` "
        f"(line {node.start_point.row + 1})"
    )


def render_type(type_ref: TypeRef, self_name: str) -> str:
    """Render a TypeRef, substituting `Self` with `self_name`."""
    if isinstance(type_ref, SelfType):
        return self_name
    if isinstance(type_ref, PathType):
        return type_ref.name
    if isinstance(type_ref, ReferenceType):
        return f"&{render_type(type_ref.inner, self_name)}"
    if isinstance(type_ref, PointerType):
        marker = f"*{type_ref.qualifier} " if type_ref.qualifier else "*"
        return f"{marker}{render_type(type_ref.inner, self_name)}"
    if isinstance(type_ref, ParenType):
        return f"({render_type(type_ref.inner, self_name)})"
    if isinstance(type_ref, ArrayType):
        return f"[{render_type(type_ref.inner, self_name)}; {type_ref.length}]"
    raise TypeError(f"Unknown type reference: {type_ref!r}")


def normalize_return_type(node: tree_sitter.Node, source: bytes, self_name: str) -> str:
    """Normalize a function's return type node to diagram text."""
    return render_type(build_type_ref(node, source), self_name)


def _inner_type(node: tree_sitter.Node, field_name: str) -> tree_sitter.Node:
    inner = node.child_by_field_name(field_name)
    if inner is None:
        raise ValueError(f"Malformed `{node.type}` node: missing `{field_name}`")
    return inner


def _is_parenthesized_tuple(node: tree_sitter.Node) -> bool:
    """`(T)` parses as a one-element tuple type without a trailing comma."""
    return (
        node.type == "tuple_type"
        and len(node.named_children) == 1
        and get_child_by_type(node, ",") is None
    )

"""Recursive item walker.

Walks the top-level items of an expanded source file, dispatching
`struct_item`, `impl_item` and inline `mod_item` nodes to the extractors
and filling the run's DiagramTables. Every other item kind is a no-op.
"""

import logging
from typing import TYPE_CHECKING, Callable, Dict, Iterable, Optional

import tree_sitter

from .field_extractor import FieldExtractor
from .method_extractor import MethodExtractor
from .models import ClassEntry, DiagramTables
from .utils import attribute_path, is_path_type, node_text, path_type_name, preceding_annotations

if TYPE_CHECKING:
    from ..diagrams.formatter import ClassDiagramFormatter

logger = logging.getLogger(__name__)


class ItemWalker:
    """Single-pass, recursive walk over syntax items.

    Args:
        formatter: Diagram dialect used to render lines
        suffix: Qualifying struct-name suffix. Empty accepts every struct.
            The lowercased suffix is also accepted as a marker attribute.
        tables: Tables to fill; a fresh set is created when omitted
        marker: Marker attribute name. Defaults to the lowercased suffix.
    """

    def __init__(
        self,
        formatter: "ClassDiagramFormatter",
        suffix: str,
        tables: Optional[DiagramTables] = None,
        marker: Optional[str] = None,
    ):
        self.formatter = formatter
        self.suffix = suffix
        self.marker = marker if marker is not None else suffix.lower()
        self.tables = tables if tables is not None else DiagramTables()
        self.fields = FieldExtractor(formatter)
        self.methods = MethodExtractor(formatter)

        self._handlers: Dict[str, Callable[[tree_sitter.Node, bytes], None]] = {
            "struct_item": self._visit_struct,
            "impl_item": self._visit_impl,
            "mod_item": self._visit_mod,
        }

    def walk(self, items: Iterable[tree_sitter.Node], source: bytes) -> DiagramTables:
        for item in items:
            handler = self._handlers.get(item.type)
            if handler is not None:
                handler(item, source)
        return self.tables

    def qualifies(self, node: tree_sitter.Node, source: bytes) -> bool:
        """Check whether a struct is selected for the diagram."""
        if not self.suffix:
            return True

        name = node_text(node.child_by_field_name("name"), source)
        if name.endswith(self.suffix):
            return True

        return any(
            a.type == "attribute_item" and attribute_path(a, source) == self.marker
            for a in preceding_annotations(node)
        )

    # =========================================================================
    # Item handlers
    # =========================================================================

    def _visit_struct(self, node: tree_sitter.Node, source: bytes) -> None:
        if not self.qualifies(node, source):
            return

        class_name = node_text(node.child_by_field_name("name"), source)
        entry = self.tables.classes.setdefault(class_name, ClassEntry())
        visibility, lines = self.fields.extract(node, source, self.tables)
        entry.visibility = visibility
        entry.lines.extend(lines)
        logger.debug(f"Discovered class `{class_name}` ({len(lines) - 2} fields)")

    def _visit_impl(self, node: tree_sitter.Node, source: bytes) -> None:
        self_type = node.child_by_field_name("type")
        if not is_path_type(self_type):
            logger.debug(
                f"Skipping impl for unsupported self type "
                f"(line {node.start_point.row + 1})"
            )
            return

        class_name = path_type_name(self_type, source)
        class_vis = self.tables.class_visibility(class_name)
        methods = self.tables.methods.setdefault(class_name, [])
        methods.extend(self.methods.extract(node, source, class_name, class_vis))

    def _visit_mod(self, node: tree_sitter.Node, source: bytes) -> None:
        body = node.child_by_field_name("body")
        if body is None:
            # `mod foo;` lives in another file
            return
        self.walk(body.named_children, source)

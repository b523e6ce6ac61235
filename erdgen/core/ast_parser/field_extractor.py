"""Struct fields -> diagram field lines and relation edges."""

import logging
from typing import TYPE_CHECKING, List, Optional, Tuple

import tree_sitter

from .models import DiagramTables, FieldDescriptor, Visibility
from .relations import canonical_relation, find_relation_annotation
from .utils import (
    ANNOTATION_NODE_TYPES,
    doc_lines,
    is_path_type,
    node_text,
    path_type_name,
    preceding_annotations,
)
from .visibility import resolve_visibility

if TYPE_CHECKING:
    from ..diagrams.formatter import ClassDiagramFormatter

logger = logging.getLogger(__name__)


class FieldExtractor:
    """Extracts the field block of one struct.

    Handles both named fields (`struct A { x: T }`) and tuple structs
    (`struct A(T, U)`, fields named "0", "1", ...). Each field whose doc
    carries a relation annotation contributes at most one relation edge.
    """

    def __init__(self, formatter: "ClassDiagramFormatter"):
        self.formatter = formatter

    def extract(
        self,
        node: tree_sitter.Node,
        source: bytes,
        tables: DiagramTables,
    ) -> Tuple[Visibility, List[str]]:
        """Render a `struct_item` and record its relations.

        Args:
            node: The struct_item node
            source: Raw source bytes
            tables: Run tables; only `relations` is written

        Returns:
            (class visibility, [header, field lines..., terminator])
        """
        class_name = node_text(node.child_by_field_name("name"), source)
        class_vis = resolve_visibility(node, source, Visibility.default())
        lines = [self.formatter.render_class_header(class_name)]

        for field in self.iter_fields(node, source):
            if field is None:
                continue

            vis = self.formatter.render_visibility(field.visibility)
            lines.append(self.formatter.render_field(vis, field.name, field.type_name))

            if field.relation:
                relation = canonical_relation(class_name, field.type_name, field.relation)
                line = self.formatter.render_relation(
                    relation.class_a,
                    relation.cardinality_a,
                    relation.class_b,
                    relation.cardinality_b,
                    relation.label,
                )
                if not tables.add_relation(relation.key, line):
                    logger.debug(f"Relation `{relation.key}` already recorded, dropping duplicate")

        lines.append(self.formatter.render_class_terminator())
        return class_vis, lines

    def iter_fields(self, node: tree_sitter.Node, source: bytes):
        """Yield a FieldDescriptor per field, or None for skipped fields."""
        class_name = node_text(node.child_by_field_name("name"), source)
        body = node.child_by_field_name("body")
        if body is None:
            return

        if body.type == "field_declaration_list":
            for decl in body.named_children:
                if decl.type != "field_declaration":
                    continue
                name = node_text(decl.child_by_field_name("name"), source)
                yield self._describe(
                    class_name,
                    name,
                    decl.child_by_field_name("type"),
                    resolve_visibility(decl, source, Visibility.PRIVATE),
                    preceding_annotations(decl),
                    source,
                )

        elif body.type == "ordered_field_declaration_list":
            for index, (vis_node, type_node, annotations) in enumerate(self._tuple_fields(body)):
                yield self._describe(
                    class_name,
                    str(index),
                    type_node,
                    resolve_visibility(vis_node, source, Visibility.PRIVATE),
                    annotations,
                    source,
                )

    def _describe(
        self,
        class_name: str,
        name: str,
        type_node: Optional[tree_sitter.Node],
        visibility: Visibility,
        annotations: List[tree_sitter.Node],
        source: bytes,
    ) -> Optional[FieldDescriptor]:
        if not is_path_type(type_node):
            logger.warning(
                f"Struct `{class_name}` contains unsupported field type! (field: `{name}`)"
            )
            return None

        return FieldDescriptor(
            name=name,
            visibility=visibility,
            type_name=path_type_name(type_node, source),
            relation=find_relation_annotation(doc_lines(annotations, source)),
        )

    @staticmethod
    def _tuple_fields(body: tree_sitter.Node):
        """Group the flat children of `( ... )` into (vis, type, annotations).

        The grammar lays tuple fields out as a flat sequence of attributes,
        an optional visibility and the type, separated by commas.
        """
        annotations: List[tree_sitter.Node] = []
        vis_node = None
        for child in body.children:
            if child.type in ANNOTATION_NODE_TYPES:
                annotations.append(child)
            elif child.type == "visibility_modifier":
                vis_node = child
            elif child.is_named:
                yield vis_node, child, annotations
                annotations = []
                vis_node = None

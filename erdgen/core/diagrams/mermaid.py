"""Mermaid `classDiagram` formatter."""

from typing import List

from ..ast_parser.models import Parameter, Visibility
from .formatter import ClassDiagramFormatter

_VISIBILITY_MARKERS = {
    Visibility.PUBLIC: "+",
    Visibility.INTERNAL: "~",
    Visibility.PROTECTED: "#",
    Visibility.PRIVATE: "-",
}


class MermaidFormatter(ClassDiagramFormatter):
    """Renders Mermaid class diagram syntax.

    Output shape:
        class GeneModel {
          +String name
        }
        GeneModel "n..n" -- "" OrganismModel : exist_in
        GeneModel: +new(id, name) GeneModel
    """

    def render_class_header(self, name: str) -> str:
        return f" class {name} {{"

    def render_field(self, visibility: str, name: str, type_name: str) -> str:
        return f"  {visibility}{type_name} {name}"

    def render_relation(
        self,
        class_a: str,
        cardinality_a: str,
        class_b: str,
        cardinality_b: str,
        label: str,
    ) -> str:
        return f' {class_a} "{cardinality_a}" -- "{cardinality_b}" {class_b} : {label}'

    def render_class_terminator(self) -> str:
        return " }"

    def render_method(
        self,
        class_name: str,
        visibility: str,
        name: str,
        parameters: List[Parameter],
        return_type: str,
    ) -> str:
        # Mermaid member syntax only has room for parameter names
        params = ", ".join(p.name for p in parameters)
        line = f" {class_name}: {visibility}{name}({params})"
        if return_type:
            line += f" {return_type}"
        return line

    def render_visibility(self, visibility: Visibility) -> str:
        return _VISIBILITY_MARKERS[visibility]

"""erdgen extraction engine: tree-sitter based Rust structure extraction.

Public API:
    parse_source(source) → ParsedSource
    extract_diagram(source, config_or_suffix, formatter) → DiagramTables
"""

from typing import TYPE_CHECKING, Optional, Union

from ..config import DiagramConfig
from .models import (
    ClassEntry,
    DiagramTables,
    FieldDescriptor,
    MethodSignature,
    Parameter,
    RelationAnnotation,
    RelationEntry,
    Visibility,
)
from .rust_parser import ParsedSource, RustParser
from .walker import ItemWalker

if TYPE_CHECKING:
    from ..diagrams.formatter import ClassDiagramFormatter

__all__ = [
    "parse_source",
    "extract_diagram",
    "ItemWalker",
    "RustParser",
    "ParsedSource",
    "ClassEntry",
    "DiagramTables",
    "FieldDescriptor",
    "MethodSignature",
    "Parameter",
    "RelationAnnotation",
    "RelationEntry",
    "Visibility",
]


def parse_source(source_text: str) -> ParsedSource:
    """Parse expanded Rust source.

    Raises:
        ValueError: If the source contains syntax errors
    """
    return RustParser().parse(source_text)


def extract_diagram(
    source_text: str,
    config_or_suffix: Union[DiagramConfig, str],
    formatter: Optional["ClassDiagramFormatter"] = None,
) -> DiagramTables:
    """Parse expanded source and collect classes, relations and methods.

    Args:
        source_text: Fully macro-expanded Rust source
        config_or_suffix: A DiagramConfig, or the qualifying struct-name
            suffix ("" accepts every struct)
        formatter: Diagram dialect. Defaults to Mermaid.

    Returns:
        DiagramTables populated for this run

    Raises:
        ValueError: On syntax errors or unsupported return types
    """
    if formatter is None:
        from ..diagrams.mermaid import MermaidFormatter
        formatter = MermaidFormatter()

    if isinstance(config_or_suffix, DiagramConfig):
        walker = ItemWalker(
            formatter, config_or_suffix.suffix, marker=config_or_suffix.marker
        )
    else:
        walker = ItemWalker(formatter, config_or_suffix)

    parsed = parse_source(source_text)
    return walker.walk(parsed.items, parsed.source)

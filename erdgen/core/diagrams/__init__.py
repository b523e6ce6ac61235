"""Class diagram rendering.

Formatters turn extracted facts into text fragments; the document module
joins them into the output file.

Public API:
  ClassDiagramFormatter: formatter interface
  MermaidFormatter: Mermaid classDiagram dialect
  assemble_document / write_document: final output
"""

from .document import assemble_document, write_document
from .formatter import ClassDiagramFormatter
from .mermaid import MermaidFormatter

__all__ = [
    "ClassDiagramFormatter",
    "MermaidFormatter",
    "assemble_document",
    "write_document",
]

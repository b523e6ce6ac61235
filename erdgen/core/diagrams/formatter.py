"""Base interface for class diagram formatters.

A formatter turns extracted structural facts into text fragments. It only
decides text shape; extraction semantics never depend on it. Formatters
hold no state across calls.
"""

from abc import ABC, abstractmethod
from typing import List

from ..ast_parser.models import Parameter, Visibility


class ClassDiagramFormatter(ABC):
    """Abstract base for diagram dialects."""

    @abstractmethod
    def render_class_header(self, name: str) -> str:
        """Return the line opening a class block."""
        ...

    @abstractmethod
    def render_field(self, visibility: str, name: str, type_name: str) -> str:
        """Return one field line.

        Args:
            visibility: Marker produced by render_visibility()
            name: Field name or positional index
            type_name: Simple type name
        """
        ...

    @abstractmethod
    def render_relation(
        self,
        class_a: str,
        cardinality_a: str,
        class_b: str,
        cardinality_b: str,
        label: str,
    ) -> str:
        """Return one association line between two classes."""
        ...

    @abstractmethod
    def render_class_terminator(self) -> str:
        """Return the line closing a class block."""
        ...

    @abstractmethod
    def render_method(
        self,
        class_name: str,
        visibility: str,
        name: str,
        parameters: List[Parameter],
        return_type: str,
    ) -> str:
        """Return one method line attached to `class_name`."""
        ...

    @abstractmethod
    def render_visibility(self, visibility: Visibility) -> str:
        """Return the dialect's marker for a visibility."""
        ...

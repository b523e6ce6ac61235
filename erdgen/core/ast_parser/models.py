"""Extraction data models.

Defines the aggregate tables filled by the walker and the transient
descriptors passed between the extractors and the formatter.
These are pure data containers, no parsing logic.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class Visibility(Enum):
    """Diagram visibility of a class, field or method."""
    PUBLIC = "public"
    INTERNAL = "internal"
    PROTECTED = "protected"  # No Rust producer; diagram placeholder only
    PRIVATE = "private"

    @classmethod
    def default(cls) -> "Visibility":
        return cls.PRIVATE


@dataclass
class RelationAnnotation:
    """Cardinality and label captured from a `#[relation = ...]` doc line."""

    cardinality: str  # "1..n"
    label: str  # "owns"


@dataclass
class RelationEntry:
    """A canonicalized relation between two classes.

    `class_a` always sorts before (or equals) `class_b`; the declared
    cardinality sits on whichever side declared the relation.
    """

    key: str  # "AModel-BModel"
    class_a: str
    cardinality_a: str
    class_b: str
    cardinality_b: str
    label: str


@dataclass
class FieldDescriptor:
    """A single struct field as seen by the field extractor."""

    name: str  # Identifier, or positional index for tuple structs
    visibility: Visibility
    type_name: str  # Last path segment of the field type
    relation: Optional[RelationAnnotation] = None


@dataclass
class Parameter:
    name: str
    type_name: str


@dataclass
class MethodSignature:
    """A method ready for rendering."""

    name: str
    visibility: Visibility
    parameters: List[Parameter] = field(default_factory=list)
    return_type: str = ""


@dataclass
class ClassEntry:
    """Rendered field block (header + fields + terminator) of one class."""

    visibility: Visibility = Visibility.PRIVATE
    lines: List[str] = field(default_factory=list)


@dataclass
class DiagramTables:
    """The three aggregate tables populated during one run.

    Dicts preserve insertion order; final assembly sorts keys so the
    output does not depend on discovery order.
    """

    classes: Dict[str, ClassEntry] = field(default_factory=dict)
    relations: Dict[str, str] = field(default_factory=dict)  # canonical key -> rendered line
    methods: Dict[str, List[str]] = field(default_factory=dict)

    def class_visibility(self, name: str) -> Visibility:
        entry = self.classes.get(name)
        return entry.visibility if entry else Visibility.default()

    def add_relation(self, key: str, line: str) -> bool:
        """Insert a relation line unless the key exists. First write wins."""
        if key in self.relations:
            return False
        self.relations[key] = line
        return True

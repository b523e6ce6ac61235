"""Relation annotations on struct fields.

A field documented with

    #[doc = "`#[relation = 1..n : owns]`"]

(or the equivalent `///` comment) declares an edge between its struct
and the field's type.
"""

import re
from typing import Iterable, Optional

from ..constants import RELATION_KEY_SEPARATOR, RELATION_PATTERN
from .models import RelationAnnotation, RelationEntry

RELATION_RE = re.compile(RELATION_PATTERN)


def parse_relation_annotation(text: str) -> Optional[RelationAnnotation]:
    """Parse a single doc line. Returns None when it is not an annotation."""
    match = RELATION_RE.match(text.strip())
    if not match:
        return None
    cardinality, label = match.groups()
    return RelationAnnotation(cardinality=cardinality.strip(), label=label.strip())


def find_relation_annotation(lines: Iterable[str]) -> Optional[RelationAnnotation]:
    """Return the first relation annotation among a field's doc lines."""
    for line in lines:
        annotation = parse_relation_annotation(line)
        if annotation:
            return annotation
    return None


def relation_key(class_a: str, class_b: str) -> str:
    first, second = sorted((class_a, class_b))
    return f"{first}{RELATION_KEY_SEPARATOR}{second}"


def canonical_relation(
    class_name: str, type_name: str, annotation: RelationAnnotation
) -> RelationEntry:
    """Place a declared relation on the canonical (sorted) pair.

    The declared cardinality stays on the declaring class's side; the
    field type's side is blank.
    """
    key = relation_key(class_name, type_name)
    if class_name < type_name:
        return RelationEntry(
            key=key,
            class_a=class_name,
            cardinality_a=annotation.cardinality,
            class_b=type_name,
            cardinality_b="",
            label=annotation.label,
        )
    return RelationEntry(
        key=key,
        class_a=type_name,
        cardinality_a="",
        class_b=class_name,
        cardinality_b=annotation.cardinality,
        label=annotation.label,
    )

"""Final document assembly.

Joins the run's tables into one Mermaid document:

    ---
    title: ER Diagram
    ---
    classDiagram
    <relations, sorted by canonical key>
    <per class, sorted by name: field block, then method lines>

Documents written to an embedding format (`.md`) are wrapped in a fenced
code block.
"""

import logging
from pathlib import Path
from typing import List, Union

from ..ast_parser.models import DiagramTables
from ..constants import DIAGRAM_KEYWORD, FENCE_CLOSE, FENCE_OPEN

logger = logging.getLogger(__name__)


def assemble_lines(tables: DiagramTables, title: str) -> List[str]:
    """Build the document lines (front matter + diagram body)."""
    lines = [
        "---",
        f"title: {title}",
        "---",
        DIAGRAM_KEYWORD,
    ]

    for key in sorted(tables.relations):
        lines.append(tables.relations[key])

    for class_name in sorted(tables.classes):
        lines.extend(tables.classes[class_name].lines)
        lines.extend(tables.methods.get(class_name, []))

    orphaned = [
        name for name, methods in tables.methods.items()
        if methods and name not in tables.classes
    ]
    if orphaned:
        logger.debug(f"Methods without a discovered class were not rendered: {', '.join(orphaned)}")

    return lines


def assemble_document(tables: DiagramTables, title: str, embed: bool = False) -> str:
    """Render the full output text.

    Args:
        tables: Populated run tables
        title: Diagram title for the front matter
        embed: Wrap the diagram in a ```mermaid fence

    Returns:
        Document text without a trailing newline
    """
    text = "\n".join(assemble_lines(tables, title))
    if embed:
        text = f"{FENCE_OPEN}\n{text}\n{FENCE_CLOSE}"
    return text


def write_document(path: Union[str, Path], text: str) -> None:
    """Write the document as UTF-8, replacing any existing file."""
    Path(path).write_text(text, encoding="utf-8")
    logger.info(f"Wrote diagram to {path}")

"""Rust parser using tree-sitter.

Parses fully macro-expanded Rust source into a syntax tree. Any syntax
error aborts the run; there is no partial-tree mode.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import tree_sitter
import tree_sitter_rust

logger = logging.getLogger(__name__)

# Create the Language object once (wraps the PyCapsule)
_RUST_LANGUAGE = tree_sitter.Language(tree_sitter_rust.language())


@dataclass
class ParsedSource:
    """A parsed file: the tree plus the bytes its offsets refer to."""

    tree: tree_sitter.Tree
    source: bytes

    @property
    def items(self) -> List[tree_sitter.Node]:
        """Top-level item nodes (attributes and comments included)."""
        return list(self.tree.root_node.named_children)


class RustParser:
    """tree-sitter based Rust parser."""

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _RUST_LANGUAGE

    def parse(self, source_text: str) -> ParsedSource:
        """Parse Rust source text.

        Args:
            source_text: Expanded source code

        Returns:
            ParsedSource wrapping the tree

        Raises:
            ValueError: If the source contains syntax errors
        """
        source_bytes = source_text.encode("utf-8")
        parser = tree_sitter.Parser(self.get_tree_sitter_language())
        tree = parser.parse(source_bytes)

        if tree.root_node.has_error:
            error = self._first_error(tree.root_node)
            if error is not None:
                row, column = error.start_point.row + 1, error.start_point.column + 1
                raise ValueError(f"Failed to parse expanded source at line {row}, column {column}")
            raise ValueError("Failed to parse expanded source")

        logger.debug(
            f"Parsed {len(source_bytes)} bytes, "
            f"{len(tree.root_node.named_children)} top-level nodes"
        )
        return ParsedSource(tree=tree, source=source_bytes)

    def parse_file(self, file_path: str) -> ParsedSource:
        """Read and parse a source file.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the source contains syntax errors
        """
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            source_text = f.read()
        return self.parse(source_text)

    @staticmethod
    def _first_error(node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
        """Depth-first search for the first ERROR or MISSING node."""
        if node.type == "ERROR" or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = RustParser._first_error(child)
                if found is not None:
                    return found
        return None

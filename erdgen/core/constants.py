"""Shared constants for erdgen.

Defaults for the configuration surface and the fixed literals of the
annotation convention and output document.
"""

# =============================================================================
# Configuration defaults
# =============================================================================

# Structs whose name ends with this suffix are included in the diagram.
# The lowercased suffix doubles as the marker attribute (`#[model]`).
DEFAULT_SUFFIX = "Model"

DEFAULT_DIRECTORY = "./"

DEFAULT_OUTPUT = "ER.mmd"

DEFAULT_TITLE = "ER Diagram"

# Environment variable read for the default log level
LOG_LEVEL_ENV = "ERDGEN_LOG_LEVEL"

# =============================================================================
# Annotation convention
# =============================================================================

# `#[relation = <cardinality> : <label>]` wrapped in backticks inside a doc
# comment. The cardinality capture is greedy: the split is at the last colon.
RELATION_PATTERN = r"^`#\[relation\s*=\s*(.+)\s*:\s*(.+)\]`$"

RELATION_KEY_SEPARATOR = "-"

# =============================================================================
# Source expansion
# =============================================================================

CARGO_EXPAND_COMMAND = ["cargo", "expand", "--release"]

# =============================================================================
# Output document
# =============================================================================

# Output extensions that get the diagram wrapped in a fenced code block
EMBED_EXTENSIONS = frozenset({".md"})

DIAGRAM_KEYWORD = "classDiagram"

FENCE_OPEN = "```mermaid"
FENCE_CLOSE = "```"

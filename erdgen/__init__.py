"""erdgen: Mermaid ER/class diagrams from Rust source."""

__version__ = "0.1.0"

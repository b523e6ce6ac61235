import argparse
import logging
import os
import sys
from typing import List, Optional

from .core.ast_parser import ItemWalker, RustParser
from .core.ast_parser.bridges import CargoExpandBridge
from .core.config import DiagramConfig
from .core.constants import (
    DEFAULT_OUTPUT,
    DEFAULT_SUFFIX,
    DEFAULT_TITLE,
    LOG_LEVEL_ENV,
)
from .core.diagrams import MermaidFormatter, assemble_document, write_document


def setup_logging(log_level: str = "INFO") -> None:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="erdgen",
        description="Build an Entity Relation (ER) diagram from Rust code",
    )
    parser.add_argument(
        "-s", "--suffix",
        type=str,
        default=DEFAULT_SUFFIX,
        help="Struct identifier name suffix or attribute flag to be included during parsing"
    )
    parser.add_argument(
        "-d", "--dir",
        type=str,
        default=None,
        help="Working directory (crate root)"
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help="Output file name, relative to the working directory. Use `.mmd` or `.md`"
    )
    parser.add_argument(
        "-t", "--title",
        type=str,
        default=DEFAULT_TITLE,
        help="Diagram title"
    )
    parser.add_argument(
        "-i", "--input",
        type=str,
        default=None,
        help="Read already-expanded source from this file instead of running cargo expand"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.getenv(LOG_LEVEL_ENV, "INFO").upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> DiagramConfig:
    directory = args.dir or "./"
    if not directory.endswith("/"):
        directory += "/"
    return DiagramConfig(
        suffix=args.suffix,
        directory=directory,
        output=args.output,
        title=args.title,
        input_file=args.input,
    )


def run(config: DiagramConfig) -> str:
    """Generate the diagram for one crate and write it.

    Returns:
        The document text that was written

    Raises:
        FileNotFoundError: If the working directory does not exist
        RuntimeError: If cargo expand fails
        ValueError: On syntax errors or unsupported return types
    """
    config.validate_directory()

    logger.debug(f"suffix: {config.suffix}")
    logger.debug(f"dir: {config.directory_path}")
    logger.debug(f"output: {config.output_path}")

    parser = RustParser()
    if config.input_file:
        logger.info(f"Reading expanded source from {config.input_file}")
        parsed = parser.parse_file(config.input_file)
    else:
        bridge = CargoExpandBridge()
        if not bridge.is_available():
            raise RuntimeError("cargo is not installed or not in PATH")
        parsed = parser.parse(bridge.expand(config.directory_path))

    formatter = MermaidFormatter()
    walker = ItemWalker(formatter, config.suffix, marker=config.marker)
    tables = walker.walk(parsed.items, parsed.source)
    logger.info(
        f"Found {len(tables.classes)} classes, {len(tables.relations)} relations"
    )

    document = assemble_document(tables, config.title, embed=config.embed)
    write_document(config.output_path, document)
    return document


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for erdgen."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    config = config_from_args(args)
    try:
        run(config)
    except (OSError, RuntimeError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

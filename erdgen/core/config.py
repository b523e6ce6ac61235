"""Run configuration."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_DIRECTORY,
    DEFAULT_OUTPUT,
    DEFAULT_SUFFIX,
    DEFAULT_TITLE,
    EMBED_EXTENSIONS,
)


class DiagramConfig(BaseModel):
    """Settings for one diagram run."""

    suffix: str = Field(
        default=DEFAULT_SUFFIX,
        description="Struct name suffix or marker attribute to include; empty includes all",
    )
    directory: str = Field(default=DEFAULT_DIRECTORY, description="Crate working directory")
    output: str = Field(default=DEFAULT_OUTPUT, description="Output file name (.mmd or .md)")
    title: str = Field(default=DEFAULT_TITLE, description="Diagram title")
    input_file: Optional[str] = Field(
        default=None,
        description="Already-expanded source file; skips cargo expand",
    )

    @property
    def marker(self) -> str:
        """Attribute name that marks a struct for inclusion (`#[model]`)."""
        return self.suffix.lower()

    @property
    def directory_path(self) -> Path:
        return Path(self.directory)

    @property
    def output_path(self) -> Path:
        return self.directory_path / self.output

    @property
    def embed(self) -> bool:
        return self.output_path.suffix.lower() in EMBED_EXTENSIONS

    def validate_directory(self) -> None:
        """Raises FileNotFoundError if the working directory is missing."""
        if not self.directory_path.is_dir():
            raise FileNotFoundError(f"Directory does not exist! ({self.directory})")

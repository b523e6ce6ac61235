"""cargo-expand bridge.

Runs `cargo expand --release` in a crate directory and returns the fully
macro-expanded source of the crate as a single file.

Requires: a Rust toolchain + `cargo install cargo-expand`.
"""

import logging
import shutil
from pathlib import Path
from typing import Union

from ...constants import CARGO_EXPAND_COMMAND
from .base import SubprocessBridge

logger = logging.getLogger(__name__)


class CargoExpandBridge(SubprocessBridge):
    """Bridge to `cargo expand`."""

    def is_available(self) -> bool:
        if shutil.which(CARGO_EXPAND_COMMAND[0]) is None:
            logger.info(
                "cargo not found in PATH; install a Rust toolchain and "
                "`cargo install cargo-expand`, or pass an expanded file with --input"
            )
            return False
        return True

    def expand(self, directory: Union[str, Path]) -> str:
        """Expand the crate rooted at `directory`.

        Raises:
            RuntimeError: If cargo cannot be launched or expansion fails
        """
        logger.info(f"Expanding crate in {directory}")
        content = self._run_tool(list(CARGO_EXPAND_COMMAND), cwd=directory)
        logger.debug(f"cargo expand produced {len(content)} chars")
        return content

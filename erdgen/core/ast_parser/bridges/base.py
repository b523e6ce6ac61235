"""Base class for subprocess-based source bridges.

Each bridge wraps an external CLI tool that turns a source tree into text
the parser can consume. The run blocks until the tool exits and captures
its whole output. Failures are fatal: there is no fallback and no retry.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


class SubprocessBridge(ABC):
    """Abstract base for subprocess-backed bridges."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the tool can be found on PATH."""
        ...

    def _run_tool(
        self,
        cmd: List[str],
        cwd: Optional[Union[str, Path]] = None,
    ) -> str:
        """Run a CLI tool and return its stdout.

        Args:
            cmd: Command and arguments to execute
            cwd: Working directory for the tool

        Returns:
            Decoded stdout

        Raises:
            RuntimeError: If the tool cannot be launched or exits nonzero.
                The message is the tool's stderr, verbatim.
        """
        logger.debug(f"Running {' '.join(cmd)} in {cwd or '.'}")
        try:
            proc = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
            )
        except FileNotFoundError as e:
            raise RuntimeError(f"Bridge tool not found: {cmd[0]}") from e
        except OSError as e:
            raise RuntimeError(f"Failed to launch {cmd[0]}: {e}") from e

        stdout = proc.stdout.decode("utf-8", errors="replace")
        stderr = proc.stderr.decode("utf-8", errors="replace")

        if proc.returncode != 0:
            logger.error(stderr)
            raise RuntimeError(stderr)

        return stdout

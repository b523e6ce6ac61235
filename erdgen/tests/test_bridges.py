"""Tests for the cargo-expand subprocess bridge."""

from unittest.mock import MagicMock, patch

import pytest
from erdgen.core.ast_parser.bridges import CargoExpandBridge

_RUN = "erdgen.core.ast_parser.bridges.base.subprocess.run"
_WHICH = "erdgen.core.ast_parser.bridges.cargo_expand.shutil.which"


def _completed(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b"") -> MagicMock:
    proc = MagicMock()
    proc.returncode = returncode
    proc.stdout = stdout
    proc.stderr = stderr
    return proc


class TestCargoExpandBridge:
    def test_expand_returns_stdout(self, tmp_path):
        with patch(_RUN, return_value=_completed(stdout=b"struct AModel;\n")) as run:
            content = CargoExpandBridge().expand(tmp_path)

        assert content == "struct AModel;\n"
        args, kwargs = run.call_args
        assert args[0] == ["cargo", "expand", "--release"]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["capture_output"] is True

    def test_invalid_utf8_is_replaced(self, tmp_path):
        with patch(_RUN, return_value=_completed(stdout=b"struct A\xff;")):
            content = CargoExpandBridge().expand(tmp_path)
        assert content == "struct A�;"

    def test_nonzero_exit_raises_stderr_verbatim(self, tmp_path):
        stderr = b"error: no such command: `expand`\n"
        with patch(_RUN, return_value=_completed(returncode=101, stderr=stderr)):
            with pytest.raises(RuntimeError) as exc_info:
                CargoExpandBridge().expand(tmp_path)
        assert str(exc_info.value) == "error: no such command: `expand`\n"

    def test_missing_cargo_raises(self, tmp_path):
        with patch(_RUN, side_effect=FileNotFoundError("cargo")):
            with pytest.raises(RuntimeError, match="Bridge tool not found: cargo"):
                CargoExpandBridge().expand(tmp_path)

    def test_is_available(self):
        with patch(_WHICH, return_value="/usr/bin/cargo"):
            assert CargoExpandBridge().is_available() is True
        with patch(_WHICH, return_value=None):
            assert CargoExpandBridge().is_available() is False

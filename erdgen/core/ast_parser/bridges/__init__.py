# Subprocess bridges that produce parseable source.
# cargo-expand resolves macros and attributes so the parser sees the
# same items the compiler does.

from .base import SubprocessBridge
from .cargo_expand import CargoExpandBridge

__all__ = ["SubprocessBridge", "CargoExpandBridge"]

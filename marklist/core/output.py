# marklist/core/output.py
# Output levels & the swappable output manager every layer logs through
# * No console or file I/O here; marklist/cli/output_manager.py holds the Rich implementation

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional, Protocol, runtime_checkable


class OutputLevel(IntEnum):
    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    # only reachable in dev mode
    DEBUG = 3


# * What marker, lookup & CLI code may call on the active manager
@runtime_checkable
class OutputInterface(Protocol):
    def get_level(self) -> OutputLevel: ...

    def is_debug_enabled(self) -> bool: ...

    def is_verbose_enabled(self) -> bool: ...

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None: ...

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None, **kwargs: Any
    ) -> None: ...

    def warning(self, msg: str, **kwargs: Any) -> None: ...

    def start_session(self, label: str = "") -> None: ...

    def end_session(self) -> None: ...


# * Drops everything; active until `init_verbose` registers the Rich manager
class NullOutputManager:
    level = OutputLevel.NORMAL

    def get_level(self) -> OutputLevel:
        return self.level

    def is_debug_enabled(self) -> bool:
        return False

    def is_verbose_enabled(self) -> bool:
        return False

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        return None

    def verbose(
        self, msg: str, category: str = "INFO", detail: Optional[str] = None, **kwargs: Any
    ) -> None:
        return None

    def warning(self, msg: str, **kwargs: Any) -> None:
        return None

    def start_session(self, label: str = "") -> None:
        return None

    def end_session(self) -> None:
        return None


_active: OutputInterface = NullOutputManager()


def set_output_manager(manager: OutputInterface) -> None:
    global _active
    _active = manager


def get_output_manager() -> OutputInterface:
    return _active


# back to the null manager; used by CLI teardown & the test suite
def reset_output_manager() -> None:
    set_output_manager(NullOutputManager())

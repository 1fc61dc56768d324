# marklist/cli/output_manager.py
# Rich-backed output manager: console output by level plus optional plain-text log file

# * Registered through core.output.set_output_manager() when the CLI starts
# * May import from mark_io & config; core modules only see the protocol

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, TextIO

from ..core.output import OutputLevel


class OutputManager:

    def __init__(self) -> None:
        self._level = OutputLevel.NORMAL
        self._dev_mode = False
        self._started_at: float | None = None
        self._log_path: Path | None = None
        self._log: TextIO | None = None

    def initialize(
        self,
        requested_level: OutputLevel = OutputLevel.NORMAL,
        dev_mode: bool = False,
        quiet: bool = False,
        log_file: Path | None = None,
    ) -> None:
        self._dev_mode = dev_mode
        self._level = self._effective_level(requested_level, dev_mode, quiet)
        self._started_at = time.time()
        self._open_log(log_file)

    # quiet wins; DEBUG is only reachable in dev mode
    @staticmethod
    def _effective_level(
        requested: OutputLevel, dev_mode: bool, quiet: bool
    ) -> OutputLevel:
        if quiet:
            return OutputLevel.QUIET
        ceiling = OutputLevel.DEBUG if dev_mode else OutputLevel.VERBOSE
        return min(requested, ceiling)

    @property
    def log_path(self) -> Path | None:
        return self._log_path

    # ===== LEVEL QUERIES =====

    def get_level(self) -> OutputLevel:
        return self._level

    def is_debug_enabled(self) -> bool:
        return self._level >= OutputLevel.DEBUG

    def is_verbose_enabled(self) -> bool:
        return self._level >= OutputLevel.VERBOSE

    # ===== OUTPUT =====

    def debug(self, msg: str, category: str = "DEBUG", **kwargs: Any) -> None:
        if not self.is_debug_enabled():
            return
        from ..mark_io.console import console

        console.print(f"[debug]\\[{category}][/] {msg}", **kwargs)
        self._log_line(f"[{self._elapsed()}] [{category}] {msg}")

    def verbose(
        self,
        msg: str,
        category: str = "INFO",
        detail: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        if not self.is_verbose_enabled():
            return
        from ..mark_io.console import console

        stamp = self._elapsed()
        console.print(
            f"[dim][{stamp}][/] [marklist.accent2]\\[{category}][/] {msg}", **kwargs
        )
        self._log_line(f"[{stamp}] [{category}] {msg}")
        for line in (detail or "").splitlines():
            console.print(f"  [dim]{line}[/]")
            self._log_line(f"  {line}")

    def warning(self, msg: str, **kwargs: Any) -> None:
        # warnings show even in quiet mode
        from ..mark_io.console import console

        console.print(f"[warning]Warning:[/] {msg}", **kwargs)
        self._log_line(f"[{self._elapsed()}] [WARNING] {msg}")

    # ===== SESSIONS =====

    def start_session(self, label: str = "") -> None:
        self._started_at = time.time()
        self._log_line("=" * 60)
        self._log_line(f"Session started: {datetime.now().isoformat()}")
        if label:
            self._log_line(f"Command: {label}")
        self._log_line(f"Level: {self._level.name}")
        self._log_line("=" * 60)

    def end_session(self) -> None:
        self._log_line(f"Session ended: {datetime.now().isoformat()}")
        self.cleanup()

    # ===== LOG FILE =====

    def _elapsed(self) -> str:
        if self._started_at is None:
            return "0.00s"
        return f"{time.time() - self._started_at:.2f}s"

    def _open_log(self, log_file: Path | None) -> None:
        self.cleanup()
        self._log_path = None
        if log_file is None:
            return
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._log = open(log_file, "a", encoding="utf-8")
            self._log_path = log_file
        except OSError as e:
            from ..mark_io.console import console

            console.print(f"[warning]Warning:[/] cannot open log file {log_file}: {e}")

    def _log_line(self, msg: str) -> None:
        if self._log is None:
            return
        self._log.write(f"{msg}\n")
        self._log.flush()

    def cleanup(self) -> None:
        if self._log is not None:
            self._log.close()
            self._log = None

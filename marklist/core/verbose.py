# marklist/core/verbose.py
# Verbose logging helpers - thin wrappers over the registered OutputManager for lookups, file I/O & mark operations

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import OutputLevel, get_output_manager, set_output_manager


# * Initialize verbose logging for a CLI session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
    quiet: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    # ! lazy import keeps core free of a hard CLI dependency
    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        quiet=quiet,
        log_file=log_file,
    )
    set_output_manager(manager)


def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log a lookup request before the provider is called
def vlog_lookup_request(provider: str, query: str) -> None:
    get_output_manager().verbose(f"Lookup via {provider}", "LOOKUP", f"Query: {query!r}")


# * Log a lookup outcome
def vlog_lookup_response(
    provider: str,
    result_length: int,
    success: bool,
    duration_ms: float | None = None,
    error: str | None = None,
) -> None:
    duration_str = f" in {duration_ms:.0f}ms" if duration_ms else ""
    if success:
        get_output_manager().verbose(
            f"Result from {provider}{duration_str}",
            "LOOKUP",
            f"Result: {result_length:,} chars",
        )
    else:
        get_output_manager().verbose(
            f"[red]No result from {provider}[/]{duration_str}",
            "LOOKUP",
            f"Reason: {error or 'empty response'}",
        )


def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")


def vlog_file_write(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Write: {path}{size_str}", "FILE")


# * Log a mark mutation on a buffer line (1-based for humans)
def vlog_mark(change: str, line: int, detail: str | None = None) -> None:
    get_output_manager().verbose(f"{change} at line {line + 1}", "MARK", detail)


def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


def cleanup_verbose() -> None:
    get_output_manager().end_session()

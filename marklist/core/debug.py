# marklist/core/debug.py
# Dev-mode tracing for lookups & HTTP calls; silent unless the DEBUG level is active

from typing import Any, Mapping, Optional

from .output import get_output_manager


def is_debug_enabled() -> bool:
    return get_output_manager().is_debug_enabled()


def debug_print(message: str, category: str = "DEBUG") -> None:
    get_output_manager().debug(message, category)


# * One line per strategy tried by the favourite search
def debug_strategy(name: str, query: str, answered: bool) -> None:
    outcome = "answered" if answered else "had no answer for"
    debug_print(f"{name} {outcome} {query!r}", "LOOKUP")


def debug_http(url: str, params: Optional[Mapping[str, Any]] = None) -> None:
    query = "&".join(f"{k}={v}" for k, v in (params or {}).items())
    debug_print(f"GET {url}" + (f"?{query}" if query else ""), "HTTP")


# * Exceptions that are absorbed (failed strategies, unexpected CLI errors) surface here
def debug_error(error: Exception, context: str = "") -> None:
    prefix = f"{context} - " if context else ""
    debug_print(f"{prefix}Exception: {type(error).__name__}: {error}", "ERROR")

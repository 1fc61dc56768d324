# marklist/cli/decorators.py
# CLI decorators for error handling

import functools
from typing import Any, Callable, TypeVar, cast

import click

from ..core.exceptions import (
    ConfigurationError,
    DocumentError,
    FileOperationError,
    JSONParsingError,
    LookupProviderError,
    MarklistError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])

# most specific first; MarklistError catches the rest of the hierarchy
_ERROR_TITLES: tuple[tuple[type[MarklistError], str], ...] = (
    (JSONParsingError, "JSON Parsing Error"),
    (ConfigurationError, "Configuration Error"),
    (LookupProviderError, "Lookup Error"),
    (DocumentError, "Document Error"),
    (FileOperationError, "File Error"),
    (MarklistError, "Error"),
)


# * Decorator for handling Marklist errors in CLI commands w/ Rich output
def handle_marklist_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! lazy import to avoid circular dependencies
        from ..core.debug import debug_error
        from ..mark_io.console import console

        try:
            return func(*args, **kwargs)
        except MarklistError as e:
            title = next(t for cls, t in _ERROR_TITLES if isinstance(e, cls))
            debug_error(e, func.__name__)
            console.print(format_error_message(title, str(e)))
            raise SystemExit(1)
        except (click.exceptions.ClickException, click.exceptions.Exit):
            # typer usage errors & explicit exits keep their own handling
            raise
        except Exception as e:
            debug_error(e, func.__name__)
            console.print(format_error_message("Unexpected Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)

# marklist/lookup/dispatch.py
# Favourite-search policy: ordered fallback across lookup strategies, first non-empty result wins
# * Pure policy module - strategies do their own I/O; nothing here imports HTTP or browser code

from __future__ import annotations

from typing import Callable, Sequence

from ..core.debug import debug_error, debug_strategy

# * A strategy takes a query & returns result text; "" (or an exception) means no result
LookupStrategy = Callable[[str], str]


def favourite_search(query: str | None, strategies: Sequence[LookupStrategy]) -> str:
    if not query:
        return ""

    for strategy in strategies:
        name = getattr(strategy, "provider_name", None) or getattr(
            strategy, "__name__", repr(strategy)
        )
        # ! any failure is "no result" for this strategy; the next one is tried
        try:
            result = strategy(query)
        except Exception as e:
            debug_error(e, f"Lookup strategy {name} failed")
            continue
        debug_strategy(name, query, bool(result))
        if result:
            return result

    return ""

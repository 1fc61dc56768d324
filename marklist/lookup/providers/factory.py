# marklist/lookup/providers/factory.py
# Lookup provider registry & construction from settings

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Type

from .base import BaseLookup
from ...core.exceptions import UnknownProviderError

if TYPE_CHECKING:
    from ...config.settings import MarklistSettings


# lazy provider classes (tests can monkeypatch these); keeps requests out of import time
def _get_duckduckgo_class() -> Type[BaseLookup]:
    from .duckduckgo import DuckDuckGoLookup

    return DuckDuckGoLookup


def _get_wikipedia_class() -> Type[BaseLookup]:
    from .wikipedia import WikipediaLookup

    return WikipediaLookup


def _get_browser_class() -> Type[BaseLookup]:
    from .browser import BrowserLookup

    return BrowserLookup


def _get_lexin_class() -> Type[BaseLookup]:
    from .browser import LexinLookup

    return LexinLookup


# * Registry mapping provider names to class factories
LOOKUP_REGISTRY: dict[str, Callable[[], Type[BaseLookup]]] = {
    "duckduckgo": _get_duckduckgo_class,
    "wikipedia": _get_wikipedia_class,
    "browser": _get_browser_class,
    "lexin": _get_lexin_class,
}

# default favourites order: abstract A, abstract B, browser fallback
DEFAULT_FAVOURITES = ["duckduckgo", "wikipedia", "browser"]


def available_providers() -> list[str]:
    return list(LOOKUP_REGISTRY)


# * Instantiate a provider w/ its settings-derived options
def build_lookup(name: str, settings: "MarklistSettings | None" = None) -> BaseLookup:
    factory = LOOKUP_REGISTRY.get(name)
    if factory is None:
        known = ", ".join(available_providers())
        raise UnknownProviderError(
            f"Unknown lookup provider '{name}'. Available: {known}", name
        )

    if settings is None:
        return factory()()

    options: dict[str, object] = {
        "timeout": settings.lookup_timeout,
        "user_agent": settings.user_agent,
    }
    if name == "wikipedia":
        options["lang"] = settings.wikipedia_lang
    elif name == "lexin":
        options["host"] = settings.lexin_host
    return factory()(**options)


# * Ordered favourites chain for favourite_search
def favourite_strategies(settings: "MarklistSettings | None" = None) -> list[BaseLookup]:
    names = settings.favourites if settings is not None else DEFAULT_FAVOURITES
    return [build_lookup(name, settings) for name in names]

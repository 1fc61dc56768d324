# marklist/lookup/providers/__init__.py
# Lookup providers: DuckDuckGo & Wikipedia abstracts, browser search, Lexin dictionary

from .base import BaseLookup
from .factory import (
    LOOKUP_REGISTRY,
    DEFAULT_FAVOURITES,
    available_providers,
    build_lookup,
    favourite_strategies,
)

__all__ = [
    "BaseLookup",
    "LOOKUP_REGISTRY",
    "DEFAULT_FAVOURITES",
    "available_providers",
    "build_lookup",
    "favourite_strategies",
]

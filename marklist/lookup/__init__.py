# marklist/lookup/__init__.py
# Item lookups: favourite-search fallback policy & provider implementations

from .dispatch import LookupStrategy, favourite_search
from .types import LookupResult

__all__ = [
    "LookupStrategy",
    "favourite_search",
    "LookupResult",
]

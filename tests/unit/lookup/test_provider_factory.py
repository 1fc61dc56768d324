# tests/unit/lookup/test_provider_factory.py
# Unit tests for the lookup provider registry & factory

import pytest

from marklist.config.settings import MarklistSettings
from marklist.core.exceptions import UnknownProviderError
from marklist.lookup.providers import (
    DEFAULT_FAVOURITES,
    available_providers,
    build_lookup,
    favourite_strategies,
)
from marklist.lookup.providers.browser import LexinLookup
from marklist.lookup.providers.wikipedia import WikipediaLookup


# * Registry lists every provider
def test_available_providers():
    assert available_providers() == ["duckduckgo", "wikipedia", "browser", "lexin"]


# * Unknown names raise UnknownProviderError
def test_unknown_provider():
    with pytest.raises(UnknownProviderError) as exc:
        build_lookup("altavista")
    assert exc.value.provider == "altavista"


# * Settings flow into the provider options
def test_settings_applied():
    settings = MarklistSettings(
        lookup_timeout=2.5, wikipedia_lang="nn", lexin_host="lexin.example", user_agent="ua"
    )
    wiki = build_lookup("wikipedia", settings)
    assert isinstance(wiki, WikipediaLookup)
    assert (wiki.timeout, wiki.lang, wiki.user_agent) == (2.5, "nn", "ua")

    lexin = build_lookup("lexin", settings)
    assert isinstance(lexin, LexinLookup)
    assert lexin.host == "lexin.example"


# * Favourites follow the configured order
def test_favourite_strategies_order():
    assert [s.provider_name for s in favourite_strategies()] == DEFAULT_FAVOURITES

    settings = MarklistSettings(favourites=["wikipedia", "lexin"])
    assert [s.provider_name for s in favourite_strategies(settings)] == ["wikipedia", "lexin"]

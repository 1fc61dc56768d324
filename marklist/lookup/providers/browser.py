# marklist/lookup/providers/browser.py
# Browser-opening lookups: web search fallback & the Lexin dictionary

from __future__ import annotations

import webbrowser
from urllib.parse import quote_plus

from .base import BaseLookup, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ...core.exceptions import ProviderError

DEFAULT_SEARCH_URL = "https://duckduckgo.com/?q={query}"

DEFAULT_LEXIN_HOST = "lexin.udir.no"
LEXIN_URL_TEMPLATE = (
    "http://{host}/lexin.html?&dict=nbo-nny-maxi"
    "&checked-languages=E&checked-languages=N&checked-languages=NNY"
    "&search={query}"
)


# * Opens a URL built from the query; the result is the URL that was opened
class BrowserLookup(BaseLookup):

    provider_name = "browser"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        url_template: str = DEFAULT_SEARCH_URL,
    ):
        super().__init__(timeout=timeout, user_agent=user_agent)
        self.url_template = url_template

    def build_url(self, query: str) -> str:
        return self.url_template.format(query=quote_plus(query))

    def make_call(self, query: str) -> str:
        url = self.build_url(query)
        try:
            opened = webbrowser.open(url, new=2)
        except webbrowser.Error as e:
            raise ProviderError(f"Could not open browser: {e}", self.provider_name) from e
        return url if opened else ""


# * Norwegian (bokmål/nynorsk/English) dictionary lookup
class LexinLookup(BrowserLookup):

    provider_name = "lexin"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        host: str = DEFAULT_LEXIN_HOST,
    ):
        super().__init__(
            timeout=timeout,
            user_agent=user_agent,
            url_template=LEXIN_URL_TEMPLATE.replace("{host}", host),
        )
        self.host = host

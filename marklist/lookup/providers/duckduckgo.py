# marklist/lookup/providers/duckduckgo.py
# DuckDuckGo Instant Answer lookup returning the topic abstract

from __future__ import annotations

from .base import BaseLookup
from .http import fetch_json

DUCKDUCKGO_API_URL = "https://api.duckduckgo.com/"


class DuckDuckGoLookup(BaseLookup):

    provider_name = "duckduckgo"

    # * Abstract text of the instant answer; "" when DuckDuckGo has none
    def make_call(self, query: str) -> str:
        data = fetch_json(
            DUCKDUCKGO_API_URL,
            self.provider_name,
            params={
                "q": query,
                "format": "json",
                "no_html": 1,
                "skip_disambig": 1,
                "no_redirect": 1,
            },
            timeout=self.timeout,
            user_agent=self.user_agent,
        )
        if data is None:
            return ""
        return str(data.get("AbstractText") or data.get("Abstract") or "")

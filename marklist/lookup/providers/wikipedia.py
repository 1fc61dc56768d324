# marklist/lookup/providers/wikipedia.py
# Wikipedia page summary lookup via the REST API

from __future__ import annotations

from urllib.parse import quote

from .base import BaseLookup, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .http import fetch_json

WIKIPEDIA_SUMMARY_URL = "https://{lang}.wikipedia.org/api/rest_v1/page/summary/{title}"


class WikipediaLookup(BaseLookup):

    provider_name = "wikipedia"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        lang: str = "en",
    ):
        super().__init__(timeout=timeout, user_agent=user_agent)
        self.lang = lang

    def summary_url(self, query: str) -> str:
        # page titles use underscores for spaces
        title = quote(query.strip().replace(" ", "_"), safe="")
        return WIKIPEDIA_SUMMARY_URL.format(lang=self.lang, title=title)

    # * Plain-text extract of the page; "" for missing pages & disambiguation pages
    def make_call(self, query: str) -> str:
        data = fetch_json(
            self.summary_url(query),
            self.provider_name,
            params={"redirect": "true"},
            timeout=self.timeout,
            user_agent=self.user_agent,
        )
        if data is None or data.get("type") == "disambiguation":
            return ""
        return str(data.get("extract") or "")

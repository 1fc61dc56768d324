# marklist/lookup/providers/base.py
# Template-method base for lookup providers w/ timing & verbose logging

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from ..types import LookupResult
from ...core.exceptions import LookupProviderError
from ...core.verbose import vlog_lookup_request, vlog_lookup_response

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "marklist/0.1 (+https://pypi.org/project/marklist/)"


# * Abstract base class for lookup providers using template-method pattern
# Orchestrates: log request -> make_call -> wrap result -> log response
# run_lookup always returns a LookupResult, never raises to callers
class BaseLookup(ABC):

    # * Subclasses must set this to their registry name
    provider_name: str = ""

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.user_agent = user_agent

    # * Template method - run one lookup & report the outcome
    def run_lookup(self, query: str) -> LookupResult:
        query = query.strip()
        if not query:
            return LookupResult(
                success=False, provider=self.provider_name, error="empty query"
            )

        vlog_lookup_request(self.provider_name, query)
        start_time = time.time()
        try:
            text = self.make_call(query).strip()
        except LookupProviderError as e:
            result = LookupResult(
                success=False, provider=self.provider_name, query=query, error=str(e)
            )
        except Exception as e:
            result = LookupResult(
                success=False,
                provider=self.provider_name,
                query=query,
                error=f"Unexpected error in {self.provider_name}: {e}",
            )
        else:
            result = LookupResult(
                success=bool(text), provider=self.provider_name, query=query, text=text
            )

        vlog_lookup_response(
            provider=self.provider_name,
            result_length=len(result.text),
            success=result.success,
            duration_ms=(time.time() - start_time) * 1000,
            error=result.error or None,
        )
        return result

    # * Strategy protocol used by favourite_search: result text or ""
    def __call__(self, query: str) -> str:
        return self.run_lookup(query).text

    # * Provider-specific call (subclasses must implement); "" means no answer
    @abstractmethod
    def make_call(self, query: str) -> str:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(timeout={self.timeout!r})"

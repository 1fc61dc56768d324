# marklist/lookup/types.py
# Shared types for lookup providers

from __future__ import annotations

from dataclasses import dataclass


# * Result object for a single provider lookup
@dataclass(slots=True)
class LookupResult:
    success: bool  # provider produced a non-empty answer
    provider: str = ""  # provider name that produced this result
    query: str = ""  # query as sent to the provider
    text: str = ""  # answer text (abstract, extract or opened URL)
    error: str = ""  # reason for failure, empty on success

    def __bool__(self) -> bool:
        return self.success and bool(self.text)

# marklist/lookup/providers/http.py
# Shared JSON-over-HTTP helper for web lookup providers

from __future__ import annotations

from typing import Any

import requests

from ...core.debug import debug_http
from ...core.exceptions import ProviderError


# * GET a JSON document; None on 404, ProviderError on transport or decode failure
def fetch_json(
    url: str,
    provider: str,
    *,
    params: dict[str, Any] | None = None,
    timeout: float,
    user_agent: str,
) -> dict[str, Any] | None:
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    debug_http(url, params)
    try:
        r = requests.get(url, params=params, headers=headers, timeout=timeout)
        if r.status_code == 404:
            return None
        r.raise_for_status()
        data = r.json()
    except requests.exceptions.RequestException as e:
        raise ProviderError(f"{provider} request failed: {e}", provider) from e
    except ValueError as e:
        raise ProviderError(f"{provider} returned invalid JSON: {e}", provider) from e

    if not isinstance(data, dict):
        raise ProviderError(f"{provider} returned unexpected payload", provider)
    return data

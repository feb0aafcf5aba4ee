"""Lightweight HTTP client for a remote word+clue service."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Tuple

import requests

from ..core.exceptions import WordPoolError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class WordPoolAPIError(WordPoolError):
    """Raised when the word service responds with an error payload."""


class WordPoolClient:
    """Minimal client around a JSON word service.

    The service answers ``GET {base_url}/words`` with either a list of
    ``{"word": ..., "clue": ...}`` objects or an object holding that list
    under ``"words"``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        base_url_env: str = "MINICROSS_POOL_URL",
        api_key_env: str = "MINICROSS_POOL_API_KEY",
        timeout_seconds: float = 15.0,
    ) -> None:
        resolved = base_url or os.environ.get(base_url_env)
        if not resolved:
            raise WordPoolAPIError(
                f"Missing word service URL (argument or environment variable {base_url_env})"
            )
        self.base_url = resolved.rstrip("/")
        self.api_key_env = api_key_env
        self.timeout_seconds = timeout_seconds
        self._api_key = os.environ.get(api_key_env)

    def fetch_pairs(self, limit: Optional[int] = None) -> List[Tuple[str, str]]:
        """Return ``(word, clue)`` pairs from the service."""
        url = f"{self.base_url}/words"
        params: Dict[str, Any] = {}
        if limit is not None:
            params["limit"] = limit
        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else {}
        try:
            response = requests.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:  # pragma: no cover - network failure
            raise WordPoolAPIError(f"Word service request failed: {exc}") from exc
        except ValueError as exc:
            raise WordPoolAPIError(f"Word service returned invalid JSON: {exc}") from exc

        pairs = self._extract_pairs(data)
        if not pairs:
            LOGGER.warning("Word service response had no usable entries: %s", data)
            raise WordPoolAPIError("Word service response missing word entries")
        return pairs

    @staticmethod
    def _extract_pairs(payload: Any) -> List[Tuple[str, str]]:
        items = payload.get("words") if isinstance(payload, dict) else payload
        pairs: List[Tuple[str, str]] = []
        for item in items or []:
            if not isinstance(item, dict):
                continue
            word = item.get("word")
            if not word:
                continue
            pairs.append((str(word), str(item.get("clue") or "")))
        return pairs

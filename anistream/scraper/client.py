"""HTTP client for the show catalogue's GraphQL API."""

from __future__ import annotations

import time
from typing import Any

import requests

from anistream.models import (
    ApiError,
    AppError,
    JsonRequestError,
    RequestError,
    TranslationType,
    UnknownError,
)

BASE_API = "https://api.allanime.day/api"
REFERER = "https://allmanga.to"
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0"
TIMEOUT = 30.0
MAX_RETRIES = 2
RETRY_DELAY = 0.5

_SEARCH_QUERY = """
    query(
        $search: SearchInput,
        $limit: Int,
        $page: Int,
        $translationType: VaildTranslationTypeEnumType,
        $countryOrigin: VaildCountryOriginEnumType
    ) {
        shows(
            search: $search,
            limit: $limit,
            page: $page,
            translationType: $translationType,
            countryOrigin: $countryOrigin
        ) {
            edges {
                _id
                name
                availableEpisodes
                __typename
            }
        }
    }
"""

_EPISODE_LIST_QUERY = """
    query ($showId: String!) {
        show(_id: $showId) {
            _id
            availableEpisodesDetail
        }
    }
"""

_EPISODE_SOURCES_QUERY = """
    query (
        $showId: String!,
        $translationType: VaildTranslationTypeEnumType!,
        $episodeString: String!
    ) {
        episode(
            showId: $showId,
            translationType: $translationType,
            episodeString: $episodeString
        ) {
            episodeString
            sourceUrls
        }
    }
"""


class ApiClient:
    """Sends GraphQL queries with fixed headers, a timeout and a few retries."""

    def __init__(
        self,
        session: requests.Session | None = None,
        retry_delay: float = RETRY_DELAY,
    ) -> None:
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT, "Referer": REFERER})
        self.retry_delay = retry_delay

    def search_anime(self, query: str) -> Any:
        """Search shows whose name matches ``query``."""
        return self._send_request(
            {
                "query": _SEARCH_QUERY,
                "variables": {
                    "search": {
                        "allowAdult": False,
                        "allowUnknown": False,
                        "query": query,
                    },
                    "limit": 40,
                    "page": 1,
                    "translationType": "sub",
                    "countryOrigin": "ALL",
                },
            }
        )

    def get_episode_list(self, anime_id: str) -> Any:
        """Fetch the available episodes of one show."""
        return self._send_request(
            {"query": _EPISODE_LIST_QUERY, "variables": {"showId": anime_id}}
        )

    def fetch_episode_sources(
        self, anime_id: str, episode_number: str, translation: TranslationType
    ) -> Any:
        """Fetch the stream sources of one episode."""
        return self._send_request(
            {
                "query": _EPISODE_SOURCES_QUERY,
                "variables": {
                    "showId": anime_id,
                    "translationType": translation.value,
                    "episodeString": episode_number,
                },
            }
        )

    def close(self) -> None:
        """Release the session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _send_request(self, body: dict[str, Any]) -> Any:
        last_error: AppError | None = None
        for attempt in range(MAX_RETRIES + 1):
            try:
                return self._try_send_request(body)
            except AppError as exc:
                last_error = exc
                if attempt < MAX_RETRIES:
                    time.sleep(self.retry_delay)
        if last_error is None:
            raise UnknownError("Unknown error during API request")
        raise last_error

    def _try_send_request(self, body: dict[str, Any]) -> Any:
        try:
            response = self.session.post(BASE_API, json=body, timeout=TIMEOUT)
        except requests.RequestException as exc:
            raise RequestError(exc) from exc

        if not 200 <= response.status_code < 300:
            status = f"{response.status_code} {response.reason or ''}".strip()
            raise ApiError(f"API returned error status: {status}")

        try:
            return response.json()
        except ValueError as exc:
            raise JsonRequestError(exc) from exc
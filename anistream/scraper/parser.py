"""Extract shows, episodes and streams from the API's JSON responses."""

from __future__ import annotations

import re
from typing import Any

from anistream.models import (
    Anime,
    EpisodeMeta,
    EpisodeStream,
    NoStreamsAvailable,
    ParsingError,
    TranslationType,
)

_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_U16 = re.compile(r"\+?[0-9]+")
_U64_LIMIT = 2**64
_DEFAULT_QUALITY = 720


def _get(value: Any, *keys: str) -> Any:
    """Follow object keys, yielding None where a key or an object is missing."""
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value


def _as_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _as_count(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < _U64_LIMIT:
        return value
    return None


def _parse_number(text: str) -> float | None:
    if _FLOAT.fullmatch(text) is None:
        return None
    return float(text)


def parse_search_results(data: Any) -> list[Anime]:
    """Build the list of shows from a search response."""
    edges = _get(data, "data", "shows", "edges")
    if not isinstance(edges, list):
        return []

    results = []
    for entry in edges:
        available = _get(entry, "availableEpisodes")
        sub = _as_count(_get(available, "sub"))
        dub = _as_count(_get(available, "dub"))

        translations = []
        if (sub or 0) > 0:
            translations.append(TranslationType.SUB)
        if (dub or 0) > 0:
            translations.append(TranslationType.DUB)

        episode_count = sub if sub is not None else (dub if dub is not None else 0)

        results.append(
            Anime(
                id=_as_str(_get(entry, "_id")) or "",
                title=_as_str(_get(entry, "name")) or "",
                available_translations=translations,
                episode_count=episode_count,
            )
        )
    return results


def parse_episode_list(data: Any, translation: TranslationType) -> list[EpisodeMeta]:
    """List the episodes released in the given translation."""
    listed = _get(data, "data", "show", "availableEpisodesDetail", translation.value)
    if not isinstance(listed, list):
        return []

    episodes = []
    for item in listed:
        if not isinstance(item, str):
            continue
        number = _parse_number(item)
        if number is not None:
            episodes.append(EpisodeMeta(number=number, released=True))
    return episodes


def parse_stream_sources(data: Any) -> list[EpisodeStream]:
    """Collect the HTTP stream sources of an episode response."""
    sources = _get(data, "data", "episode", "sourceUrls")
    if not isinstance(sources, list):
        return []

    streams = []
    for entry in sources:
        url = _as_str(_get(entry, "sourceUrl")) or ""
        provider = _as_str(_get(entry, "sourceName"))
        if url.startswith("http"):
            streams.append(
                EpisodeStream(
                    quality=0,
                    url=url,
                    provider=provider if provider is not None else "Unknown",
                )
            )
    return streams


def _parse_quality(entry: Any) -> int:
    text = _as_str(_get(entry, "quality"))
    if text is not None:
        text = text.strip()
        if _U16.fullmatch(text):
            value = int(text)
            if value <= 0xFFFF:
                return value
    return _DEFAULT_QUALITY


def parse_complex_data(data: Any) -> list[EpisodeStream]:
    """Strictly parse stream sources, raising when the response is unusable."""
    sources = _get(data, "data", "episode", "sourceUrls")
    if not isinstance(sources, list):
        raise ParsingError("Expected sourceUrls to be an array")
    if not sources:
        raise NoStreamsAvailable()

    streams = []
    for entry in sources:
        url = _as_str(_get(entry, "sourceUrl"))
        if url is None:
            raise ParsingError("Missing sourceUrl field")
        provider = _as_str(_get(entry, "sourceName"))
        if url.startswith("http"):
            streams.append(
                EpisodeStream(
                    quality=_parse_quality(entry),
                    url=url,
                    provider=provider if provider is not None else "Unknown",
                )
            )

    if not streams:
        raise NoStreamsAvailable()
    return streams
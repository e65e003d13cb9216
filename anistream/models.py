"""Core data structures shared by the scraper, the command line and the player."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class AppError(Exception):
    """Base class for every error the application reports."""

    prefix = "Error"

    def __init__(self, detail: object = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class RequestError(AppError):
    """The HTTP request could not be sent or completed."""

    prefix = "Request error"


class JsonError(AppError):
    """A JSON document could not be parsed."""

    prefix = "JSON parsing error"


class JsonRequestError(AppError):
    """The response body of a request was not valid JSON."""

    prefix = "JSON request error"


class ClientError(AppError):
    """The HTTP client could not be configured."""

    prefix = "Client error"


class ApiError(AppError):
    """The API answered with an unsuccessful status."""

    prefix = "API error"


class ParsingError(AppError):
    """An API response did not have the expected shape."""

    prefix = "Parsing error"


class NoStreamsAvailable(AppError):
    """No playable stream was found for an episode."""

    def __init__(self) -> None:
        super().__init__("")

    def __str__(self) -> str:
        return "No streams available"


class NoEpisodesAvailable(AppError):
    """No episode was found for a show."""

    def __init__(self) -> None:
        super().__init__("")

    def __str__(self) -> str:
        return "No episodes available"


class UnknownError(AppError):
    """Any other failure."""

    prefix = "Unknown error"


class TranslationType(enum.Enum):
    """Subtitled or dubbed release; the value is the API's spelling."""

    SUB = "sub"
    DUB = "dub"

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class EpisodeMeta:
    number: float
    released: bool


@dataclass
class Anime:
    id: str
    title: str
    available_translations: list[TranslationType] = field(default_factory=list)
    episode_count: int = 0


@dataclass(frozen=True)
class EpisodeStream:
    quality: int
    url: str
    provider: str


@dataclass
class SelectedAnime:
    anime: Anime
    translation: TranslationType
    episodes: list[EpisodeMeta] = field(default_factory=list)


@dataclass(frozen=True)
class HistoryEntry:
    anime_id: str
    last_episode: float
    translation: TranslationType
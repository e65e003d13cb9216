import dataclasses

import pytest

from anistream.models import (
    Anime,
    ApiError,
    AppError,
    ClientError,
    EpisodeMeta,
    EpisodeStream,
    HistoryEntry,
    JsonError,
    JsonRequestError,
    NoEpisodesAvailable,
    NoStreamsAvailable,
    ParsingError,
    RequestError,
    SelectedAnime,
    TranslationType,
    UnknownError,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (RequestError, "Request error"),
        (JsonError, "JSON parsing error"),
        (JsonRequestError, "JSON request error"),
        (ClientError, "Client error"),
        (ApiError, "API error"),
        (ParsingError, "Parsing error"),
        (UnknownError, "Unknown error"),
    ],
)
def test_error_messages_carry_prefix(cls, prefix):
    err = cls("boom")
    assert str(err) == f"{prefix}: boom"
    assert err.detail == "boom"


def test_error_wraps_exception_detail():
    inner = ValueError("bad value")
    err = RequestError(inner)
    assert err.detail is inner
    assert str(err) == "Request error: bad value"


def test_unit_errors_have_fixed_messages():
    assert str(NoStreamsAvailable()) == "No streams available"
    assert str(NoEpisodesAvailable()) == "No episodes available"


@pytest.mark.parametrize(
    "err",
    [ParsingError("x"), NoStreamsAvailable(), NoEpisodesAvailable(), ApiError("y")],
)
def test_errors_are_caught_as_app_error(err):
    with pytest.raises(AppError) as info:
        raise err
    assert info.value is err


def test_translation_type_display_and_value():
    assert str(TranslationType.SUB) == "Sub"
    assert str(TranslationType.DUB) == "Dub"
    assert TranslationType("sub") is TranslationType.SUB
    assert TranslationType("dub") is TranslationType.DUB


def test_translation_type_rejects_unknown_value():
    with pytest.raises(ValueError):
        TranslationType("raw")


def test_episode_meta_equality_and_immutability():
    ep = EpisodeMeta(number=3.5, released=True)
    assert ep == EpisodeMeta(3.5, True)
    assert ep != EpisodeMeta(3.5, False)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ep.number = 4.0


def test_anime_defaults_and_copy():
    anime = Anime(id="abc", title="Show")
    assert anime.available_translations == []
    assert anime.episode_count == 0
    other = dataclasses.replace(anime, available_translations=[TranslationType.SUB])
    assert anime.available_translations == []
    assert other.available_translations == [TranslationType.SUB]


def test_stream_and_history_fields():
    stream = EpisodeStream(quality=0, url="https://example.com/v.m3u8", provider="P")
    assert dataclasses.astuple(stream) == (0, "https://example.com/v.m3u8", "P")
    entry = HistoryEntry(anime_id="abc", last_episode=2.0, translation=TranslationType.DUB)
    assert entry == HistoryEntry("abc", 2.0, TranslationType.DUB)


def test_selected_anime_holds_parts():
    anime = Anime("abc", "Show", [TranslationType.SUB], 1)
    episodes = [EpisodeMeta(1.0, True)]
    selected = SelectedAnime(anime, TranslationType.SUB, episodes)
    assert selected.anime is anime
    assert selected.episodes == episodes
    assert selected == SelectedAnime(Anime("abc", "Show", [TranslationType.SUB], 1), TranslationType.SUB, [EpisodeMeta(1.0, True)])
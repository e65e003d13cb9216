"""Interactive command line: search a show, pick an episode and play it."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Iterable, Sequence
from typing import TypeVar

from anistream.models import (
    AppError,
    EpisodeMeta,
    EpisodeStream,
    NoEpisodesAvailable,
    NoStreamsAvailable,
    TranslationType,
    UnknownError,
)
from anistream.scraper.client import ApiClient
from anistream.scraper.parser import (
    parse_episode_list,
    parse_search_results,
    parse_stream_sources,
)

T = TypeVar("T")

PAGE_SIZE = 25
NEXT_PAGE = "▶ Next page"
PREVIOUS_PAGE = "◀ Previous page"
EPISODE_PREFIX = "Episode "
QUIT = "Quit"
PLAYBACK_OPTIONS = (
    "▶ Next episode [Not implemented]",
    "◀ Previous episode [Not implemented]",
    "Replay episode [Not implemented]",
    "Choose episode [Not implemented]",
    QUIT,
)
PLAYER_ARGS = (
    "--cache=yes",
    "--cache-pause",
    "--cache-pause-wait=5",
    "--demuxer-max-bytes=500M",
    "--demuxer-max-back-bytes=100M",
)
DEFAULT_PLAYER = "mpv"


def select(message: str, options: Iterable[T]) -> T | None:
    """Show a numbered menu and return the chosen option, or None if aborted."""
    choices = list(options)
    if not choices:
        return None
    print(message)
    for number, option in enumerate(choices, 1):
        print(f"  {number}) {option}")
    while True:
        try:
            answer = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(choices):
            return choices[int(answer) - 1]
        print(f"Enter a number from 1 to {len(choices)}.")


def episode_page(labels: Sequence[str], page: int) -> list[str]:
    """Return the menu entries of one page, with navigation entries added."""
    start = page * PAGE_SIZE
    end = min(start + PAGE_SIZE, len(labels))
    items = list(labels[start:end])
    if end < len(labels):
        items.append(NEXT_PAGE)
    if page > 0:
        items.insert(0, PREVIOUS_PAGE)
    return items


def _format_number(number: float) -> str:
    if number == int(number):
        return str(int(number))
    return str(number)


def prompt_for_episode_number(episodes: Iterable[EpisodeMeta]) -> str | None:
    """Let the user page through the episodes and return the chosen number."""
    ordered = sorted(episodes, key=lambda episode: episode.number)
    labels = [f"{EPISODE_PREFIX}{_format_number(ep.number)}" for ep in ordered]

    page = 0
    while True:
        chosen = select("Select episode:", episode_page(labels, page))
        if chosen is None:
            return None
        if chosen == NEXT_PAGE:
            page += 1
        elif chosen == PREVIOUS_PAGE:
            page -= 1
        elif chosen.startswith(EPISODE_PREFIX):
            return chosen[len(EPISODE_PREFIX):]
        else:
            return None


def prompt_playback_menu() -> str | None:
    """Ask what to do while an episode is playing."""
    return select("Now playing — choose next action:", PLAYBACK_OPTIONS)


def play_stream(stream: EpisodeStream, player: str) -> subprocess.Popen:
    """Start the player on the stream URL, detached from the terminal's streams."""
    print(f"Launching {stream.url} with player {player}")
    return subprocess.Popen(
        [player, *PLAYER_ARGS, stream.url],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )


def _translations_label(translations: Sequence[TranslationType]) -> str:
    return "[" + ", ".join(str(t) for t in translations) + "]"


def _run(client: ApiClient) -> None:
    try:
        query = input("Search anime: ")
    except (EOFError, KeyboardInterrupt) as exc:
        raise UnknownError("Search input failed") from exc

    results = parse_search_results(client.search_anime(query))
    if not results:
        print("No results found.")
        raise NoEpisodesAvailable()

    anime_labels = [
        f"{a.title} ({a.episode_count} eps) {_translations_label(a.available_translations)}"
        for a in results
    ]
    chosen_label = select("Select anime:", anime_labels)
    if chosen_label is None:
        raise UnknownError("Anime selection failed")
    anime = results[anime_labels.index(chosen_label)]
    print(f"\nSelected: {anime.title}\n")

    translation = select("Select translation:", anime.available_translations)
    if translation is None:
        raise UnknownError("Translation selection failed")

    episodes = parse_episode_list(client.get_episode_list(anime.id), translation)
    if not episodes:
        print("No episodes available.")
        raise NoEpisodesAvailable()

    episode_number = prompt_for_episode_number(episodes)
    if episode_number is None:
        raise UnknownError("Failed to select episode")

    print(f"\nFetching streams for episode {episode_number} ({translation})...")
    streams = parse_stream_sources(
        client.fetch_episode_sources(anime.id, episode_number, translation)
    )
    if not streams:
        print("No streams found.")
        raise NoStreamsAvailable()

    stream_labels = [f"{s.provider} → {s.url}" for s in streams]
    chosen_stream = select("Choose stream provider:", stream_labels)
    if chosen_stream is None:
        raise UnknownError("Stream selection failed")
    stream = streams[stream_labels.index(chosen_stream)]

    try:
        child = play_stream(stream, DEFAULT_PLAYER)
    except OSError as exc:
        raise UnknownError(f"Failed to spawn player: {exc}") from exc

    choice = prompt_playback_menu()
    if choice == QUIT:
        try:
            child.kill()
        except OSError:
            pass
        print("Quitting playback.")
    elif choice is not None:
        print(f"Selected: {choice} (not yet implemented)")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive session; return the process exit status."""
    try:
        with ApiClient() as client:
            _run(client)
    except AppError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
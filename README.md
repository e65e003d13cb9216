# anistream

A small terminal program for finding an anime, choosing a subbed or dubbed
episode and watching it in the `mpv` media player.

## Requirements

- Python 3.10 or later
- `mpv` on your `PATH`

## Installation

```
pip install .
```

## Usage

```
anistream
```

You are then asked, one step at a time:

1. **Search anime:** type a title.
2. **Select anime:** each result shows its title, episode count and the
   translations on offer, for example `Frieren (28 eps) [Sub, Dub]`.
3. **Select translation:** pick `Sub` or `Dub`.
4. **Select episode:** episodes are listed in ascending order, 25 per page;
   choose `▶ Next page` or `◀ Previous page` to move between pages.
5. **Choose stream provider:** each source is shown as `provider → url`.

Every menu is a numbered list: type the number of an entry and press Enter.
Pressing Ctrl-D or Ctrl-C at a menu aborts it.

The chosen stream opens in `mpv` with caching enabled
(`--cache=yes --cache-pause --cache-pause-wait=5 --demuxer-max-bytes=500M
--demuxer-max-back-bytes=100M`); the player's own input and output are
detached from the terminal. While it plays, a menu offers further actions;
choosing `Quit` stops the player.

If a search returns nothing, a show has no episodes in the chosen
translation, an episode has no HTTP stream, a menu is aborted or `mpv`
cannot be started, the program prints `Error: ...` to standard error and
exits with status 1.

## Using it as a library

The API client and the parsers can be used without the interactive prompts:

```python
from anistream.models import TranslationType
from anistream.scraper.client import ApiClient
from anistream.scraper.parser import (
    parse_episode_list,
    parse_search_results,
    parse_stream_sources,
)

with ApiClient() as client:
    shows = parse_search_results(client.search_anime("frieren"))
    anime = shows[0]
    episodes = parse_episode_list(
        client.get_episode_list(anime.id), TranslationType.SUB
    )
    streams = parse_stream_sources(
        client.fetch_episode_sources(anime.id, "1", TranslationType.SUB)
    )
    for stream in streams:
        print(stream.provider, stream.url)
```

`ApiClient` accepts an existing `requests.Session` and a `retry_delay` in
seconds (0.5 by default). Requests time out after 30 seconds, and a failed
request is retried twice before the last error is raised.

The parsers are lenient: missing or malformed fields are skipped or given
defaults. `parse_complex_data` is the strict variant for stream sources: it
raises `ParsingError` when `sourceUrls` is not a list or an entry has no
`sourceUrl`, and `NoStreamsAvailable` when no HTTP source remains; it also
reads each source's `quality` field, using 720 when it is absent or invalid.

Every error the package raises is a subclass of `anistream.models.AppError`.

## What it does not do

- The playback menu's `Next episode`, `Previous episode`, `Replay episode`
  and `Choose episode` entries only print that they are not implemented.
- There is no configuration file; the player is always `mpv`.
- Nothing is stored between runs: `HistoryEntry` and `SelectedAnime` exist
  as data classes, but the program keeps no watch history.
- Stream quality is not detected by the lenient parser; it is always 0.

## Running the tests

```
pip install ".[test]"
pytest
```
"""Search for anime, choose an episode and stream it in mpv."""

__version__ = "0.1.0"
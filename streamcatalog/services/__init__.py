"""Services package - business logic layer."""
from .playback import PlaybackDelay, play, simulate_playback
from .platform import StreamingPlatform, generate_next_id

__all__ = [
    "PlaybackDelay",
    "StreamingPlatform",
    "generate_next_id",
    "play",
    "simulate_playback",
]

"""Player package: the staged builder and the MediaPlayer it produces.

Only Builder is exported as an entry point; the stage classes it hands out
live in stageplay.player.builder and are not meant to be constructed directly.
"""

from stageplay.player.builder import Builder
from stageplay.player.console_impl import ConsoleDecoder, create_decoder
from stageplay.player.media_player import MediaPlayer
from stageplay.player.models import PlayerConfig, PlayerPhase
from stageplay.player.protocols import DecoderBackend

__all__ = [
    "Builder",
    "ConsoleDecoder",
    "DecoderBackend",
    "MediaPlayer",
    "PlayerConfig",
    "PlayerPhase",
    "create_decoder",
]

"""Console implementation of the DecoderBackend protocol."""

import logging
import sys
from typing import TextIO

from stageplay.config import constants
from stageplay.config.settings import KNOWN_DECODERS, PlayerSettings
from stageplay.player.protocols import DecoderBackend

logger = logging.getLogger(__name__)


class ConsoleDecoder:
    """DecoderBackend that prints each action instead of touching any media."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream

    def _write(self, line: str) -> None:
        # Resolve stdout lazily so redirected streams are honoured
        print(line, file=self._stream or sys.stdout)

    def open_source(self, source: str) -> None:
        self._write(constants.OPEN_MESSAGE.format(source=source))

    def apply_arguments(self, arguments: str) -> None:
        self._write(constants.ARGUMENTS_MESSAGE.format(arguments=arguments))

    def apply_flags(self, flags: int) -> None:
        self._write(constants.FLAGS_MESSAGE.format(flags=flags))

    def decode(self) -> None:
        self._write(constants.DECODE_MESSAGE)

    def play(self) -> None:
        self._write(constants.PLAY_MESSAGE)


def create_decoder(settings: PlayerSettings) -> DecoderBackend:
    """Create the decoder backend named in settings.

    Args:
        settings: PlayerSettings instance.

    Returns:
        A DecoderBackend. Unknown names fall back to the console decoder.
    """
    if settings.decoder not in KNOWN_DECODERS:
        logger.debug(f"Unknown decoder {settings.decoder!r}, using console decoder")
    return ConsoleDecoder()

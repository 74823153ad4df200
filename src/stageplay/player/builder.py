"""Staged Builder for MediaPlayer.

Every setup step of a MediaPlayer lives on its own stage class, and each step
returns the stage for the step after it:

    player = (
        Builder()
        .step1("myfile")  # open a file
        .step2("-f")  # supply some arguments
        .optional_step3(1)  # set some flags
        .step4()  # decode
    )
    player.play()

Because every return type is the next stage, a type checker rejects calls made
out of order, and at runtime the out-of-order method simply does not exist on
the object in hand. Stages only reference the player, never each other, and
each one can be used once.
"""

import logging

from stageplay.errors import StageConsumedError
from stageplay.player.console_impl import ConsoleDecoder
from stageplay.player.media_player import MediaPlayer
from stageplay.player.protocols import DecoderBackend

logger = logging.getLogger(__name__)


class _Stage:
    """Shared plumbing for the single-use builder stages."""

    def __init__(self, player: MediaPlayer):
        self._player = player
        self._consumed = False

    def _consume(self) -> MediaPlayer:
        if self._consumed:
            raise StageConsumedError(type(self).__name__)
        self._consumed = True
        return self._player


class SourceStage(_Stage):
    """First step: open the source."""

    def step1(self, source: str) -> "ArgumentsStage":
        player = self._consume()
        player._set_source(source)
        return ArgumentsStage(player)


class ArgumentsStage(_Stage):
    """Second step: apply arguments."""

    def step2(self, arguments: str) -> "FlagsStage":
        player = self._consume()
        player._set_arguments(arguments)
        return FlagsStage(player)


class FlagsStage(_Stage):
    """Third step, optional: apply flags, or skip straight to a ready player."""

    def optional_step3(self, flags: int) -> "DecodeStage":
        """Apply flags. Values that are not positive are ignored."""
        player = self._consume()
        player._set_flags(flags)
        return DecodeStage(player)

    def skip_optional(self) -> MediaPlayer:
        """Skip the flags step and finish setup.

        Returns:
            A ready to go MediaPlayer.
        """
        player = self._consume()
        logger.debug("Skipping optional flags step")
        return DecodeStage(player).step4()


class DecodeStage(_Stage):
    """Final step: decode the source."""

    def step4(self) -> MediaPlayer:
        """Finish setup.

        Returns:
            A ready to go MediaPlayer.
        """
        player = self._consume()
        player._finalize()
        return player


class Builder:
    """Entry point of the staged builder.

    Creates the MediaPlayer and exposes only the first step. After step1 the
    builder has no further role; sequencing is carried by the stages.
    """

    def __init__(self, decoder: DecoderBackend | None = None):
        if decoder is None:
            decoder = ConsoleDecoder()
        self._first = SourceStage(MediaPlayer(decoder))

    def step1(self, source: str) -> ArgumentsStage:
        try:
            return self._first.step1(source)
        except StageConsumedError:
            raise StageConsumedError(type(self).__name__) from None

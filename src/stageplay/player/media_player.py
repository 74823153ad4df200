"""MediaPlayer, the object configured by the staged Builder."""

import logging

from stageplay.config import constants
from stageplay.errors import PlayerNotReadyError, StepOrderError
from stageplay.player.models import PlayerConfig, PlayerPhase
from stageplay.player.protocols import DecoderBackend

logger = logging.getLogger(__name__)


class MediaPlayer:
    """A media player that must be set up in a fixed order before it can play.

    Instances are only meant to be obtained from stageplay.player.builder.Builder,
    which calls the private setup methods in the required order and hands the
    player out once it is READY. The player holds no reference to the builder
    or any of its stages.
    """

    def __init__(self, decoder: DecoderBackend):
        self._decoder = decoder
        self._source: str | None = None
        self._arguments: str | None = None
        self._flags: int | None = None
        self._phase = PlayerPhase.CREATED

    @property
    def phase(self) -> PlayerPhase:
        return self._phase

    @property
    def is_ready(self) -> bool:
        """Check if the player has completed every mandatory setup step."""
        return self._phase == PlayerPhase.READY

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def arguments(self) -> str | None:
        return self._arguments

    @property
    def flags(self) -> int | None:
        """Recorded flags, or None if the optional step was skipped or ignored."""
        return self._flags

    @property
    def config(self) -> PlayerConfig:
        return PlayerConfig(
            source=self._source, arguments=self._arguments, flags=self._flags
        )

    def play(self) -> None:
        """Play the configured media.

        Raises:
            PlayerNotReadyError: If the player was constructed directly instead
                of through the Builder and never finished setup.
        """
        if not self.is_ready:
            raise PlayerNotReadyError(
                f"Player is in phase {self._phase.name}, expected READY"
            )

        logger.info(f"Playing {self._source}")
        self._decoder.play()

    def _expect(self, step: str, *phases: PlayerPhase) -> None:
        if self._phase not in phases:
            raise StepOrderError(step, self._phase.name)

    def _set_source(self, source: str) -> None:
        self._expect("set_source", PlayerPhase.CREATED)
        logger.debug(f"Opening source {source}")
        self._source = source
        self._decoder.open_source(source)
        self._phase = PlayerPhase.SOURCE_SET

    def _set_arguments(self, arguments: str) -> None:
        self._expect("set_arguments", PlayerPhase.SOURCE_SET)
        logger.debug(f"Setting arguments {arguments!r}")
        self._arguments = arguments
        self._decoder.apply_arguments(arguments)
        self._phase = PlayerPhase.ARGUMENTS_SET

    def _set_flags(self, flags: int) -> None:
        self._expect("set_flags", PlayerPhase.ARGUMENTS_SET)

        # Non-positive flags are ignored without complaint
        if flags <= constants.NO_FLAGS:
            self._phase = PlayerPhase.FLAGS_SKIPPED
            return

        logger.debug(f"Setting flags {flags}")
        self._flags = flags
        self._decoder.apply_flags(flags)
        self._phase = PlayerPhase.FLAGS_SET

    def _finalize(self) -> None:
        self._expect(
            "finalize",
            PlayerPhase.ARGUMENTS_SET,
            PlayerPhase.FLAGS_SET,
            PlayerPhase.FLAGS_SKIPPED,
        )
        logger.debug(f"Decoding {self._source}")
        self._decoder.decode()
        self._phase = PlayerPhase.READY

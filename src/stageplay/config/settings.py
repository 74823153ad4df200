"""Runtime settings for stageplay.

Settings loaded from environment variables and provided to components via dependency injection.
"""

import logging
import os
from dataclasses import dataclass

from stageplay.config import constants

logger = logging.getLogger(__name__)

KNOWN_DECODERS = ("console",)


def parse_flags(raw_flags: str | None) -> int | None:
    """Parse STAGEPLAY_DEFAULT_FLAGS, treating unset or unparsable values as no flags."""
    if not raw_flags:
        return None

    try:
        return int(raw_flags)
    except ValueError:
        logger.warning(
            f"STAGEPLAY_DEFAULT_FLAGS={raw_flags!r} is not an integer and will be ignored"
        )
        return None


@dataclass(frozen=True)
class PlayerSettings:
    """Runtime settings for stageplay."""

    log_level: int

    # Builder defaults used by the command line entry point
    default_arguments: str
    default_flags: int | None

    # Decoder backend name, see stageplay.player.console_impl.create_decoder
    decoder: str

    @staticmethod
    def from_environment() -> "PlayerSettings":
        """Load settings from environment variables.

        Returns:
            PlayerSettings instance with values from environment variables.
        """
        level_name = os.environ.get(
            "STAGEPLAY_LOG_LEVEL", constants.DEFAULT_LOG_LEVEL
        ).upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            log_level = logging.INFO

        return PlayerSettings(
            log_level=log_level,
            default_arguments=os.environ.get(
                "STAGEPLAY_DEFAULT_ARGS", constants.DEFAULT_ARGUMENTS
            ),
            default_flags=parse_flags(os.environ.get("STAGEPLAY_DEFAULT_FLAGS")),
            decoder=os.environ.get("STAGEPLAY_DECODER", constants.DEFAULT_DECODER),
        )

    def validate(self, logger: logging.Logger) -> None:
        """Log warnings for configuration that will not have the expected effect.

        Args:
            logger: Logger instance to use for warnings.
        """
        if self.decoder not in KNOWN_DECODERS:
            logger.warning(
                f"STAGEPLAY_DECODER={self.decoder!r} is unknown, falling back to {constants.DEFAULT_DECODER!r}"
            )

        if self.default_flags is not None and self.default_flags <= constants.NO_FLAGS:
            logger.warning(
                f"STAGEPLAY_DEFAULT_FLAGS={self.default_flags} is not positive and will be ignored"
            )

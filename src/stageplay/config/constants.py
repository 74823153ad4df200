"""Constants for stageplay.

These never change at runtime - defaults and the illustrative console lines.
"""

from typing import Final

# Builder defaults
DEFAULT_ARGUMENTS: Final = "-f"
DEFAULT_DECODER: Final = "console"
DEFAULT_LOG_LEVEL: Final = "INFO"

# Flag values at or below this are ignored by the optional flags step
NO_FLAGS: Final = 0

# Console decoder output
OPEN_MESSAGE: Final = "Opening file : {source}"
ARGUMENTS_MESSAGE: Final = "Setting arguments: {arguments}"
FLAGS_MESSAGE: Final = "Setting flags: {flags}"
DECODE_MESSAGE: Final = "Running magical decoding algorithm"
PLAY_MESSAGE: Final = "Something cooooooool!!!"

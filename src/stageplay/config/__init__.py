"""Configuration module for stageplay.

This module provides a two-tier configuration system:
- constants: Pure constants that never change (defaults, console messages)
- settings: Runtime settings loaded from environment variables
"""

from stageplay.config.constants import (
    ARGUMENTS_MESSAGE,
    DECODE_MESSAGE,
    DEFAULT_ARGUMENTS,
    DEFAULT_DECODER,
    DEFAULT_LOG_LEVEL,
    FLAGS_MESSAGE,
    NO_FLAGS,
    OPEN_MESSAGE,
    PLAY_MESSAGE,
)
from stageplay.config.settings import PlayerSettings

__all__ = [
    # Constants
    "ARGUMENTS_MESSAGE",
    "DECODE_MESSAGE",
    "DEFAULT_ARGUMENTS",
    "DEFAULT_DECODER",
    "DEFAULT_LOG_LEVEL",
    "FLAGS_MESSAGE",
    "NO_FLAGS",
    "OPEN_MESSAGE",
    "PLAY_MESSAGE",
    # Settings class
    "PlayerSettings",
]

"""Data models for the staged media player."""

from dataclasses import dataclass
from enum import Enum, auto


class PlayerPhase(Enum):
    """How far a MediaPlayer has progressed through the builder chain."""

    CREATED = auto()  # Constructed by the Builder, nothing set
    SOURCE_SET = auto()  # Source opened
    ARGUMENTS_SET = auto()  # Arguments applied
    FLAGS_SET = auto()  # Optional flags applied
    FLAGS_SKIPPED = auto()  # Optional step taken with non-positive flags
    READY = auto()  # Decoded and ready to play


@dataclass(frozen=True)
class PlayerConfig:
    """Snapshot of the configuration a MediaPlayer was built with."""

    source: str | None
    arguments: str | None
    flags: int | None

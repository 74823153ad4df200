"""Exceptions raised by stageplay."""


class StagePlayError(Exception):
    """Base class for all stageplay errors."""


class StageConsumedError(StagePlayError):
    """A builder stage was used after it had already produced its successor."""

    def __init__(self, stage_name: str):
        super().__init__(f"{stage_name} has already been used")
        self.stage_name = stage_name


class PlayerNotReadyError(StagePlayError):
    """play() was called on a player that never completed the builder chain."""


class StepOrderError(StagePlayError):
    """A setup step ran on a player whose earlier mandatory steps are missing."""

    def __init__(self, step: str, phase: str):
        super().__init__(f"{step} cannot run in phase {phase}")
        self.step = step
        self.phase = phase

"""Shared test fixtures and utilities."""

import logging

import pytest

from stageplay.config.settings import PlayerSettings
from stageplay.player import Builder, MediaPlayer
from tests.mocks.mock_decoder import MockDecoder


@pytest.fixture
def settings() -> PlayerSettings:
    """PlayerSettings with the stock defaults."""
    return PlayerSettings(
        log_level=logging.INFO,
        default_arguments="-f",
        default_flags=None,
        decoder="console",
    )


@pytest.fixture
def mock_decoder() -> MockDecoder:
    """Fresh MockDecoder instance."""
    return MockDecoder()


@pytest.fixture
def builder(mock_decoder: MockDecoder) -> Builder:
    """Builder wired to the mock decoder."""
    return Builder(mock_decoder)


def build_with_flags(builder: Builder, flags: int) -> MediaPlayer:
    """Helper running the full chain including the optional step."""
    return builder.step1("myfile").step2("-f").optional_step3(flags).step4()


def build_skipping_flags(builder: Builder) -> MediaPlayer:
    """Helper running the chain through the shortcut."""
    return builder.step1("myfile").step2("-f").skip_optional()

import argparse
import logging
import sys

import colorlog

from stageplay.config.settings import PlayerSettings
from stageplay.errors import StagePlayError
from stageplay.player import Builder, MediaPlayer, create_decoder
from stageplay.player.protocols import DecoderBackend

logger = logging.getLogger(__name__)


def setup_logging(log_level: int) -> None:
    """Send colored log records to stderr, leaving stdout to the decoder output."""
    formatter = colorlog.ColoredFormatter(
        "%(cyan)s%(asctime)s%(reset)s %(log_color)s%(levelname)-8s%(reset)s %(light_purple)s%(name)s:%(reset)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors={
            "DEBUG": "purple",
            "INFO": "blue",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    )

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(formatter)

    logger = logging.getLogger()
    logger.setLevel(log_level)
    logger.addHandler(handler)


def build_player(
    decoder: DecoderBackend, source: str, arguments: str, flags: int | None
) -> MediaPlayer:
    """Run the builder chain, taking the shortcut when no flags are given."""
    stage = Builder(decoder).step1(source).step2(arguments)
    if flags is None:
        return stage.skip_optional()
    return stage.optional_step3(flags).step4()


def join_option_values(argv: list[str]) -> list[str]:
    """Attach the value following --args to the option itself.

    Player arguments usually start with a dash ('-f'), which argparse would
    otherwise read as a new option.
    """
    joined = []
    values = iter(argv)
    for arg in values:
        if arg == "--args":
            value = next(values, None)
            joined.append(arg if value is None else f"--args={value}")
        else:
            joined.append(arg)
    return joined


def parse_args(argv: list[str] | None, settings: PlayerSettings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stageplay", description="Set up a media player step by step and play it."
    )
    parser.add_argument("source", help="file to open")
    parser.add_argument(
        "--args",
        dest="arguments",
        default=settings.default_arguments,
        help="player arguments (default: %(default)s)",
    )
    parser.add_argument(
        "--flags",
        type=int,
        default=settings.default_flags,
        help="optional flag set; skipped when omitted, ignored when not positive",
    )
    if argv is None:
        argv = sys.argv[1:]
    return parser.parse_args(join_option_values(argv))


def main(argv: list[str] | None = None) -> int:
    settings = PlayerSettings.from_environment()
    setup_logging(settings.log_level)
    settings.validate(logger)

    options = parse_args(argv, settings)

    try:
        player = build_player(
            create_decoder(settings), options.source, options.arguments, options.flags
        )
        player.play()
    except StagePlayError as e:
        logger.error(f"Playback failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

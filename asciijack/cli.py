"""
Command line entry point for asciijack.

usage: asciijack <asset_dir> [seed] [--transcript FILE] [--verbose]
"""

import argparse
import logging
import sys
from typing import List, Optional

from asciijack.blackjack.engine import GameEngine
from asciijack.common.assets import load_glyphs
from asciijack.common.errors import AssetAllocationError, AssetError
from asciijack.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    LoggingIOInterface,
)
from asciijack.config import GameConfig
from asciijack.events import EngineEventType, EventBus

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ARGUMENTS = 2
EXIT_MEMORY = 3
EXIT_FILES = 4
EXIT_ABORTED = 5


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="asciijack",
        description="Play a round of blackjack against the dealer in your terminal.",
    )
    parser.add_argument(
        "asset_dir", help="directory containing the card images (ace.txt ... 2.txt)"
    )
    parser.add_argument(
        "seed",
        nargs="?",
        type=int,
        default=None,
        help="seed for shuffling the deck (default: current time)",
    )
    parser.add_argument(
        "--transcript",
        type=str,
        default=None,
        help="also write the game output to this file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def run(config: GameConfig, io_interface: Optional[IOInterface] = None) -> int:
    """
    Load the assets and play one round.

    :param config: Session settings
    :param io_interface: Where the game talks to the player (default console)
    :return: The process exit code
    """
    io_interface = io_interface or ConsoleIOInterface()
    if config.transcript is not None:
        # The transcript must be writable before any of the round is shown
        try:
            with open(config.transcript, "a", encoding="utf-8"):
                pass
        except OSError as exc:
            logger.error("Cannot write transcript %s: %s", config.transcript, exc)
            io_interface.output("[ERR] Cannot write transcript.")
            return EXIT_ARGUMENTS
        io_interface = LoggingIOInterface(config.transcript, io_interface)

    try:
        glyphs = load_glyphs(config.asset_dir)
    except AssetAllocationError as exc:
        logger.error("%s", exc)
        io_interface.output("[ERR] Out of memory.")
        return EXIT_MEMORY
    except AssetError as exc:
        logger.error("%s", exc)
        io_interface.output("[ERR] Invalid File(s).")
        return EXIT_FILES

    seed = config.resolved_seed()
    logger.debug("Starting round with %s, seed %d", config.to_dict(), seed)
    engine = GameEngine.from_glyphs(glyphs, seed, io_interface)

    try:
        engine.play()
    except (EOFError, KeyboardInterrupt) as exc:
        logger.warning("Round aborted before it finished")
        EventBus.get_instance().emit(
            EngineEventType.ERROR,
            {"game_id": engine.game_id, "error": type(exc).__name__},
        )
        return EXIT_ABORTED
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = parse_args(argv)
    except SystemExit as exc:
        # argparse exits 0 for --help and 2 for usage errors
        return EXIT_ARGUMENTS if exc.code else EXIT_OK

    configure_logging(args.verbose)
    return run(GameConfig.from_args(args))


if __name__ == "__main__":
    sys.exit(main())

"""
Booking chat entry point.

Launches the terminal chat, either interactively or by replaying one of
the scripted scenarios.

Usage:
    Interactive:  python main.py
    Scenario:     python main.py --scenario booking
"""

import logging
import sys

from therapy_booking.config import settings

logger = logging.getLogger(__name__)


def _run_console_mode(argv: list[str]) -> None:
    """Start the console chat (no external services required)."""
    from console_demo import main as console_main

    logger.info("Starting booking chat for '%s'", settings.business.name)
    console_main(argv)


if __name__ == "__main__":
    _run_console_mode(sys.argv[1:])

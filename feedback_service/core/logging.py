"""Logging setup for the feedback service.

Call ``configure_logging()`` once at startup; every module then uses
``logging.getLogger(__name__)``.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "feedback_service"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Avoid stacking handlers when the app is created more than once (tests)
    for handler in root.handlers:
        if handler.get_name() == HANDLER_NAME:
            return

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

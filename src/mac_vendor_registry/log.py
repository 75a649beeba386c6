from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "mac_vendor_registry"


def configure_logging(level: int | str = logging.INFO, console: Console | None = None) -> logging.Logger:
    """
    Send this package's log records to a rich console (stderr by default).

    Library code never calls this; applications opt in. Calling it again
    replaces the handler it installed before.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if isinstance(h, RichHandler):
            logger.removeHandler(h)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger

"""Logging configuration for the ``hw`` process.

Modules log through ``logging.getLogger(__name__)``; this module only
decides where records go.  ``--verbose`` lowers the threshold to DEBUG.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Install a stderr handler on the ``hw_client`` logger."""
    level = logging.DEBUG if verbose else logging.WARNING
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s " + LOG_FORMAT))
    else:
        from hw_client.cli.console import get_rich_console

        handler = RichHandler(console=get_rich_console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("hw_client")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

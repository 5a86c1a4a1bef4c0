"""Logging setup for command-line use."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", verbose: bool = False) -> None:
    """Install a single stream handler on the root logger.

    Library code only ever calls ``logging.getLogger(__name__)``; handlers are
    the application's business, so this is invoked from the CLI entry point.
    """
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root = logging.getLogger()
    root.setLevel(resolved)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(resolved)
    handler.setFormatter(formatter)
    root.addHandler(handler)

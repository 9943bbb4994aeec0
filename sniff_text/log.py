import logging

from rich.console import Console
from rich.logging import RichHandler

from sniff_text import config

_HANDLER_NAME = "sniff_text.rich"


def setup_logging(level=None, console: Console = None) -> logging.Logger:
    """
    Attach a rich console handler to the ``sniff_text`` logger.

    Args:
        level: Logging level name or number (defaults to SNIFF_TEXT_LOG_LEVEL).
        console: Optional rich console (stderr when omitted).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("sniff_text")
    level = level if level is not None else config.get("log_level")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger

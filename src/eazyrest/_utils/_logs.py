import logging
import sys
from typing import Optional

from .constants import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(should_debug: Optional[bool] = None) -> None:
    """Attach a stderr handler to the ``eazyrest`` logger.

    Calling it more than once only adjusts the level.
    """
    logger.setLevel(logging.DEBUG if should_debug else logging.WARNING)

    if any(getattr(h, "_eazyrest_handler", False) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    handler._eazyrest_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

"""Process-wide logging configuration for server and job entrypoints."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def logging_configure(level: str = "INFO") -> None:
    """Install one stderr stream handler on the root logger.

    Repeated calls replace the handler instead of stacking duplicates.

    Args:
        level: Logging level name.

    Returns:
        None: Configures logging as a side effect.

    Raises:
        ValueError: Raised when the level name is unknown.
    """

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr, force=True)

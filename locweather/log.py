import logging

import structlog


def configure_logging(level: int = logging.INFO) -> None:
    """
    Configure structlog to only emit events at or above `level`. The library
    never does this on import, it is up to the application.
    """

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )

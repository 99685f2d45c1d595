# File: articles_api/core/logging_config.py

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once for the process.

    Modules log through ``logging.getLogger(__name__)``.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)

"""Logging utilities for the Resend client.

The library never configures handlers; applications do that via
``logging.basicConfig()`` or their own logging setup.

Example:
    Typical usage in a module::

        from resend_client.logger import get_logger

        logger = get_logger("ResendClient")
        logger.debug("POST /emails")
"""

import logging


def get_logger(name: str = "ResendClient") -> logging.Logger:
    """Retrieve a logger instance.

    Args:
        name: The logger name. Defaults to "ResendClient".

    Returns:
        A ``logging.Logger`` instance bound to the given name.
    """
    return logging.getLogger(name)

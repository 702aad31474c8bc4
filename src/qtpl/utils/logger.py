"""Loggers for the qtpl package.

Every module logs under the ``qtpl`` namespace, so an application can tune
template compilation output with one ``logging.getLogger("qtpl")`` call.
The namespace root carries a NullHandler; qtpl never configures output.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "qtpl"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``qtpl`` namespace.

    Module names from inside the package (``qtpl.compiler``) are used as
    they are; any other name is nested under the root.

    Example:
        >>> get_logger("qtpl.compiler").name
        'qtpl.compiler'
        >>> get_logger("site").name
        'qtpl.site'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

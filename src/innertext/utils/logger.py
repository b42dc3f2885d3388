"""Logger namespace for innertext.

Every module logs under ``innertext.*`` so applications can tune the whole
package with one ``logging.getLogger("innertext")`` call. Only the loading
edges log (unknown node types, dropped positions, ignored config keys), all
at DEBUG. Text collection never logs. No handlers are installed here.

Example:
    >>> from innertext.utils.logger import get_logger
    >>> get_logger(__name__).debug("Ignoring config key %r", "indent")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "innertext"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``innertext`` namespace.

    Module names already in the namespace (``innertext.serialization``) are
    used as is; anything else is nested under it.

    Example:
        >>> get_logger("loader").name
        'innertext.loader'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)

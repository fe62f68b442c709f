"""Namespaced loggers for the Sangrado lexer.

Every module logs under the ``sangrado`` logger, so one call enables the
lexer's DEBUG trace of indentation transitions:

    >>> import logging
    >>> logging.getLogger("sangrado").setLevel(logging.DEBUG)

The package never installs handlers; that is left to the application.
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, nested under ``sangrado``.

    Names outside the package namespace get the prefix added, so
    ``get_logger("mymodule").name == "sangrado.mymodule"``.
    """
    if not (name == "sangrado" or name.startswith("sangrado.")):
        name = f"sangrado.{name}"
    return logging.getLogger(name)

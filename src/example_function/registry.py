# src/example_function/registry.py

"""
Lookup of handlers by the ``"<module>.<function>"`` name a Lambda runtime
uses to select its entry point (for example ``functions.hello``).
"""

import logging
from typing import Any, Callable

from . import functions, goodbye, hello
from .exceptions import HandlerNotFoundError

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]

HANDLERS: dict[str, Handler] = {
    "functions.hello": functions.hello,
    "functions.goodbye": functions.goodbye,
    "functions.diagnostics": functions.diagnostics,
    "hello.hello": hello.hello,
    "goodbye.goodbye": goodbye.goodbye,
}


def handler_names() -> list[str]:
    return sorted(HANDLERS)


def resolve_handler(name: str) -> Handler:
    """Return the handler registered under *name* or raise HandlerNotFoundError."""
    try:
        return HANDLERS[name]
    except KeyError:
        logger.warning(
            "Unknown handler requested.",
            extra={"handler_name": name, "known_handlers": handler_names()},
        )
        raise HandlerNotFoundError(name) from None

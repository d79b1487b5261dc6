# src/example_function/functions.py

"""
Plain-string example handlers and the diagnostics handler.

Handler names as a runtime sees them: ``functions.hello``,
``functions.goodbye`` and ``functions.diagnostics``.
"""

from pprint import pprint
from typing import Any

from .schemas import ContextAccessors, Event


def _as_text(value: Any) -> str:
    """Render a context value for a report line; null renders as empty."""
    return "" if value is None else str(value)


def hello(event: Event, context: ContextAccessors | None = None) -> str:
    name = event.get("name")
    if name is not None:
        return f"Hello, {name}!"
    return "Hello, World!"


def goodbye(event: Event, context: ContextAccessors | None = None) -> str:
    # The fallback deliberately has no trailing punctuation.
    name = event.get("name")
    if name is not None:
        return f"Goodbye, {name}!"
    return "Goodbye"


def diagnostics(event: Event, context: ContextAccessors) -> None:
    """
    Dump the event and every invocation context field to stdout.

    The remaining execution time is printed first and again last. Errors
    raised while reading the context are not caught.
    """
    pprint(event)

    print(f"Execution Time Remaining:{_as_text(context.get_remaining_time_in_millis())}")

    print(f"Request ID:{_as_text(context.aws_request_id)}")
    print(f"Invoked Function ARN:{_as_text(context.invoked_function_arn)}")
    print(f"Log Group Name:{_as_text(context.log_group_name)}")
    print(f"Log Stream Name:{_as_text(context.log_stream_name)}")
    print(f"Function Name:{_as_text(context.function_name)}")
    print(f"Function Version:{_as_text(context.function_version)}")
    print(f"Memory Limit (MB):{_as_text(context.memory_limit_in_mb)}")
    print(f"Client Context:{_as_text(context.client_context)}")
    print(f"Identity (Cognito):{_as_text(context.identity)}")
    print(f"Execution Time Remaining:{_as_text(context.get_remaining_time_in_millis())}")

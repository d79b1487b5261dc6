# src/example_function/goodbye.py

from .hello import format_name
from .schemas import ContextAccessors, Event, GreetingResponse


def goodbye(data: Event, context: ContextAccessors | None = None) -> GreetingResponse:
    return {
        "msg": f"Goodbye, {format_name(data)}!",
        "data": data,
    }

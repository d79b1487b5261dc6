# src/example_function/hello.py

from .schemas import ContextAccessors, Event, GreetingResponse


def format_name(data: Event) -> str:
    """
    Render ``data["name"]`` for interpolation.

    ``name`` is required but never validated: an absent or null value renders
    as an empty string, so the message comes out as ``"Hello, !"``.
    """
    name = data.get("name")
    return "" if name is None else str(name)


def hello(data: Event, context: ContextAccessors | None = None) -> GreetingResponse:
    """Greet ``data["name"]`` and echo the whole event back."""
    return {
        "msg": f"Hello, {format_name(data)}!",
        "data": data,
    }

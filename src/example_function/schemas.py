# src/example_function/schemas.py

from typing import Any, Mapping, Protocol, TypedDict

from pydantic import BaseModel, ConfigDict

# --- Static Type Hinting (for mypy and IDEs) ---

Event = Mapping[str, Any]


class GreetingResponse(TypedDict):
    """The structured response returned by the data-echo handlers."""

    msg: str
    data: Event


class ContextAccessors(Protocol):
    """
    The read-only accessor surface shared by the Lambda runtime context and
    InvocationContext.
    """

    aws_request_id: str
    invoked_function_arn: str
    log_group_name: str
    log_stream_name: str
    function_name: str
    function_version: str
    memory_limit_in_mb: int
    client_context: Any
    identity: Any

    def get_remaining_time_in_millis(self) -> int: ...


# --- Invocation context record ---


class InvocationContext(BaseModel):
    """
    Read-only metadata describing one invocation, built by the host.

    Mirrors the accessor surface of the AWS Lambda Python context so the
    handlers and the Powertools logger can consume either interchangeably.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    remaining_time_in_millis: int
    aws_request_id: str
    invoked_function_arn: str
    log_group_name: str
    log_stream_name: str
    function_name: str
    function_version: str
    memory_limit_in_mb: int
    client_context: Any = None
    identity: Any = None

    def get_remaining_time_in_millis(self) -> int:
        return self.remaining_time_in_millis

    @classmethod
    def from_lambda_context(cls, context: ContextAccessors) -> "InvocationContext":
        """Snapshot a live Lambda context into an immutable record."""
        if isinstance(context, cls):
            return context
        return cls(
            remaining_time_in_millis=context.get_remaining_time_in_millis(),
            aws_request_id=context.aws_request_id,
            invoked_function_arn=context.invoked_function_arn,
            log_group_name=context.log_group_name,
            log_stream_name=context.log_stream_name,
            function_name=context.function_name,
            function_version=context.function_version,
            memory_limit_in_mb=int(context.memory_limit_in_mb),
            client_context=context.client_context,
            identity=context.identity,
        )

"""
The Lambda adapter for the example function handlers.

This module holds the deployable entry points. It is responsible for:
1.  Initializing the AWS Lambda Powertools Logger from the environment config.
2.  Injecting the Lambda context into every structured log line.
3.  Delegating to the plain handlers and passing their results through
    unchanged; handler failures are logged and re-raised to the host.

Point the function's handler setting at one of the named entry points
(``example_function.app.hello_handler`` and so on), or at
``example_function.app.handler`` and choose the target with ``HANDLER_NAME``.
"""

from typing import Any

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from . import functions, goodbye, hello
from .config import get_config
from .exceptions import ConfigurationError, get_error_context
from .registry import Handler, handler_names, resolve_handler
from .schemas import InvocationContext


def _check_handler_name(name: str) -> str:
    """Fail at cold start when HANDLER_NAME matches no registered handler."""
    if name not in handler_names():
        raise ConfigurationError(
            f"HANDLER_NAME must be one of {handler_names()}, not '{name}'",
            context={"handler_name": name},
        )
    return name


# --- Global & Reusable Components ---
CONFIG = get_config()
_check_handler_name(CONFIG.handler_name)

logger = Logger(service=CONFIG.service_name, level=CONFIG.log_level)


def _invoke(
    handler_name: str, target: Handler, event: dict, context: LambdaContext
) -> Any:
    logger.append_keys(handler_name=handler_name, environment=CONFIG.environment)
    logger.debug("Invoking handler.", extra={"event_type": type(event).__name__})
    try:
        result = target(event, InvocationContext.from_lambda_context(context))
    except Exception as e:
        logger.exception("Handler raised an error.", extra={"error": get_error_context(e)})
        raise
    logger.debug(
        "Handler completed.", extra={"result_type": type(result).__name__}
    )
    return result


@logger.inject_lambda_context(log_event=CONFIG.log_event)
def hello_handler(event: dict, context: LambdaContext) -> str:
    return _invoke("functions.hello", functions.hello, event, context)


@logger.inject_lambda_context(log_event=CONFIG.log_event)
def goodbye_handler(event: dict, context: LambdaContext) -> str:
    return _invoke("functions.goodbye", functions.goodbye, event, context)


@logger.inject_lambda_context(log_event=CONFIG.log_event)
def diagnostics_handler(event: dict, context: LambdaContext) -> None:
    return _invoke("functions.diagnostics", functions.diagnostics, event, context)


@logger.inject_lambda_context(log_event=CONFIG.log_event)
def structured_hello_handler(event: dict, context: LambdaContext) -> dict:
    return _invoke("hello.hello", hello.hello, event, context)


@logger.inject_lambda_context(log_event=CONFIG.log_event)
def structured_goodbye_handler(event: dict, context: LambdaContext) -> dict:
    return _invoke("goodbye.goodbye", goodbye.goodbye, event, context)


@logger.inject_lambda_context(log_event=CONFIG.log_event)
def handler(event: dict, context: LambdaContext) -> Any:
    """Generic entry point that dispatches on the configured HANDLER_NAME."""
    target = resolve_handler(CONFIG.handler_name)
    return _invoke(CONFIG.handler_name, target, event, context)

"""
Shared fixtures for unit tests.
"""

from __future__ import annotations

import os
import uuid

import pytest

from example_function.schemas import InvocationContext


@pytest.fixture(scope="session", autouse=True)
def _env_vars():
    """
    Ensures a deterministic environment for every test run.
    Overwrite *only* the variables needed by the adapter.
    """
    original = os.environ.copy()
    os.environ.setdefault("SERVICE_NAME", "example-function-test")
    os.environ.setdefault("LOG_LEVEL", "INFO")
    yield
    os.environ.clear()
    os.environ.update(original)


# ---------- Minimal, realistic dummy events ---------- #
@pytest.fixture
def named_event() -> dict:
    return {"name": "Ada", "source": "unit-test", "tags": ["a", "b"]}


@pytest.fixture
def invocation_context() -> InvocationContext:
    """A fully populated context record with 500ms remaining."""
    return InvocationContext(
        remaining_time_in_millis=500,
        aws_request_id="req-" + uuid.uuid4().hex,
        invoked_function_arn="arn:aws:lambda:eu-west-1:000000000000:function:example",
        log_group_name="/aws/lambda/example",
        log_stream_name="2026/10/17/[$LATEST]abcdef",
        function_name="example",
        function_version="$LATEST",
        memory_limit_in_mb=128,
        client_context=None,
        identity=None,
    )

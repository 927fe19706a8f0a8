"""Fixtures for CallbackContext contract tests."""

from collections.abc import Iterable

import pytest

from itemflow.adapters.callback_contexts import (
    ExecutorCallbackContext,
    InlineCallbackContext,
    RunLoopCallbackContext,
)
from itemflow.interfaces.callback_context import CallbackContext


@pytest.fixture(params=["inline", "executor", "run-loop"])
def callback_context(request: pytest.FixtureRequest) -> Iterable[CallbackContext]:
    """Yield a fresh CallbackContext for the requested implementation.

    Supported params:
      - `"inline"` → InlineCallbackContext
      - `"executor"` → ExecutorCallbackContext (shut down afterwards)
      - `"run-loop"` → RunLoopCallbackContext owned by the test thread
    """
    match request.param:
        case "inline":
            yield InlineCallbackContext()
        case "executor":
            ctx = ExecutorCallbackContext()
            yield ctx
            ctx.shutdown()
        case "run-loop":
            yield RunLoopCallbackContext()
        case _:
            raise ValueError(f"unknown callback context type: {request.param}")

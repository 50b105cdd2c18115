"""
Dual result channel for pin operations.

Each operation returns an asyncio.Task that can be awaited, and optionally
takes a callback invoked as `callback(error, result)`. Both are fed from
the task's completion, so they always agree on the outcome.
"""
import asyncio
import functools
from typing import Any, Callable, Coroutine, Optional, Set

Callback = Callable[[Optional[BaseException], Any], Any]


def deferred(operation: Coroutine[Any, Any, Any],
             callback: Optional[Callback] = None,
             pending: Optional[Set[asyncio.Task]] = None) -> asyncio.Task:
    """
    Schedules `operation` on the running loop and wires `callback` to its outcome.
    When `pending` is given the task is held there until it finishes, since
    the event loop itself only keeps a weak reference to running tasks.
    Must be called from within a running event loop.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        operation.close()
        raise
    task = loop.create_task(operation)
    if pending is not None:
        pending.add(task)
        task.add_done_callback(pending.discard)
    if callback is not None:
        task.add_done_callback(functools.partial(_notify, callback))
    return task


def _notify(callback: Callback, task: asyncio.Task):
    if task.cancelled():
        callback(asyncio.CancelledError(), None)
        return
    # Retrieving the exception here also marks it as handled for callback-only callers.
    error = task.exception()
    if error is not None:
        callback(error, None)
    else:
        callback(None, task.result())

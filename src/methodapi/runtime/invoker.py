"""Calls a bound service method and normalizes what it returns."""

import inspect
from typing import Any, Callable, List, Tuple

from starlette.concurrency import run_in_threadpool

from .classifier import Plan
from .exceptions import ReturnShapeError


def split_arguments(plan: Plan, args: List[Any]) -> Tuple[list, dict]:
    """Split bound arguments into positional and keyword-only parts."""
    positional = list(args[: plan.positional_count])
    keywords = dict(
        zip(plan.param_names[plan.positional_count :], args[plan.positional_count :])
    )
    return positional, keywords


def to_return_list(plan: Plan, value: Any) -> Tuple[Any, ...]:
    """Turn a raw return value into one entry per return slot."""
    if plan.return_count == 0:
        return ()
    if plan.return_count == 1:
        return (value,)
    if not isinstance(value, tuple) or len(value) != plan.return_count:
        raise ReturnShapeError(
            f"{plan.service_name}.{plan.method_name} must return a tuple of "
            f"{plan.return_count} values, got {type(value).__name__}"
        )
    return value


async def invoke(
    plan: Plan,
    method: Callable[..., Any],
    args: List[Any],
    run_sync_in_threadpool: bool = True,
) -> Tuple[Any, ...]:
    """Call ``method`` with the bound arguments.

    Coroutine functions are awaited; sync methods run in Starlette's
    threadpool unless disabled. Exceptions raised by the method are not
    caught here.
    """
    positional, keywords = split_arguments(plan, args)

    if inspect.iscoroutinefunction(method):
        result = await method(*positional, **keywords)
    elif run_sync_in_threadpool:
        result = await run_in_threadpool(method, *positional, **keywords)
    else:
        result = method(*positional, **keywords)

    if inspect.isawaitable(result):
        result = await result

    return to_return_list(plan, result)

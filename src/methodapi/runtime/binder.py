"""Builds the argument list for a service method from the incoming request."""

from dataclasses import dataclass
from typing import Any, List, Optional

from pydantic import TypeAdapter
from starlette.requests import Request

from ..core.utils.json import decode_json
from .classifier import Plan
from .context import Context
from .exceptions import PayloadTooLargeError
from .writer import ResponseWriter


@dataclass
class CallContext:
    """Per-request values available for binding."""

    context: Context
    request: Request
    writer: ResponseWriter
    body: Any = None


async def read_body(request: Request, max_body_size: Optional[int] = None) -> bytes:
    """Read the whole request body, enforcing ``max_body_size`` when set.

    The body stays cached on the request, so a method that also takes the
    raw request can read it again.

    Raises:
        PayloadTooLargeError: If the declared or actual size exceeds the limit.
    """
    if max_body_size:
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > max_body_size:
            raise PayloadTooLargeError(
                f"request body of {declared} bytes exceeds limit of {max_body_size} bytes"
            )

    body = await request.body()
    if max_body_size and len(body) > max_body_size:
        raise PayloadTooLargeError(
            f"request body of {len(body)} bytes exceeds limit of {max_body_size} bytes"
        )
    return body


async def bind(
    plan: Plan,
    call: CallContext,
    body_adapter: Optional[TypeAdapter] = None,
    max_body_size: Optional[int] = None,
) -> List[Any]:
    """Fill every parameter slot of ``plan`` from ``call``.

    Args:
        plan: Role assignment of the target method.
        call: Context, request and writer of the current request.
        body_adapter: Decoder for the body parameter, required if the plan
            has a body role.
        max_body_size: Optional limit on the request body in bytes.

    Returns:
        Arguments in declaration order, receiver excluded.

    Raises:
        BadRequestError: If the body cannot be decoded.
        PayloadTooLargeError: If the body exceeds ``max_body_size``.
    """
    args: List[Any] = [None] * plan.param_count

    if plan.context is not None:
        args[plan.context] = call.context
    if plan.http_request is not None:
        args[plan.http_request] = call.request
    if plan.http_response is not None:
        args[plan.http_response] = call.writer
    if plan.body is not None:
        data = await read_body(call.request, max_body_size)
        call.body = decode_json(body_adapter, data)
        args[plan.body] = call.body

    return args

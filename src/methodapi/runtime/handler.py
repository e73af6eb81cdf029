"""Factory for request handlers generated from service methods.

A handler runs four steps against the Plan computed at registration:

1. bind: build arguments from the request (context, raw handles, JSON body)
2. invoke: call the method
3. resolve: pick status code and payload from the return values
4. write: encode the payload as JSON and write it

Example:
    ```python
    from fastapi import FastAPI
    from methodapi import make_handler

    class Greeter:
        def hello(self, name: str) -> str:
            return f"Hello, {name}"

    app = FastAPI()
    app.post("/hello")(make_handler(Greeter(), "hello").endpoint)
    ```
"""

import logging
from typing import Any, Callable, Optional

from starlette.requests import Request
from starlette.responses import Response

from ..core.utils.json import body_adapter
from .binder import CallContext, bind
from .classifier import Plan, classify
from .context import Context
from .encoder import write
from .exceptions import RequestError
from .invoker import invoke
from .resolver import resolve
from .settings import AdapterSettings
from .writer import ResponseWriter, http_error

logger = logging.getLogger(__name__)


class RequestHandler:
    """Request handler bound to one method of one service object.

    Calling it takes a ``ResponseWriter`` and a Starlette ``Request`` and
    returns nothing; all request-level failures end up written to the
    writer. Exceptions raised by the method itself propagate.
    """

    def __init__(
        self, service: Any, plan: Plan, settings: Optional[AdapterSettings] = None
    ):
        self.service = service
        self.plan = plan
        self.settings = settings or AdapterSettings()
        self._method = getattr(service, plan.method_name)
        self._body_adapter = (
            body_adapter(plan.body_annotation) if plan.body is not None else None
        )

    @property
    def name(self) -> str:
        return f"{self.plan.service_name}.{self.plan.method_name}"

    async def __call__(self, writer: ResponseWriter, request: Request) -> None:
        call = CallContext(
            context=Context.from_request(request, self.settings.request_timeout),
            request=request,
            writer=writer,
        )
        try:
            try:
                args = await bind(
                    self.plan,
                    call,
                    self._body_adapter,
                    self.settings.max_body_size,
                )
            except RequestError as e:
                logger.info(f"{self.name}: rejected request (HTTP {e.status_code}): {e}")
                http_error(writer, e.message, e.status_code)
                return

            returns = await invoke(
                self.plan,
                self._method,
                args,
                run_sync_in_threadpool=self.settings.run_sync_in_threadpool,
            )
            write(writer, resolve(self.plan, returns))
        finally:
            await request.close()

    async def endpoint(self, request: Request) -> Response:
        """Starlette/FastAPI endpoint running this handler."""
        writer = ResponseWriter()
        await self(writer, request)
        return writer.to_response()


def make_handler(
    service: Any, method_name: str, settings: Optional[AdapterSettings] = None
) -> RequestHandler:
    """Create a request handler for ``service.method_name``.

    Intended for start-up and route registration, not per request.

    Args:
        service: Object whose method is exposed.
        method_name: Name of a public method on ``type(service)``.
        settings: Handler settings; loaded from the environment when omitted.

    Returns:
        RequestHandler for the method.

    Raises:
        ClassificationError: If the method is missing or its signature cannot
            be mapped onto the request/response contract.
    """
    plan = classify(type(service), method_name)
    handler = RequestHandler(service, plan, settings or AdapterSettings.from_env())
    logger.debug(f"Created handler for {handler.name}")
    return handler


def as_endpoint(handler: RequestHandler) -> Callable[[Request], Any]:
    """Adapt a handler to a plain ``async (Request) -> Response`` endpoint."""

    async def endpoint(request: Request) -> Response:
        return await handler.endpoint(request)

    endpoint.__name__ = handler.plan.method_name
    return endpoint

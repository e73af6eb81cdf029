"""Factory for FastAPI applications serving service methods.

Routes are described by a registry mapping ``(HTTP_METHOD, path)`` to either
a ready ``RequestHandler`` or a ``(service, method_name)`` pair:

    ```python
    registry = {
        ("GET", "/api/health"): (health, "check"),
        ("POST", "/api/orders"): (orders, "create"),
    }
    app = create_app(registry)
    ```

Every handler is created when the app is built, so a bad method signature
fails start-up instead of a request.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from fastapi import FastAPI

from .classifier import public_methods
from .handler import RequestHandler, make_handler
from .settings import AdapterSettings

logger = logging.getLogger(__name__)

RouteTarget = Union[RequestHandler, Tuple[Any, str]]
RouteRegistry = Dict[Tuple[str, str], RouteTarget]

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH")


def service_routes(
    service: Any, prefix: str = "", http_method: str = "POST"
) -> RouteRegistry:
    """Build a registry exposing every public method of ``service``.

    Each method ``name`` is served at ``{prefix}/{name}``.
    """
    base = "/" + prefix.strip("/") if prefix.strip("/") else ""
    return {
        (http_method, f"{base}/{name}"): (service, name)
        for name in public_methods(type(service))
    }


def add_route(
    app: FastAPI,
    method: str,
    path: str,
    target: RouteTarget,
    settings: Optional[AdapterSettings] = None,
) -> bool:
    """Register one route on ``app``.

    Returns:
        True if the route was added, False if the HTTP method is unsupported.

    Raises:
        ClassificationError: If the target method cannot be adapted.
    """
    method_upper = method.upper()
    if method_upper not in SUPPORTED_METHODS:
        logger.warning(
            f"Unsupported HTTP method '{method}' for path '{path}'. Skipping."
        )
        return False

    if isinstance(target, RequestHandler):
        handler = target
    else:
        service, method_name = target
        handler = make_handler(service, method_name, settings)

    app.add_api_route(
        path,
        handler.endpoint,
        methods=[method_upper],
        name=handler.name,
    )
    logger.debug(f"Registered {method_upper} {path} -> {handler.name}")
    return True


def create_app(
    route_registry: RouteRegistry,
    settings: Optional[AdapterSettings] = None,
    title: str = "methodapi",
) -> FastAPI:
    """Create FastAPI app with routes from registry.

    Args:
        route_registry: Mapping of (HTTP_METHOD, path) -> handler or
            (service, method_name).
        settings: Settings shared by all handlers; loaded from the
            environment when omitted.
        title: Application title.

    Returns:
        Configured FastAPI application with routes registered.
    """
    app = FastAPI(title=title)
    settings = settings or AdapterSettings.from_env()

    for (method, path), target in route_registry.items():
        add_route(app, method, path, target, settings)

    return app

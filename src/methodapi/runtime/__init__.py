"""Signature classification and the per-request handler pipeline."""

from .app import add_route, create_app, service_routes
from .classifier import Plan, classify
from .context import Context
from .exceptions import (
    BadRequestError,
    ClassificationError,
    EncodingError,
    MethodApiError,
    MethodNotFound,
    PayloadTooLargeError,
    RequestError,
    ReturnShapeError,
    TooManyArguments,
    TooManyReturnValues,
    UnsupportedBodyType,
)
from .handler import RequestHandler, as_endpoint, make_handler
from .models import ErrorResponse, ResolvedOutcome
from .settings import AdapterSettings
from .writer import ResponseWriter

__all__ = [
    "AdapterSettings",
    "BadRequestError",
    "ClassificationError",
    "Context",
    "EncodingError",
    "ErrorResponse",
    "MethodApiError",
    "MethodNotFound",
    "PayloadTooLargeError",
    "Plan",
    "RequestError",
    "RequestHandler",
    "ResolvedOutcome",
    "ResponseWriter",
    "ReturnShapeError",
    "TooManyArguments",
    "TooManyReturnValues",
    "UnsupportedBodyType",
    "add_route",
    "as_endpoint",
    "classify",
    "create_app",
    "make_handler",
    "service_routes",
]

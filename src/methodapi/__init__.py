# Load .env vars from file before everything else
from dotenv import load_dotenv

load_dotenv()

from .logger import setup_logging  # noqa: E402

setup_logging()

from .runtime import (  # noqa: E402
    AdapterSettings,
    BadRequestError,
    ClassificationError,
    Context,
    ErrorResponse,
    MethodNotFound,
    Plan,
    RequestHandler,
    ResponseWriter,
    TooManyArguments,
    TooManyReturnValues,
    add_route,
    as_endpoint,
    classify,
    create_app,
    make_handler,
    service_routes,
)

__all__ = [
    "AdapterSettings",
    "BadRequestError",
    "ClassificationError",
    "Context",
    "ErrorResponse",
    "MethodNotFound",
    "Plan",
    "RequestHandler",
    "ResponseWriter",
    "TooManyArguments",
    "TooManyReturnValues",
    "add_route",
    "as_endpoint",
    "classify",
    "create_app",
    "make_handler",
    "service_routes",
]

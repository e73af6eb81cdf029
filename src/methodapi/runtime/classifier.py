"""Signature classification for service methods.

Maps the parameters and return values of a method onto fixed roles:

Parameters (after the receiver):
    - ``Context``: cancellation/deadline carrier
    - ``ResponseWriter``: raw response handle
    - ``starlette.requests.Request``: raw request handle
    - anything else: the single JSON body parameter

Return values (``tuple[...]`` annotations give one slot per element):
    - an ``Exception`` subclass, optionally ``Optional``: error
    - ``int`` or ``HTTPStatus``: status code
    - anything else: the single result value

Classification only looks at annotations, never at values, and is cached
per (service type, method name).
"""

import functools
import inspect
import logging
import types
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, List, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from starlette.requests import Request

from .context import Context
from .exceptions import (
    ClassificationError,
    MethodNotFound,
    TooManyArguments,
    TooManyReturnValues,
)
from .writer import ResponseWriter

logger = logging.getLogger(__name__)

# Ordered; each role is taken by the first matching parameter only
PARAMETER_ROLES: Tuple[Tuple[str, type], ...] = (
    ("context", Context),
    ("http_response", ResponseWriter),
    ("http_request", Request),
)

CODE_TYPES = (int, HTTPStatus)

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class Plan:
    """Role assignment for one service method.

    Parameter roles are indices into the argument list (receiver excluded),
    return roles are indices into the normalized return tuple. None means
    the method does not use that role.
    """

    service_name: str
    method_name: str
    param_names: Tuple[str, ...]
    positional_count: int
    return_count: int
    context: Optional[int] = None
    http_request: Optional[int] = None
    http_response: Optional[int] = None
    body: Optional[int] = None
    body_annotation: Any = inspect.Parameter.empty
    error: Optional[int] = None
    code: Optional[int] = None
    result: Optional[int] = None

    @property
    def param_count(self) -> int:
        return len(self.param_names)


def public_methods(service_type: type) -> List[str]:
    """Names of the public callable attributes of a service type."""
    return [
        name
        for name in dir(service_type)
        if not name.startswith("_") and callable(getattr(service_type, name, None))
    ]


def _lookup(service_type: type, method_name: str) -> Any:
    if not method_name or method_name.startswith("_"):
        return None
    attr = getattr(service_type, method_name, None)
    if attr is None or not callable(attr) or inspect.isclass(attr):
        return None
    return attr


def _has_receiver(service_type: type, method_name: str) -> bool:
    static = inspect.getattr_static(service_type, method_name, None)
    return not isinstance(static, (staticmethod, classmethod))


def _strip_optional(annotation: Any) -> Any:
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _matches(annotation: Any, role_type: type) -> bool:
    return inspect.isclass(annotation) and issubclass(annotation, role_type)


def is_error_type(annotation: Any) -> bool:
    return _matches(_strip_optional(annotation), Exception)


def is_code_type(annotation: Any) -> bool:
    return annotation in CODE_TYPES


def return_slots(annotation: Any) -> Tuple[Any, ...]:
    """Split a return annotation into its ordered return slots.

    ``None`` has no slots, a fixed-length tuple has one slot per element,
    everything else (including no annotation) is a single slot.
    """
    if annotation is None or annotation is type(None):
        return ()
    if get_origin(annotation) is tuple and annotation is not Tuple:
        args = get_args(annotation)
        if not args or args == ((),):
            return ()
        if args[-1] is not Ellipsis:
            return args
    return (annotation,)


def classify_parameters(
    parameters: List[inspect.Parameter], hints: dict, describe: str
) -> dict:
    roles: dict = {}
    for index, param in enumerate(parameters):
        annotation = hints.get(param.name, param.annotation)

        if param.kind in _VARIADIC:
            raise TooManyArguments(
                f"{describe} too many arguments: cannot populate variadic "
                f"argument {index} ({param.name})"
            )

        role = next(
            (
                name
                for name, role_type in PARAMETER_ROLES
                if name not in roles and _matches(annotation, role_type)
            ),
            None,
        )
        if role is not None:
            roles[role] = index
            continue

        # any leftover argument is read from the request body
        if "body" not in roles:
            roles["body"] = index
            roles["body_annotation"] = annotation
            continue

        raise TooManyArguments(
            f"{describe} too many arguments: not sure how to populate "
            f"argument {index} ({param.name}: {_type_name(annotation)})"
        )
    return roles


def classify_returns(slots: Tuple[Any, ...], describe: str) -> dict:
    roles: dict = {}
    for index, annotation in enumerate(slots):
        if "error" not in roles and is_error_type(annotation):
            roles["error"] = index
            continue
        if "code" not in roles and is_code_type(annotation):
            roles["code"] = index
            continue
        if "result" not in roles:
            roles["result"] = index
            continue
        raise TooManyReturnValues(
            f"{describe} too many return values: not sure what to do with "
            f"value {index} ({_type_name(annotation)})"
        )
    return roles


@functools.lru_cache(maxsize=None)
def classify(service_type: type, method_name: str) -> Plan:
    """Build the role assignment for ``service_type.method_name``.

    Args:
        service_type: Type of the service object.
        method_name: Name of a public method on that type.

    Returns:
        Immutable Plan describing where each role lives.

    Raises:
        MethodNotFound: If the type has no such public method.
        TooManyArguments: If two parameters would need the request body.
        TooManyReturnValues: If two return values would need to be the result.
        ClassificationError: If the annotations cannot be resolved.
    """
    type_name = service_type.__name__
    describe = f"make_handler({type_name}, {method_name!r})"

    method = _lookup(service_type, method_name)
    if method is None:
        raise MethodNotFound(
            f"{describe} type {type_name} has no method {method_name!r}"
        )

    try:
        hints = get_type_hints(method)
        signature = inspect.signature(method)
    except (NameError, TypeError, ValueError) as e:
        raise ClassificationError(f"{describe} cannot read signature: {e}") from e

    parameters = list(signature.parameters.values())
    if _has_receiver(service_type, method_name) and parameters:
        parameters = parameters[1:]

    param_roles = classify_parameters(parameters, hints, describe)
    slots = return_slots(hints.get("return", signature.return_annotation))
    return_roles = classify_returns(slots, describe)

    positional_count = 0
    for param in parameters:
        if param.kind not in _POSITIONAL:
            break
        positional_count += 1

    plan = Plan(
        service_name=type_name,
        method_name=method_name,
        param_names=tuple(param.name for param in parameters),
        positional_count=positional_count,
        return_count=len(slots),
        **param_roles,
        **return_roles,
    )
    logger.debug(f"Classified {type_name}.{method_name}: {plan}")
    return plan


def _type_name(annotation: Any) -> str:
    if annotation is inspect.Parameter.empty:
        return "unannotated"
    if inspect.isclass(annotation):
        return annotation.__name__
    return repr(annotation)

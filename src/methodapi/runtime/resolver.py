"""Turns a method's return values into a status code and payload."""

import logging
from typing import Any, Optional, Tuple

from .classifier import Plan
from .config import (
    DEFAULT_ERROR_CODE,
    DEFAULT_SUCCESS_CODE,
    MAX_STATUS_CODE,
    MIN_STATUS_CODE,
    NO_RESPONSE,
)
from .models import ErrorResponse, ResolvedOutcome

logger = logging.getLogger(__name__)


def _slot(returns: Tuple[Any, ...], index: Optional[int]) -> Any:
    return returns[index] if index is not None else None


def resolve(plan: Plan, returns: Tuple[Any, ...]) -> ResolvedOutcome:
    """Decide status code, error and payload for one call.

    Rules, in order:
    1. A status code of -1 means the method wrote its own response.
    2. No status code (None or 0) defaults to 500 with an error, else 200.
    3. A status code outside 100..999 becomes a 500 error.
    4. Any other status code is used as is, even alongside an error.

    An error always replaces the result with ``{"error": "<message>"}``.
    """
    error = _slot(returns, plan.error)
    if not isinstance(error, BaseException):
        error = None

    code = _slot(returns, plan.code)
    if not isinstance(code, int) or isinstance(code, bool):
        code = 0
    code = int(code)

    if code == NO_RESPONSE:
        return ResolvedOutcome(status_code=NO_RESPONSE, error=error)

    if code == 0:
        code = DEFAULT_SUCCESS_CODE if error is None else DEFAULT_ERROR_CODE

    if not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE:
        logger.warning(
            f"{plan.service_name}.{plan.method_name} returned invalid status code {code}"
        )
        return ResolvedOutcome(
            status_code=DEFAULT_ERROR_CODE,
            payload=ErrorResponse(error=f"invalid status code {code}"),
            error=error,
        )

    if error is not None:
        logger.info(
            f"{plan.service_name}.{plan.method_name} returned error "
            f"(HTTP {code}): {error}"
        )
        return ResolvedOutcome(
            status_code=code, payload=ErrorResponse(error=str(error)), error=error
        )

    return ResolvedOutcome(status_code=code, payload=_slot(returns, plan.result))

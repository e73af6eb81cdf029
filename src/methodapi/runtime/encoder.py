"""Encodes a resolved outcome and writes it to the response."""

import logging

from ..core.utils.json import encode_json
from .config import BODYLESS_STATUS_CODES, DEFAULT_ERROR_CODE, JSON_CONTENT_TYPE
from .exceptions import EncodingError
from .models import ErrorResponse, ResolvedOutcome
from .writer import ResponseWriter, http_error

logger = logging.getLogger(__name__)


def write(writer: ResponseWriter, outcome: ResolvedOutcome) -> None:
    """Write status, headers and JSON body for ``outcome``.

    The payload is encoded before anything is written, so a payload without
    a JSON form still produces a well-formed 500 error body. Suppressed
    outcomes leave the writer untouched.
    """
    if outcome.suppressed:
        return

    status_code = outcome.status_code
    if status_code in BODYLESS_STATUS_CODES or 100 <= status_code < 200:
        writer.write_header(status_code)
        return

    try:
        body = encode_json(outcome.payload)
    except EncodingError as e:
        logger.warning(f"Failed to encode response payload: {e}")
        status_code = DEFAULT_ERROR_CODE
        try:
            body = encode_json(ErrorResponse(error=str(e)))
        except EncodingError as fallback_error:
            logger.error(f"Error encoding error to JSON: {fallback_error}")
            http_error(writer, str(fallback_error), DEFAULT_ERROR_CODE)
            return

    writer.headers["Content-Type"] = JSON_CONTENT_TYPE
    writer.write_header(status_code)
    writer.write(body)
    # covers bytes the method wrote itself before returning
    writer.headers["Content-Length"] = str(len(writer.body))

"""Raw response handle given to service methods and to the encoder."""

import logging
from typing import Optional, Union

from starlette.datastructures import MutableHeaders
from starlette.responses import Response

from .config import DEFAULT_SUCCESS_CODE, TEXT_CONTENT_TYPE

logger = logging.getLogger(__name__)


class ResponseWriter:
    """Mutable response: headers, one status line and a body buffer.

    The first call to ``write_header`` (or ``write``) commits the status;
    later status changes are ignored and logged. Once the handler returns,
    ``to_response`` turns the buffered state into a Starlette ``Response``.
    """

    def __init__(self) -> None:
        self.headers = MutableHeaders()
        self._status_code: Optional[int] = None
        self._body = bytearray()

    @property
    def status_code(self) -> Optional[int]:
        return self._status_code

    @property
    def committed(self) -> bool:
        return self._status_code is not None

    @property
    def body(self) -> bytes:
        return bytes(self._body)

    def write_header(self, status_code: int) -> None:
        if self._status_code is not None:
            logger.warning(
                f"Superfluous write_header({status_code}); "
                f"status {self._status_code} already committed"
            )
            return
        self._status_code = status_code

    def write(self, data: Union[bytes, str]) -> int:
        if self._status_code is None:
            self.write_header(DEFAULT_SUCCESS_CODE)
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._body.extend(data)
        return len(data)

    def to_response(self) -> Response:
        response = Response(
            content=bytes(self._body),
            status_code=self._status_code or DEFAULT_SUCCESS_CODE,
        )
        own = list(self.headers.raw)
        names = {name for name, _ in own}
        response.raw_headers = own + [
            header for header in response.raw_headers if header[0] not in names
        ]
        return response


def http_error(writer: ResponseWriter, message: str, status_code: int) -> None:
    """Write a plain-text error reply."""
    if "content-length" in writer.headers:
        del writer.headers["content-length"]
    writer.headers["Content-Type"] = TEXT_CONTENT_TYPE
    writer.headers["X-Content-Type-Options"] = "nosniff"
    writer.write_header(status_code)
    writer.write(message + "\n")

"""Custom exceptions for the method-to-endpoint runtime."""


class MethodApiError(Exception):
    """Base exception for methodapi errors."""

    pass


class ClassificationError(MethodApiError):
    """Raised when a service method cannot be turned into a handler.

    These are programming mistakes detected at registration time and are
    never raised while serving requests.
    """

    pass


class MethodNotFound(ClassificationError):
    """Raised when the service has no public method with the requested name."""

    pass


class TooManyArguments(ClassificationError):
    """Raised when more than one parameter would have to be read from the body."""

    pass


class TooManyReturnValues(ClassificationError):
    """Raised when more than one return value would have to become the result."""

    pass


class UnsupportedBodyType(ClassificationError):
    """Raised when the body parameter's type cannot be decoded from JSON."""

    pass


class RequestError(MethodApiError):
    """Base exception for per-request client errors.

    The message is written back to the client as a plain-text body with
    ``status_code``.
    """

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(RequestError):
    """Raised when the request body cannot be decoded into the body parameter."""

    status_code = 400


class PayloadTooLargeError(RequestError):
    """Raised when the request body exceeds the configured size limit."""

    status_code = 413


class EncodingError(MethodApiError):
    """Raised when a response payload cannot be encoded as JSON."""

    pass


class ReturnShapeError(MethodApiError, TypeError):
    """Raised when a method returns a value that does not fit its annotation."""

    pass

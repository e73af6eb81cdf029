"""Configuration constants for runtime module."""

# Status code returned by a method to take over the raw response entirely
NO_RESPONSE = -1

# Default status codes when a method does not pick one
DEFAULT_SUCCESS_CODE = 200
DEFAULT_ERROR_CODE = 500

# Content types
JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# Request body limits
MAX_PAYLOAD_SIZE = 10 * 1024 * 1024  # 10MB

# Environment variables read by AdapterSettings.from_env()
ENV_MAX_BODY_SIZE = "METHODAPI_MAX_BODY_SIZE"
ENV_REQUEST_TIMEOUT = "METHODAPI_REQUEST_TIMEOUT"  # seconds
ENV_SYNC_IN_THREADPOOL = "METHODAPI_SYNC_IN_THREADPOOL"

# Status codes whose responses never carry a body
BODYLESS_STATUS_CODES = frozenset({204, 304})

# Range of status codes a method may pick
MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 999

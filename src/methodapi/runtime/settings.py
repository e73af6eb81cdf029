"""Settings for generated handlers."""

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

from .config import (
    ENV_MAX_BODY_SIZE,
    ENV_REQUEST_TIMEOUT,
    ENV_SYNC_IN_THREADPOOL,
    MAX_PAYLOAD_SIZE,
)


class AdapterSettings(BaseModel):
    """Per-handler settings.

    Attributes:
        max_body_size: Largest accepted request body in bytes; None or 0
            disables the limit.
        request_timeout: Seconds until the deadline carried by ``Context``.
            Not enforced by the handler itself.
        run_sync_in_threadpool: Run sync methods in Starlette's threadpool
            instead of on the event loop.
    """

    model_config = ConfigDict(frozen=True)

    max_body_size: Optional[int] = MAX_PAYLOAD_SIZE
    request_timeout: Optional[float] = None
    run_sync_in_threadpool: bool = True

    @classmethod
    def from_env(cls) -> "AdapterSettings":
        """Load settings from environment variables, falling back to defaults."""
        env_fields = {
            "max_body_size": ENV_MAX_BODY_SIZE,
            "request_timeout": ENV_REQUEST_TIMEOUT,
            "run_sync_in_threadpool": ENV_SYNC_IN_THREADPOOL,
        }
        values = {}
        for field, env_var in env_fields.items():
            value = os.getenv(env_var)
            if value is not None and value.strip():
                values[field] = value.strip()
        return cls(**values)

"""Data models for resolved method calls."""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel

from .config import NO_RESPONSE


class ErrorResponse(BaseModel):
    """JSON body written when a method reports an error."""

    error: str


@dataclass(frozen=True)
class ResolvedOutcome:
    """Status code, error and payload decided for one call."""

    status_code: int
    payload: Any = None
    error: Optional[BaseException] = None

    @property
    def suppressed(self) -> bool:
        """True when the method took over the response and nothing is written."""
        return self.status_code == NO_RESPONSE

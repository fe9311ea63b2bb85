"""Error response schemas."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class ErrorPayload(BaseModel):
    """Body of every error response.

    ``message`` is the fixed summary of the error category; ``code`` and
    ``description`` come from whoever reported the error.
    """

    model_config = ConfigDict(frozen=True)

    code: Optional[str] = None
    message: str
    description: Optional[str] = None
    properties: Optional[Dict[str, str]] = None  # absent for internal errors

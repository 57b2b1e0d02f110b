from typing import Optional
from pydantic import BaseModel


class ChatError(BaseModel):
    """Standard error response model."""

    error: str
    details: Optional[str] = None

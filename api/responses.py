"""
Shared response models used by several routers.
"""

from typing import Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    """Health check response"""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")
    version: Optional[str] = Field(None, description="Service version")
    timestamp: datetime = Field(
        default_factory=_utcnow, description="Check timestamp"
    )


class DeletedResponse(BaseModel):
    """Result of a delete/clear operation"""

    deleted: str = Field(..., description="What was removed")
    count: Optional[int] = Field(None, description="Number of records removed")

"""Pydantic schemas for SubscriptionEvent."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel


class SubscriptionEventResponse(BaseModel):
    id: UUID
    subscription_id: UUID
    sequence: int
    event_type: str
    details: dict[str, Any]

    model_config = {"from_attributes": True}

    created_at: datetime

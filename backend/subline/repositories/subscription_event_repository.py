"""Repository for SubscriptionEvent records."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from subline.models.subscription_event import SubscriptionEvent


class SubscriptionEventRepository:
    def __init__(self, db: Session):
        self.db = db

    def next_sequence(self, subscription_id: UUID) -> int:
        """Position of the next event in a subscription's trail, starting at 1."""
        current = (
            self.db.query(func.max(SubscriptionEvent.sequence))
            .filter(SubscriptionEvent.subscription_id == subscription_id)
            .scalar()
        )
        return (current or 0) + 1

    def create(
        self,
        *,
        subscription_id: UUID,
        event_type: str,
        details: dict[str, Any],
    ) -> SubscriptionEvent:
        event = SubscriptionEvent(
            subscription_id=subscription_id,
            sequence=self.next_sequence(subscription_id),
            event_type=event_type,
            details=details,
        )
        self.db.add(event)
        self.db.flush()
        return event

    def get_by_subscription(
        self,
        subscription_id: UUID,
        skip: int = 0,
        limit: int = 100,
        event_type: str | None = None,
    ) -> list[SubscriptionEvent]:
        """Events of a subscription, oldest first."""
        query = self.db.query(SubscriptionEvent).filter(
            SubscriptionEvent.subscription_id == subscription_id
        )
        if event_type is not None:
            query = query.filter(SubscriptionEvent.event_type == event_type)
        return query.order_by(SubscriptionEvent.sequence.asc()).offset(skip).limit(limit).all()

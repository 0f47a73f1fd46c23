"""Service for recording events on a subscription's audit trail."""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session

from subline.models.subscription_event import SubscriptionEvent, SubscriptionEventType
from subline.repositories.subscription_event_repository import SubscriptionEventRepository

logger = logging.getLogger(__name__)


class SubscriptionEventService:
    """Service for recording and reading subscription events."""

    def __init__(self, db: Session):
        self.repo = SubscriptionEventRepository(db)

    def emit_event(
        self,
        subscription_id: UUID,
        event_type: SubscriptionEventType,
        details: dict[str, Any],
    ) -> SubscriptionEvent:
        """Add an event inside the caller's transaction.

        Failures are not caught: the caller's write must fail with them.
        """
        event = self.repo.create(
            subscription_id=subscription_id,
            event_type=event_type.value,
            details=details,
        )
        logger.info("Recorded %s on subscription %s", event_type.value, subscription_id)
        return event

    def list_events(
        self,
        subscription_id: UUID,
        skip: int = 0,
        limit: int = 100,
        event_type: SubscriptionEventType | None = None,
    ) -> list[SubscriptionEvent]:
        return self.repo.get_by_subscription(
            subscription_id,
            skip=skip,
            limit=limit,
            event_type=event_type.value if event_type is not None else None,
        )

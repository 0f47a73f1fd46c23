"""Subscription event API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from subline.core.database import get_db
from subline.models.subscription_event import SubscriptionEventType
from subline.repositories.subscription_repository import SubscriptionRepository
from subline.schemas.subscription_event import SubscriptionEventResponse
from subline.services.subscription_event_service import SubscriptionEventService

router = APIRouter()


@router.get(
    "/{subscription_id}/events",
    response_model=list[SubscriptionEventResponse],
    summary="Get the event trail of a subscription",
    responses={404: {"description": "Subscription not found"}},
)
async def list_subscription_events(
    subscription_id: UUID,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    event_type: SubscriptionEventType | None = None,
    db: Session = Depends(get_db),
) -> list[SubscriptionEventResponse]:
    """List events of a subscription, oldest first."""
    if SubscriptionRepository(db).get_by_id(subscription_id) is None:
        raise HTTPException(status_code=404, detail="Subscription not found")
    events = SubscriptionEventService(db).list_events(
        subscription_id, skip=skip, limit=limit, event_type=event_type
    )
    return [SubscriptionEventResponse.model_validate(event) for event in events]

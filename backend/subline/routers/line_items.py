"""Subscription line item API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy.orm import Session

from subline.core.database import get_db
from subline.core.errors import NotFoundError, ValidationError
from subline.schemas.preview import LineItemPreview
from subline.schemas.subscription_line_item import (
    SubscriptionLineItemCreate,
    SubscriptionLineItemFromOrderLine,
    SubscriptionLineItemResponse,
    SubscriptionLineItemUpdate,
)
from subline.services.subscription_line_item_service import SubscriptionLineItemService

router = APIRouter()


@router.post(
    "/",
    response_model=SubscriptionLineItemResponse,
    status_code=201,
    summary="Create subscription line item",
    responses={
        404: {"description": "Subscription or source order line not found"},
        422: {"description": "Validation error"},
    },
)
async def create_line_item(
    data: SubscriptionLineItemCreate,
    db: Session = Depends(get_db),
) -> SubscriptionLineItemResponse:
    """Create a line item, optionally attached to a subscription."""
    service = SubscriptionLineItemService(db)
    try:
        line_item = service.create_line_item(data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors) from e
    return service.serialize(line_item)


@router.post(
    "/from_order_line_item",
    response_model=SubscriptionLineItemResponse,
    status_code=201,
    summary="Convert an order line into a subscription line item",
    responses={
        404: {"description": "Order line or subscription not found"},
        422: {"description": "Validation error"},
    },
)
async def create_line_item_from_order_line(
    data: SubscriptionLineItemFromOrderLine,
    db: Session = Depends(get_db),
) -> SubscriptionLineItemResponse:
    service = SubscriptionLineItemService(db)
    try:
        line_item = service.create_from_order_line_item(data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors) from e
    return service.serialize(line_item)


@router.get(
    "/",
    response_model=list[SubscriptionLineItemResponse],
    summary="List subscription line items",
)
async def list_line_items(
    response: Response,
    subscription_id: UUID | None = None,
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    order_by: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[SubscriptionLineItemResponse]:
    """List line items with pagination."""
    service = SubscriptionLineItemService(db)
    response.headers["X-Total-Count"] = str(service.count_line_items(subscription_id))
    return [
        service.serialize(line_item)
        for line_item in service.list_line_items(
            subscription_id=subscription_id, skip=skip, limit=limit, order_by=order_by
        )
    ]


@router.get(
    "/{line_item_id}",
    response_model=SubscriptionLineItemResponse,
    summary="Get subscription line item",
    responses={404: {"description": "Subscription line item not found"}},
)
async def get_line_item(
    line_item_id: UUID,
    db: Session = Depends(get_db),
) -> SubscriptionLineItemResponse:
    service = SubscriptionLineItemService(db)
    try:
        line_item = service.get_line_item(line_item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return service.serialize(line_item)


@router.get(
    "/{line_item_id}/preview",
    response_model=LineItemPreview | None,
    summary="Preview the next order line of a subscription line item",
    responses={404: {"description": "Subscription line item not found"}},
)
async def preview_line_item(
    line_item_id: UUID,
    db: Session = Depends(get_db),
) -> LineItemPreview | None:
    """Return the placeholder order line, or null when the item can't be supplied."""
    service = SubscriptionLineItemService(db)
    try:
        line_item = service.get_line_item(line_item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return service.dummy_line_item(line_item)


@router.put(
    "/{line_item_id}",
    response_model=SubscriptionLineItemResponse,
    summary="Update subscription line item",
    responses={
        404: {"description": "Subscription line item not found"},
        422: {"description": "Validation error"},
    },
)
async def update_line_item(
    line_item_id: UUID,
    data: SubscriptionLineItemUpdate,
    db: Session = Depends(get_db),
) -> SubscriptionLineItemResponse:
    service = SubscriptionLineItemService(db)
    try:
        line_item = service.update_line_item(line_item_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors) from e
    return service.serialize(line_item)


@router.delete(
    "/{line_item_id}",
    status_code=204,
    summary="Delete subscription line item",
    responses={404: {"description": "Subscription line item not found"}},
)
async def delete_line_item(
    line_item_id: UUID,
    db: Session = Depends(get_db),
) -> None:
    service = SubscriptionLineItemService(db)
    try:
        service.delete_line_item(line_item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

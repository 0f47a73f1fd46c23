"""SubscriptionLineItem schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from subline.interval import IntervalUnits
from subline.schemas.preview import LineItemPreview


class SubscriptionLineItemCreate(BaseModel):
    subscribable_id: UUID | None = None
    quantity: int | None = None
    interval_length: int | None = None
    interval_units: IntervalUnits = IntervalUnits.MONTH
    installments: int | None = None
    end_date: datetime | None = None
    subscription_id: UUID | None = None
    source_line_item_id: UUID | None = None


class SubscriptionLineItemUpdate(BaseModel):
    subscribable_id: UUID | None = None
    quantity: int | None = None
    interval_length: int | None = None
    interval_units: IntervalUnits | None = None
    installments: int | None = None
    end_date: datetime | None = None


class SubscriptionLineItemFromOrderLine(BaseModel):
    """Convert a regular order line into a subscription line item.

    Subscribable and quantity default to the order line's own values.
    """

    order_line_item_id: UUID
    subscription_id: UUID | None = None
    subscribable_id: UUID | None = None
    quantity: int | None = None
    interval_length: int | None = None
    interval_units: IntervalUnits = IntervalUnits.MONTH
    installments: int | None = None


class SubscriptionLineItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    subscription_id: UUID | None = None
    source_line_item_id: UUID | None = None
    subscribable_id: UUID
    quantity: int
    interval_length: int | None = None
    interval_units: str
    installments: int | None = None
    end_date: datetime | None = None
    created_at: datetime
    updated_at: datetime
    dummy_line_item: LineItemPreview | None = None

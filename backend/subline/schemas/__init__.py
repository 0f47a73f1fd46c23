from subline.schemas.preview import AddressPreview, LineItemPreview, OrderPreview
from subline.schemas.subscription_event import SubscriptionEventResponse
from subline.schemas.subscription_line_item import (
    SubscriptionLineItemCreate,
    SubscriptionLineItemFromOrderLine,
    SubscriptionLineItemResponse,
    SubscriptionLineItemUpdate,
)

__all__ = [
    "AddressPreview",
    "LineItemPreview",
    "OrderPreview",
    "SubscriptionEventResponse",
    "SubscriptionLineItemCreate",
    "SubscriptionLineItemFromOrderLine",
    "SubscriptionLineItemResponse",
    "SubscriptionLineItemUpdate",
]

from subline.models.address import Address
from subline.models.order import Order, OrderLineItem, OrderState
from subline.models.subscribable import Subscribable
from subline.models.subscription import Subscription, SubscriptionState
from subline.models.subscription_event import SubscriptionEvent, SubscriptionEventType
from subline.models.subscription_line_item import SubscriptionLineItem
from subline.models.user import User

__all__ = [
    "Address",
    "Order",
    "OrderLineItem",
    "OrderState",
    "Subscribable",
    "Subscription",
    "SubscriptionEvent",
    "SubscriptionEventType",
    "SubscriptionLineItem",
    "SubscriptionState",
    "User",
]

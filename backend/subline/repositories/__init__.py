from subline.repositories.catalog_repository import (
    AddressRepository,
    SubscribableRepository,
    UserRepository,
)
from subline.repositories.order_repository import OrderRepository
from subline.repositories.subscription_event_repository import SubscriptionEventRepository
from subline.repositories.subscription_line_item_repository import SubscriptionLineItemRepository
from subline.repositories.subscription_repository import SubscriptionRepository

__all__ = [
    "AddressRepository",
    "OrderRepository",
    "SubscribableRepository",
    "SubscriptionEventRepository",
    "SubscriptionLineItemRepository",
    "SubscriptionRepository",
    "UserRepository",
]

"""SubscriptionLineItem model.

Associates a subscribable with a subscription and tracks:

- ``subscribable_id``: the item added to future subscription orders
- ``quantity``: how many units of it each order contains
- ``interval_length`` / ``interval_units``: how often orders are placed when
  no subscription supplies the interval
- ``installments``: how many orders are placed before the line item lapses
- ``source_line_item_id``: the order line this line item was converted from
"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from subline.core.database import Base
from subline.interval import Interval, IntervalUnits
from subline.models.shared import UUIDType, generate_uuid


class SubscriptionLineItem(Base):
    __tablename__ = "subscription_line_items"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    subscription_id = Column(
        UUIDType,
        ForeignKey("subscriptions.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    source_line_item_id = Column(
        UUIDType,
        ForeignKey("order_line_items.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    subscribable_id = Column(UUIDType, nullable=True, index=True)
    quantity = Column(Integer, nullable=True)
    interval_length = Column(Integer, nullable=True)
    interval_units = Column(String(10), nullable=False, default=IntervalUnits.MONTH.value)
    installments = Column(Integer, nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def interval(self) -> Interval:
        return Interval.from_columns(self.interval_length, self.interval_units)

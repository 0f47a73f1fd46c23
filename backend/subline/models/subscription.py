from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from subline.core.database import Base
from subline.interval import Interval, IntervalUnits
from subline.models.shared import UUIDType, generate_uuid


class SubscriptionState(str, Enum):
    ACTIVE = "active"
    PENDING_CANCELLATION = "pending_cancellation"
    CANCELED = "canceled"
    INACTIVE = "inactive"


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    user_id = Column(
        UUIDType,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    state = Column(String(30), nullable=False, default=SubscriptionState.ACTIVE.value, index=True)
    interval_length = Column(Integer, nullable=True)
    interval_units = Column(String(10), nullable=False, default=IntervalUnits.MONTH.value)
    actionable_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    shipping_address_id = Column(
        UUIDType,
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    billing_address_id = Column(
        UUIDType,
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def interval(self) -> Interval:
        return Interval.from_columns(self.interval_length, self.interval_units)

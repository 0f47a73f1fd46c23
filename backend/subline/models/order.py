from enum import Enum

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from subline.core.database import Base
from subline.models.shared import UUIDType, generate_uuid


class OrderState(str, Enum):
    CART = "cart"
    ADDRESS = "address"
    PAYMENT = "payment"
    COMPLETE = "complete"
    CANCELED = "canceled"


class Order(Base):
    __tablename__ = "orders"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    number = Column(String(32), unique=True, index=True, nullable=False)
    user_id = Column(
        UUIDType,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    email = Column(String(255), nullable=True)
    currency = Column(String(3), nullable=False, default="USD")
    state = Column(String(20), nullable=False, default=OrderState.CART.value)
    ship_address_id = Column(
        UUIDType,
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    bill_address_id = Column(
        UUIDType,
        ForeignKey("addresses.id", ondelete="SET NULL"),
        nullable=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class OrderLineItem(Base):
    __tablename__ = "order_line_items"

    id = Column(UUIDType, primary_key=True, default=generate_uuid)
    order_id = Column(
        UUIDType,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subscribable_id = Column(
        UUIDType,
        ForeignKey("subscribables.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    quantity = Column(Integer, nullable=False, default=1)
    price_cents = Column(Integer, nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="USD")
    created_at = Column(DateTime(timezone=True), server_default=func.now())

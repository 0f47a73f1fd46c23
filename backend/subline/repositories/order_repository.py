from uuid import UUID

from sqlalchemy.orm import Session

from subline.models.order import Order, OrderLineItem


class OrderRepository:
    """Read access to orders and their lines."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, order_id: UUID) -> Order | None:
        return self.db.query(Order).filter(Order.id == order_id).first()

    def get_line_item_by_id(self, line_item_id: UUID) -> OrderLineItem | None:
        return self.db.query(OrderLineItem).filter(OrderLineItem.id == line_item_id).first()

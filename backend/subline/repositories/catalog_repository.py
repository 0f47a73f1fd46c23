from uuid import UUID

from sqlalchemy.orm import Session

from subline.models.address import Address
from subline.models.subscribable import Subscribable
from subline.models.user import User


class SubscribableRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_ids(self, subscribable_ids: list[UUID]) -> dict[UUID, Subscribable]:
        if not subscribable_ids:
            return {}
        rows = self.db.query(Subscribable).filter(Subscribable.id.in_(subscribable_ids)).all()
        return {row.id: row for row in rows}


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: UUID) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()


class AddressRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, address_id: UUID | None) -> Address | None:
        if address_id is None:
            return None
        return self.db.query(Address).filter(Address.id == address_id).first()

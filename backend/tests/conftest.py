"""Shared test fixtures for all test modules."""

import contextlib
import uuid

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import subline.models  # noqa: F401
from subline.core import database as db_module
from subline.core.database import Base, get_db
from subline.interval import IntervalUnits
from subline.models.address import Address
from subline.models.order import Order, OrderLineItem, OrderState
from subline.models.subscribable import Subscribable
from subline.models.subscription import Subscription, SubscriptionState
from subline.models.user import User

# Create an in-memory SQLite engine with StaticPool so all connections
# share the same database state and there are no file-locking issues.
_test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
_TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_test_engine)


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and truncate all data after.

    Patches the module-level engine and SessionLocal so all application code
    uses the in-memory test database.
    """
    original_engine = db_module.engine
    original_session = db_module.SessionLocal
    db_module.engine = _test_engine
    db_module.SessionLocal = _TestSessionLocal

    Base.metadata.create_all(bind=_test_engine)

    yield
    with _test_engine.connect() as conn:
        conn.execute(text("PRAGMA foreign_keys = OFF"))
        for table in reversed(Base.metadata.sorted_tables):
            with contextlib.suppress(OperationalError):
                conn.execute(table.delete())
        conn.execute(text("PRAGMA foreign_keys = ON"))
        conn.commit()

    db_module.engine = original_engine
    db_module.SessionLocal = original_session


@pytest.fixture
def db_session():
    """Create a database session for direct repository testing."""
    gen = get_db()
    db = next(gen)
    try:
        yield db
    finally:
        for _ in gen:
            pass


def make_address(db_session, city: str) -> Address:
    address = Address(
        firstname="Jane",
        lastname="Doe",
        address1=f"1 Main St, {city}",
        city=city,
        zipcode="12345",
        country_iso="US",
    )
    db_session.add(address)
    db_session.commit()
    db_session.refresh(address)
    return address


def make_subscription(
    db_session,
    user: User,
    interval_length: int | None = 1,
    interval_units: IntervalUnits = IntervalUnits.MONTH,
    shipping_address_id=None,
    billing_address_id=None,
) -> Subscription:
    subscription = Subscription(
        user_id=user.id,
        state=SubscriptionState.ACTIVE.value,
        interval_length=interval_length,
        interval_units=interval_units.value,
        shipping_address_id=shipping_address_id,
        billing_address_id=billing_address_id,
    )
    db_session.add(subscription)
    db_session.commit()
    db_session.refresh(subscription)
    return subscription


@pytest.fixture
def user(db_session):
    """A user with default ship and bill addresses."""
    ship = make_address(db_session, "Userville")
    bill = make_address(db_session, "Billtown")
    user = User(
        email=f"user_{uuid.uuid4()}@test.com",
        ship_address_id=ship.id,
        bill_address_id=bill.id,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def subscription(db_session, user):
    """A monthly subscription without addresses of its own."""
    return make_subscription(db_session, user)


@pytest.fixture
def subscribable(db_session):
    """A subscribable item with plenty of stock."""
    item = Subscribable(
        sku=f"SKU-{uuid.uuid4().hex[:8]}",
        name="Coffee Beans",
        price_cents=1500,
        currency="USD",
        subscribable=True,
        stock_on_hand=100,
    )
    db_session.add(item)
    db_session.commit()
    db_session.refresh(item)
    return item


@pytest.fixture
def source_order_line(db_session, user, subscribable):
    """A completed order with one line for ``subscribable``."""
    ship = make_address(db_session, "Ordercity")
    order = Order(
        number=f"R{uuid.uuid4().hex[:9].upper()}",
        user_id=user.id,
        email="buyer@test.com",
        currency="USD",
        state=OrderState.COMPLETE.value,
        ship_address_id=ship.id,
        bill_address_id=ship.id,
    )
    db_session.add(order)
    db_session.flush()
    line = OrderLineItem(
        order_id=order.id,
        subscribable_id=subscribable.id,
        quantity=3,
        price_cents=1500,
        currency="USD",
    )
    db_session.add(line)
    db_session.commit()
    db_session.refresh(line)
    return line

"""
Test Configuration and Fixtures
Shared testing infrastructure for the pick list report
"""
from collections import Counter
from typing import Dict, Generator, Iterable, List, Tuple

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from rackpick.core.config import get_settings
from rackpick.core.database import Base
from rackpick.core.exceptions import RackNotFoundError, RepositoryError
from rackpick.models import OrderProductRec, ProductRackRec, ProductRec, RackRec
from rackpick.repositories import PickingRepository
from rackpick.schemas import LineItem, Rack

# Racks 2 and 5 deliberately share the display name "B"
SAMPLE_RACKS = [(1, "A"), (2, "B"), (3, "C"), (4, "D"), (5, "B")]
SAMPLE_PRODUCTS = [(10, "Widget"), (20, "Gadget"), (30, "Sprocket"), (40, "Orphan")]
SAMPLE_PRODUCT_RACKS = [
    (10, 1, True),
    (20, 2, True),
    (20, 3, False),
    (30, 5, True),
    (30, 4, False),
    (30, 3, False),
    (40, 4, False),
]
SAMPLE_ORDER_LINES = [
    (1, 10, 3),
    (2, 20, 1),
    (3, 30, 5),
    (3, 10, 2),
    (4, 40, 1),
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """Keep every test away from .env files and real log directories"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_TO_FILE", "false")
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def seed_warehouse(session: Session) -> None:
    """Load the sample racks, products and orders"""
    session.add_all([RackRec(rack_id=i, rack_name=n) for i, n in SAMPLE_RACKS])
    session.add_all([ProductRec(product_id=i, product_name=n) for i, n in SAMPLE_PRODUCTS])
    session.add_all([
        ProductRackRec(product_id=p, rack_id=r, is_main=m) for p, r, m in SAMPLE_PRODUCT_RACKS
    ])
    session.add_all([
        OrderProductRec(order_id=o, product_id=p, quantity=q) for o, p, q in SAMPLE_ORDER_LINES
    ])
    session.commit()


UNCONSTRAINED_SCHEMA = [
    "CREATE TABLE rack (rack_id INT NOT NULL, rack_name TEXT NOT NULL)",
    "CREATE TABLE product (product_id INT NOT NULL, product_name TEXT NOT NULL)",
    "CREATE TABLE product_rack (product_id INT NOT NULL, rack_id INT NOT NULL, "
    "is_main BOOL NOT NULL, UNIQUE (product_id, rack_id))",
    "CREATE TABLE order_product (order_id INT NOT NULL, product_id INT NOT NULL, "
    "quantity INT NOT NULL, UNIQUE (order_id, product_id))",
]


def create_unconstrained_schema(engine: Engine) -> None:
    """Create the warehouse tables as plain DDL, without the quantity check"""
    with engine.begin() as connection:
        for statement in UNCONSTRAINED_SCHEMA:
            connection.execute(text(statement))


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh in-memory database session for each test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def seeded_session(db_session: Session) -> Session:
    seed_warehouse(db_session)
    return db_session


class FakePickingRepository(PickingRepository):
    """In-memory repository that counts every lookup"""

    def __init__(
        self,
        line_items: Iterable[Tuple[int, int, int]] = (),
        products: Dict[int, str] = None,
        main_racks: Dict[int, Rack] = None,
        secondary_racks: Dict[int, List[Rack]] = None,
    ):
        self.line_items = [LineItem(order_id=o, product_id=p, quantity=q) for o, p, q in line_items]
        self.products = products or {}
        self.main_racks = main_racks or {}
        self.secondary_racks = secondary_racks or {}
        self.calls = Counter()
        self.requested_orders = []

    def get_line_items(self, order_ids):
        self.calls["get_line_items"] += 1
        order_ids = list(order_ids)
        self.requested_orders.append(order_ids)
        wanted = set(order_ids)
        orders = {}
        for item in self.line_items:
            if item.order_id in wanted:
                orders.setdefault(item.order_id, []).append(item)
        return orders

    def get_product_name(self, product_id):
        self.calls["get_product_name"] += 1
        if product_id not in self.products:
            raise RepositoryError(f"Product {product_id} not found")
        return self.products[product_id]

    def get_main_rack(self, product_id):
        self.calls["get_main_rack"] += 1
        if product_id not in self.main_racks:
            raise RackNotFoundError(product_id)
        return self.main_racks[product_id]

    def get_secondary_racks(self, product_id):
        self.calls["get_secondary_racks"] += 1
        return list(self.secondary_racks.get(product_id, []))


@pytest.fixture
def scenario_repository() -> FakePickingRepository:
    """Order 1: product 10 on rack A. Order 2: product 20 on rack B, overflow on C."""
    return FakePickingRepository(
        line_items=[(1, 10, 3), (2, 20, 1)],
        products={10: "Widget", 20: "Gadget"},
        main_racks={10: Rack(rack_id=1, name="A"), 20: Rack(rack_id=2, name="B")},
        secondary_racks={20: [Rack(rack_id=3, name="C")]},
    )

"""Service test fixtures — FastAPI test client over empty or seeded stores.

Invariants:
    - Every test starts from empty stores (init_stores(seed=False))
    - Tests add their own records through the API or seed fixtures

Design Decisions:
    - httpx AsyncClient over ASGITransport: no server, no lifespan; the stores
      are reset here instead of in the app lifespan
    - raising_client disables app-exception propagation so the catch-all
      handler's 500 response can be asserted
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.core.records import Order
from app.infrastructure.stores import order_store, init_stores
from app.main import app

BASE_URL = "http://test"


@pytest.fixture(autouse=True)
def empty_stores():
    init_stores(seed=False)
    yield
    init_stores(seed=False)


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url=BASE_URL,
    ) as c:
        yield c


@pytest.fixture
async def raising_client():
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url=BASE_URL,
    ) as c:
        yield c


@pytest.fixture
def dish_payload():
    return {
        "data": {
            "name": "Broccoli stir fry",
            "description": "Crunchy broccoli with ginger and garlic",
            "price": 12,
            "image_url": "https://example.com/broccoli.jpg",
        },
    }


@pytest.fixture
def order_payload():
    return {
        "data": {
            "deliverTo": "1 Infinite Loop, Cupertino",
            "mobileNumber": "(408) 996-1010",
            "status": "pending",
            "dishes": [
                {
                    "id": "90c3d873684bf381dfab29034b5bba73",
                    "name": "Falafel and tahini bagel",
                    "description": "A warm bagel filled with falafel and tahini",
                    "price": 6,
                    "image_url": "https://example.com/bagel.jpg",
                    "quantity": 2,
                },
            ],
        },
    }


@pytest.fixture
def stored_order():
    """Insert an order directly into the store and return a factory for more."""
    def _make(order_id: str = "order-1", status: str | None = "pending") -> Order:
        order = Order.from_data(order_id, {
            "deliverTo": "Somewhere", "mobileNumber": "555",
            "status": status, "dishes": [{"id": "d", "quantity": 1}],
        })
        order_store.append(order)
        return order
    return _make



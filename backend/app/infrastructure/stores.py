"""Process-wide Stores — the dish store, order store, and shared id generator.

Invariants:
    - Exactly one ResourceStore per resource and one IdGenerator per process
    - Created empty at import; filled by init_stores() during app lifespan
    - Seeded ids are reserved so generated ids never collide with them

Design Decisions:
    - Module-level singletons: deliberate exception to no-global-state rule
      (ADR: single-process uvicorn, no multi-worker, state lost on restart)
"""

import logging

from app.core.records import Dish, Order
from app.infrastructure.id_generator import IdGenerator
from app.infrastructure.resource_store import ResourceStore
from app.infrastructure.seed_data import seed_dishes, seed_orders

logger = logging.getLogger(__name__)

id_generator = IdGenerator()
dish_store: ResourceStore[Dish] = ResourceStore("dishes")
order_store: ResourceStore[Order] = ResourceStore("orders")


def init_stores(seed: bool = True) -> None:
    """Reset both stores, optionally loading sample records."""
    dishes = seed_dishes() if seed else []
    orders = seed_orders() if seed else []
    for record in (*dishes, *orders):
        id_generator.reserve(record.id)
    dish_store.reset(dishes)
    order_store.reset(orders)
    logger.info(
        f"Stores initialized: {len(dish_store)} dish(es), {len(order_store)} order(s)",
    )

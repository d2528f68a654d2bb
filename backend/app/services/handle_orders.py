"""Order Handlers — terminal list/create/read/update/delete operations for orders.

Invariants:
    - Called only after the route's pipeline passed; no validation here
    - create stores the status as sent (possibly absent)
    - delete locates the resolved order's current index, then removes exactly that record
"""

import logging

from app.core.domain_types import OrderId
from app.core.enforce_orders import ORDER_SLOT
from app.core.records import Order
from app.core.repository_protocols import IdSource, RecordStore
from app.core.validation_pipeline import RequestContext

logger = logging.getLogger(__name__)


class OrderHandlers:
    """Terminal order operations bound to a store and id source."""

    def __init__(self, store: RecordStore[Order], ids: IdSource):
        self.store = store
        self.ids = ids

    def list(self) -> list[Order]:
        return list(self.store.list())

    def create(self, ctx: RequestContext) -> Order:
        order = Order.from_data(OrderId(self.ids.next()), ctx.data)
        self.store.append(order)
        logger.info(
            "Order created", extra={"resource": "order", "resource_id": order.id},
        )
        return order

    def read(self, ctx: RequestContext) -> Order:
        return ctx.resolved[ORDER_SLOT]

    def update(self, ctx: RequestContext) -> Order:
        order: Order = ctx.resolved[ORDER_SLOT]
        order.apply_update(ctx.data)
        logger.info(
            f"Order updated (status={order.status})",
            extra={"resource": "order", "resource_id": order.id},
        )
        return order

    def delete(self, ctx: RequestContext) -> Order | None:
        order: Order = ctx.resolved[ORDER_SLOT]
        index = self.store.index_by_id(order.id)
        if index is None:
            logger.warning(
                "Order already removed",
                extra={"resource": "order", "resource_id": order.id},
            )
            return None
        removed = self.store.remove_at(index)
        logger.info(
            "Order deleted", extra={"resource": "order", "resource_id": order.id},
        )
        return removed

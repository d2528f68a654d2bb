"""Dish Handlers — terminal list/create/read/update operations for dishes.

Invariants:
    - Called only after the route's pipeline passed; no validation here
    - read/update use the record resolved by the pipeline (ctx.resolved["dish"])
    - update mutates the stored record in place and never changes its id
"""

import logging

from app.core.domain_types import DishId
from app.core.enforce_dishes import DISH_SLOT
from app.core.records import Dish
from app.core.repository_protocols import IdSource, RecordStore
from app.core.validation_pipeline import RequestContext

logger = logging.getLogger(__name__)


class DishHandlers:
    """Terminal dish operations bound to a store and id source."""

    def __init__(self, store: RecordStore[Dish], ids: IdSource):
        self.store = store
        self.ids = ids

    def list(self) -> list[Dish]:
        return list(self.store.list())

    def create(self, ctx: RequestContext) -> Dish:
        dish = Dish.from_data(DishId(self.ids.next()), ctx.data)
        self.store.append(dish)
        logger.info(
            "Dish created", extra={"resource": "dish", "resource_id": dish.id},
        )
        return dish

    def read(self, ctx: RequestContext) -> Dish:
        return ctx.resolved[DISH_SLOT]

    def update(self, ctx: RequestContext) -> Dish:
        dish: Dish = ctx.resolved[DISH_SLOT]
        dish.apply_update(ctx.data)
        logger.info(
            "Dish updated", extra={"resource": "dish", "resource_id": dish.id},
        )
        return dish

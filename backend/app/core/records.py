"""Resource Records — stored Dish and Order entities.

Invariants:
    - Records are only built from payloads that passed their resource pipeline
    - id is assigned once at creation; apply_update never touches it
    - Order.dishes holds line items exactly as the client sent them
    - Order.status may be None: creation neither defaults nor constrains it

Design Decisions:
    - Plain dataclasses, not Pydantic: values already passed the pipeline, and the
      store must keep exactly what the client sent (no coercion surprises)
    - Field names mirror the JSON contract (image_url, deliverTo, mobileNumber)
"""

from dataclasses import dataclass, asdict
from typing import Any

from app.core.domain_types import DishId, OrderId

DISH_FIELDS: tuple[str, ...] = ("name", "description", "price", "image_url")
ORDER_FIELDS: tuple[str, ...] = ("deliverTo", "mobileNumber", "status", "dishes")


@dataclass
class Dish:
    """A menu dish."""
    id: DishId
    name: str
    description: str
    price: int | float
    image_url: str

    @classmethod
    def from_data(cls, dish_id: DishId, data: dict) -> "Dish":
        return cls(id=dish_id, **{name: data.get(name) for name in DISH_FIELDS})

    def apply_update(self, data: dict) -> None:
        """Overwrite every mutable field in place."""
        for name in DISH_FIELDS:
            setattr(self, name, data.get(name))

    def to_json(self) -> dict:
        return asdict(self)


@dataclass
class Order:
    """A delivery order with embedded line items."""
    id: OrderId
    deliverTo: str
    mobileNumber: str
    dishes: list[dict[str, Any]]
    status: str | None = None

    @classmethod
    def from_data(cls, order_id: OrderId, data: dict) -> "Order":
        return cls(id=order_id, **{name: data.get(name) for name in ORDER_FIELDS})

    def apply_update(self, data: dict) -> None:
        """Overwrite every mutable field in place."""
        for name in ORDER_FIELDS:
            setattr(self, name, data.get(name))

    def to_json(self) -> dict:
        """JSON shape; a missing status is omitted rather than sent as null."""
        body = {
            "id": self.id,
            "deliverTo": self.deliverTo,
            "mobileNumber": self.mobileNumber,
            "status": self.status,
            "dishes": self.dishes,
        }
        if self.status is None:
            del body["status"]
        return body

"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DishId, OrderId wrap the generated hex identifier strings
    - All order states encoded as an Enum; status strings compared via OrderStatus
    - UPDATABLE_STATUSES excludes DELIVERED: a delivered order is locked

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to the raw JSON strings clients send
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DishId = NewType("DishId", str)
OrderId = NewType("OrderId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Resource(str, Enum):
    """Managed resource types; value is the name used in error messages."""
    DISH = "Dish"
    ORDER = "Order"


class OrderStatus(str, Enum):
    """Order lifecycle states."""
    PENDING = "pending"
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"


UPDATABLE_STATUSES: frozenset[str] = frozenset({
    OrderStatus.PENDING.value,
    OrderStatus.PREPARING.value,
    OrderStatus.OUT_FOR_DELIVERY.value,
})

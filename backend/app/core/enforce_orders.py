"""Order Enforcement — line items, status rules, and the per-route order pipelines.

Invariants:
    - check_dishes_array caches the validated list in ctx.resolved["dishes"];
      check_quantities reads it, so it must run after check_dishes_array
    - check_quantities is a linear scan that stops at the FIRST invalid line item
      and rejects the whole request with that item's 0-based index
    - Status is unconstrained on create; on update "delivered" is refused
      with its own message, and so is any update to an order already stored
      as delivered (a delivered order is locked)
    - Deletion requires the stored order (not the payload) to be pending

Design Decisions:
    - Line items are only checked for quantity: the dish reference fields are
      stored as sent (ADR: orders snapshot dishes, they do not join against the dish store)
"""

from app.core.domain_types import OrderStatus, Resource, UPDATABLE_STATUSES
from app.core.enforce_fields import require_field, require_exists, require_id_match
from app.core.repository_protocols import RecordLookup
from app.core.validation_pipeline import (
    RequestContext, Rejection, Validator, bad_request, has_value, is_number,
)

ORDER_SLOT = "order"
ORDER_PARAM = "orderId"
DISHES_SLOT = "dishes"

STATUS_ENUMERATION_MESSAGE = (
    "Order must have a status of pending, preparing, out-for-delivery, delivered"
)
DELIVERED_LOCK_MESSAGE = "A delivered order cannot be changed"


def check_dishes_array(ctx: RequestContext) -> Rejection | None:
    """data.dishes must be a non-empty list."""
    dishes = ctx.data.get("dishes")
    if not has_value(dishes):
        return bad_request("Order must include a dish")
    if not isinstance(dishes, list) or len(dishes) < 1:
        return bad_request("Order must include at least 1 dish")
    ctx.resolved[DISHES_SLOT] = dishes
    return None


def _valid_quantity(line_item: object) -> bool:
    if not isinstance(line_item, dict):
        return False
    quantity = line_item.get("quantity")
    return is_number(quantity) and quantity >= 1


def check_quantities(ctx: RequestContext) -> Rejection | None:
    """Every cached line item needs a numeric quantity >= 1."""
    for index, line_item in enumerate(ctx.resolved[DISHES_SLOT]):
        if not _valid_quantity(line_item):
            return bad_request(
                f"Dish {index} must have a quantity that is an integer greater than 0",
            )
    return None


def check_status_transition(ctx: RequestContext) -> Rejection | None:
    """Update may only move a non-delivered order into a non-delivered status."""
    stored = ctx.resolved.get(ORDER_SLOT)
    if stored is not None and stored.status == OrderStatus.DELIVERED.value:
        return bad_request(DELIVERED_LOCK_MESSAGE)
    status = ctx.data.get("status")
    if isinstance(status, str) and status in UPDATABLE_STATUSES:
        return None
    if status == OrderStatus.DELIVERED.value:
        return bad_request(DELIVERED_LOCK_MESSAGE)
    return bad_request(STATUS_ENUMERATION_MESSAGE)


def check_deletable(ctx: RequestContext) -> Rejection | None:
    """Only pending orders may be deleted."""
    if ctx.resolved[ORDER_SLOT].status == OrderStatus.PENDING.value:
        return None
    return bad_request("An order cannot be deleted unless it is pending")


def order_exists(store: RecordLookup) -> Validator:
    return require_exists(Resource.ORDER, store, ORDER_PARAM, ORDER_SLOT)


def create_order_pipeline() -> list[Validator]:
    """POST /orders"""
    return [
        require_field(Resource.ORDER, "deliverTo"),
        require_field(Resource.ORDER, "mobileNumber"),
        check_dishes_array,
        check_quantities,
    ]


def read_order_pipeline(store: RecordLookup) -> list[Validator]:
    """GET /orders/{orderId}"""
    return [order_exists(store)]


def update_order_pipeline(store: RecordLookup) -> list[Validator]:
    """PUT /orders/{orderId}"""
    return [
        order_exists(store),
        require_field(Resource.ORDER, "deliverTo"),
        require_field(Resource.ORDER, "mobileNumber"),
        check_dishes_array,
        check_status_transition,
        check_quantities,
        require_id_match(Resource.ORDER, ORDER_SLOT),
    ]


def delete_order_pipeline(store: RecordLookup) -> list[Validator]:
    """DELETE /orders/{orderId}"""
    return [order_exists(store), check_deletable]

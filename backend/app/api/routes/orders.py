"""Order Routes — /orders collection and /orders/{orderId} item endpoints.

Invariants:
    - Every route runs its pipeline to completion before the handler (no await in between)
    - Responses wrap records as {"data": ...}; DELETE answers 204 with no body
"""

from fastapi import APIRouter, Body, Response, status

from app.core.enforce_orders import (
    create_order_pipeline, read_order_pipeline,
    update_order_pipeline, delete_order_pipeline,
)
from app.infrastructure.stores import order_store, id_generator
from app.services.handle_orders import OrderHandlers
from app.api.routes.route_helpers import build_context, enforce_pipeline

router = APIRouter(prefix="/orders", tags=["orders"])

handlers = OrderHandlers(order_store, id_generator)

CREATE_PIPELINE = create_order_pipeline()
READ_PIPELINE = read_order_pipeline(order_store)
UPDATE_PIPELINE = update_order_pipeline(order_store)
DELETE_PIPELINE = delete_order_pipeline(order_store)


@router.get("")
async def list_orders():
    """List all orders."""
    return {"data": [order.to_json() for order in handlers.list()]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(payload: dict | None = Body(None)):
    """Create an order from {"data": {deliverTo, mobileNumber, status?, dishes}}."""
    ctx = enforce_pipeline(CREATE_PIPELINE, build_context(payload), "order")
    return {"data": handlers.create(ctx).to_json()}


@router.get("/{order_id}")
async def read_order(order_id: str):
    ctx = enforce_pipeline(READ_PIPELINE, build_context(orderId=order_id), "order")
    return {"data": handlers.read(ctx).to_json()}


@router.put("/{order_id}")
async def update_order(order_id: str, payload: dict | None = Body(None)):
    """Overwrite all fields of an existing, not-yet-delivered order."""
    ctx = enforce_pipeline(
        UPDATE_PIPELINE, build_context(payload, orderId=order_id), "order",
    )
    return {"data": handlers.update(ctx).to_json()}


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: str):
    """Remove a pending order."""
    ctx = enforce_pipeline(
        DELETE_PIPELINE, build_context(orderId=order_id), "order",
    )
    handlers.delete(ctx)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

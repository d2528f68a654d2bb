"""Dish Routes — /dishes collection and /dishes/{dishId} item endpoints.

Invariants:
    - Every route runs its pipeline to completion before the handler (no await in between)
    - Responses wrap records as {"data": ...}
    - No DELETE: dishes are never removed
"""

from fastapi import APIRouter, Body, status

from app.core.enforce_dishes import (
    create_dish_pipeline, read_dish_pipeline, update_dish_pipeline,
)
from app.infrastructure.stores import dish_store, id_generator
from app.services.handle_dishes import DishHandlers
from app.api.routes.route_helpers import build_context, enforce_pipeline

router = APIRouter(prefix="/dishes", tags=["dishes"])

handlers = DishHandlers(dish_store, id_generator)

CREATE_PIPELINE = create_dish_pipeline()
READ_PIPELINE = read_dish_pipeline(dish_store)
UPDATE_PIPELINE = update_dish_pipeline(dish_store)


@router.get("")
async def list_dishes():
    """List all dishes."""
    return {"data": [dish.to_json() for dish in handlers.list()]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_dish(payload: dict | None = Body(None)):
    """Create a dish from {"data": {name, description, price, image_url}}."""
    ctx = enforce_pipeline(CREATE_PIPELINE, build_context(payload), "dish")
    return {"data": handlers.create(ctx).to_json()}


@router.get("/{dish_id}")
async def read_dish(dish_id: str):
    ctx = enforce_pipeline(READ_PIPELINE, build_context(dishId=dish_id), "dish")
    return {"data": handlers.read(ctx).to_json()}


@router.put("/{dish_id}")
async def update_dish(dish_id: str, payload: dict | None = Body(None)):
    """Overwrite all fields of an existing dish."""
    ctx = enforce_pipeline(
        UPDATE_PIPELINE, build_context(payload, dishId=dish_id), "dish",
    )
    return {"data": handlers.update(ctx).to_json()}

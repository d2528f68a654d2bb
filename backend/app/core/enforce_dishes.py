"""Dish Enforcement — price validation and the per-route dish pipelines.

Invariants:
    - check_price is PURE: returns Rejection on violation, None on success
    - A present-but-invalid price reports the type/positivity message; only an
      absent (missing or null) price reports the presence message
    - Pipeline order per route is fixed here; routes never reorder validators

Design Decisions:
    - Pipelines built by functions taking the store: the store is injected, so
      tests run the exact route pipelines against a throwaway store
"""

from app.core.domain_types import Resource
from app.core.enforce_fields import require_field, require_exists, require_id_match
from app.core.repository_protocols import RecordLookup
from app.core.validation_pipeline import (
    RequestContext, Rejection, Validator, bad_request, is_number,
)

DISH_SLOT = "dish"
DISH_PARAM = "dishId"


def check_price(ctx: RequestContext) -> Rejection | None:
    """Price must be a finite number greater than 0."""
    price = ctx.data.get("price")
    if price is None:
        return bad_request("Dish must include a price")
    if not is_number(price) or price <= 0:
        return bad_request(
            "Dish must have a price that is an integer greater than 0",
        )
    return None


def _payload_validators() -> list[Validator]:
    return [
        require_field(Resource.DISH, "name"),
        require_field(Resource.DISH, "description"),
        check_price,
        require_field(Resource.DISH, "image_url"),
    ]


def dish_exists(store: RecordLookup) -> Validator:
    return require_exists(Resource.DISH, store, DISH_PARAM, DISH_SLOT)


def create_dish_pipeline() -> list[Validator]:
    """POST /dishes"""
    return _payload_validators()


def read_dish_pipeline(store: RecordLookup) -> list[Validator]:
    """GET /dishes/{dishId}"""
    return [dish_exists(store)]


def update_dish_pipeline(store: RecordLookup) -> list[Validator]:
    """PUT /dishes/{dishId}"""
    return [
        dish_exists(store),
        *_payload_validators(),
        require_id_match(Resource.DISH, DISH_SLOT),
    ]

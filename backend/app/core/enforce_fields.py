"""Generic Resource Enforcement — field presence, existence, identity checks.

Invariants:
    - All factories return PURE validators except for the resolved-slot write
      done by require_exists (the only validator that caches state)
    - require_exists caches the record under ctx.resolved[slot]; require_id_match
      reads the same slot, so it must run after require_exists
    - Messages are exact: clients and tests match on them

Design Decisions:
    - Factories over per-resource copies: dish and order pipelines share these,
      parameterized by Resource, while resource-specific checks stay in
      enforce_dishes / enforce_orders
"""

from app.core.domain_types import Resource
from app.core.repository_protocols import RecordLookup
from app.core.validation_pipeline import (
    RequestContext, Rejection, Validator, bad_request, not_found, has_value,
)


def _article(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"


def require_field(resource: Resource, field_name: str) -> Validator:
    """data.<field_name> must be present and truthy."""
    message = (
        f"{resource.value} must include {_article(field_name)} {field_name}"
    )

    def check(ctx: RequestContext) -> Rejection | None:
        if has_value(ctx.data.get(field_name)):
            return None
        return bad_request(message)

    check.__name__ = f"require_{field_name}"
    return check


def require_exists(
    resource: Resource, store: RecordLookup, param: str, slot: str,
) -> Validator:
    """Path parameter `param` must resolve to a record; cache it as ctx.resolved[slot]."""

    def check(ctx: RequestContext) -> Rejection | None:
        record_id = ctx.params.get(param, "")
        record = store.find_by_id(record_id)
        if record is None:
            return not_found(f"{resource.value} does not exist: {record_id}")
        ctx.resolved[slot] = record
        return None

    check.__name__ = f"require_{slot}_exists"
    return check


def require_id_match(resource: Resource, slot: str) -> Validator:
    """A body id, when supplied, must equal the resolved record's id."""
    name = resource.value

    def check(ctx: RequestContext) -> Rejection | None:
        body_id = ctx.data.get("id")
        route_id = ctx.resolved[slot].id
        if has_value(body_id) and body_id != route_id:
            return bad_request(
                f"{name} id does not match route id. "
                f"{name}: {body_id}, Route: {route_id}"
            )
        return None

    check.__name__ = f"require_{slot}_id_match"
    return check

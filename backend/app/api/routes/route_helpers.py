"""Route Helpers — build the request context and run a pipeline from a route.

Invariants:
    - A rejection becomes a GrubDashError raised here, never inside the pipeline
    - The payload is kept as sent ({} when the request has no body)
"""

from typing import Any, Sequence

from app.core.errors import ErrorContext, error_from_rejection
from app.core.validation_pipeline import RequestContext, Validator, run_pipeline


def build_context(payload: Any = None, **params: str) -> RequestContext:
    return RequestContext(
        payload=payload if payload is not None else {}, params=dict(params),
    )


def enforce_pipeline(
    validators: Sequence[Validator], ctx: RequestContext, resource: str,
) -> RequestContext:
    """Run validators; raise the mapped GrubDashError on the first rejection."""
    rejection = run_pipeline(validators, ctx)
    if rejection is not None:
        error = error_from_rejection(rejection.status, rejection.message)
        error.context = ErrorContext(
            resource=resource, resource_id=next(iter(ctx.params.values()), None),
        )
        raise error
    return ctx

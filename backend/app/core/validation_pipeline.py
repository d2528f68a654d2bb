"""Validation Pipeline — ordered validator chain over an explicit request context.

Invariants:
    - A validator returns None (pass) or a Rejection (stop) and never raises
    - run_pipeline executes validators in list order and returns the FIRST rejection
    - Validators may write into RequestContext.resolved; later validators and the
      terminal handler read from it (existence resolution precedes identity checks)
    - No IO, no async: the whole chain completes within one event-loop step

Design Decisions:
    - Plain list of functions over a middleware class hierarchy: each operation's
      pipeline is data, so its order is visible at the route (ADR: explicit ordering)
    - Rejection values over exceptions: mirrors the enforce_* modules, whose error
      path has the same shape as the success path
    - has_value follows JSON-client truthiness: [] and {} count as present,
      0 / "" / NaN / false / null do not
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rejection:
    """Pipeline short-circuit carrying an HTTP status and message."""
    status: int
    message: str


@dataclass
class RequestContext:
    """Per-request state threaded through a pipeline."""
    payload: Any = None
    params: dict[str, str] = field(default_factory=dict)
    resolved: dict[str, Any] = field(default_factory=dict)

    @property
    def data(self) -> dict:
        """The payload's nested `data` object, or {} when missing or malformed."""
        if isinstance(self.payload, dict):
            data = self.payload.get("data")
            if isinstance(data, dict):
                return data
        return {}


Validator = Callable[[RequestContext], Rejection | None]


def bad_request(message: str) -> Rejection:
    return Rejection(400, message)


def not_found(message: str) -> Rejection:
    return Rejection(404, message)


def has_value(value: Any) -> bool:
    """True when a client-supplied value counts as present."""
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def is_number(value: Any) -> bool:
    """True for finite int/float values. bool is excluded even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def run_pipeline(
    validators: Sequence[Validator], ctx: RequestContext,
) -> Rejection | None:
    """Run validators in order. Returns the first rejection, or None if all pass."""
    for validator in validators:
        rejection = validator(ctx)
        if rejection is not None:
            logger.debug(
                f"Pipeline rejected at {getattr(validator, '__name__', validator)}: "
                f"{rejection.message}",
                extra={"status_code": rejection.status},
            )
            return rejection
    return None

"""
Result channel for matrix operations.

``capture`` runs an operation and reports a LinAlgError as a value instead of
raising it, for callers that batch many computations and want to inspect the
failures afterwards.

Example:
    >>> outcome = capture(Matrix([[1, 2], [2, 4]]).inverse)
    >>> outcome.ok, outcome.kind
    (False, <ErrorKind.SINGULAR_MATRIX: 'singular_matrix'>)
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.errors import ErrorKind, LinAlgError
from ..core.logging import get_logger

logger = get_logger(__name__)


class Outcome(BaseModel):
    """Either the value of a successful operation or the error that stopped it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    ok: bool
    value: Any = None
    kind: Optional[ErrorKind] = None
    message: Optional[str] = None
    details: dict[str, Any] = Field(default_factory=dict)
    error: Optional[LinAlgError] = Field(default=None, exclude=True, repr=False)

    def unwrap(self) -> Any:
        """Return the value, re-raising the captured error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


def capture(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """
    Call operation(*args, **kwargs) and wrap the result in an Outcome.

    Only LinAlgError is converted; any other exception propagates.
    """
    try:
        value = operation(*args, **kwargs)
    except LinAlgError as exc:
        logger.debug("Operation failed: %s", exc.message, extra={"extra_data": {"kind": exc.kind.value}})
        return Outcome(
            ok=False,
            kind=exc.kind,
            message=exc.message,
            details=exc.details,
            error=exc,
        )
    return Outcome(ok=True, value=value)

"""Nesting limit for recursive tree walks.

Every recursive walk over a message tree (mapping conversion, flattening,
unflattening, module rendering) enters one DepthGuard level per namespace.
A catalog module can nest dicts arbitrarily deep and a table key can have
any number of segments, so the limit turns a would-be RecursionError into a
CatalogStructureError with a diagnostic.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from msgtable.constants import MAX_DEPTH
from msgtable.diagnostics import CatalogStructureError
from msgtable.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "DepthLimitExceededError", "clamp_to_recursion_limit"]

logger = logging.getLogger(__name__)

# Frames left for the caller's own stack when clamping a requested limit
_RESERVED_FRAMES = 50


class DepthLimitExceededError(CatalogStructureError):
    """A message tree nests deeper than the guard allows."""


@dataclass(slots=True)
class DepthGuard:
    """Counts namespace levels entered during one walk.

    One guard is created per top-level call and passed down the recursion;
    each namespace is processed inside ``with guard:``.

    Example:
        >>> guard = DepthGuard(max_depth=2)
        >>> with guard:
        ...     guard.level
        1

    Attributes:
        max_depth: Deepest level allowed (clamped to the recursion limit)
        level: Number of levels currently entered
    """

    max_depth: int = MAX_DEPTH
    level: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = clamp_to_recursion_limit(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # Checked before counting: __exit__ does not run when __enter__ raises.
        if self.level >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.nesting_depth_exceeded(self.max_depth))
        self.level += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.level -= 1


def clamp_to_recursion_limit(max_depth: int) -> int:
    """Lower ``max_depth`` so a walk that deep cannot hit RecursionError.

    Example:
        >>> clamp_to_recursion_limit(10)
        10
    """
    ceiling = sys.getrecursionlimit() - _RESERVED_FRAMES
    if max_depth <= ceiling:
        return max_depth
    logger.warning(
        "Nesting limit %d is above the interpreter recursion limit; using %d",
        max_depth,
        ceiling,
    )
    return ceiling

"""Core utilities shared by the transform and catalog packages.

Python 3.13+.
"""

from .depth_guard import DepthGuard, DepthLimitExceededError, clamp_to_recursion_limit

__all__ = ["DepthGuard", "DepthLimitExceededError", "clamp_to_recursion_limit"]

"""Domain policies package."""

from .commit_policy import should_reject_batch

__all__ = ["should_reject_batch"]

"""Tests for the batch commit policy."""

from fundify.domain.policies import should_reject_batch


def test_clean_batches_are_committed() -> None:
    """Batches without diagnostics are never rejected."""
    assert should_reject_batch(3, 0) is False
    assert should_reject_batch(0, 0) is False


def test_all_invalid_batches_are_rejected() -> None:
    """Diagnostics without any accepted row reject the batch."""
    assert should_reject_batch(0, 2) is True


def test_partial_batches_commit_unless_strict() -> None:
    """Mixed batches commit by default and are rejected in strict mode."""
    assert should_reject_batch(5, 1) is False
    assert should_reject_batch(5, 1, strict=True) is True

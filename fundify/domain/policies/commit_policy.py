"""Commit policy for partially failing imports."""


def should_reject_batch(
    accepted_count: int,
    diagnostic_count: int,
    strict: bool = False,
) -> bool:
    """Return True when a batch must not be committed at all.

    A batch is rejected when it has diagnostics and nothing to commit. In
    strict mode any diagnostic rejects the batch.

    Args:
        accepted_count: Number of reconciled transactions.
        diagnostic_count: Number of row-level diagnostics.
        strict: Whether partial commits are disallowed.

    Returns:
        bool: True to reject the whole submission.
    """
    if diagnostic_count == 0:
        return False
    return strict or accepted_count == 0


__all__ = ["should_reject_batch"]

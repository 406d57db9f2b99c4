"""Domain models for the chart of accounts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Entry of the chart of accounts.

    Attributes:
        account_id: Reconciliation key referenced by transactions.
        nature: Free-text income/expense indicator (e.g. "Receita").
        account_type: Account type label.
        category: Category used to enrich reconciled transactions.
        subcategory: Optional finer grouping.
        name: Display name.
    """

    account_id: str
    nature: str = ""
    account_type: str = ""
    category: str = ""
    subcategory: str = ""
    name: str = ""


ChartOfAccounts = dict[str, Account]


__all__ = ["Account", "ChartOfAccounts"]

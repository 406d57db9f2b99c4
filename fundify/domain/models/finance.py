"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal

from fundify.domain.models.transactions import Transaction


@dataclass(frozen=True)
class Balance:
    """Balance totals of a transaction set.

    Attributes:
        total: Income minus expenses.
        income: Sum of absolute income amounts.
        expenses: Sum of absolute expense amounts.
        savings: Equal to ``total`` by domain convention.
    """

    total: Decimal
    income: Decimal
    expenses: Decimal
    savings: Decimal


@dataclass(frozen=True)
class MonthlyPoint:
    """Income and expense totals of one calendar month."""

    key: str
    month: str
    income: Decimal
    expenses: Decimal


@dataclass(frozen=True)
class CategoryAmount:
    """Expense total of a single category."""

    category: str
    amount: Decimal


@dataclass(frozen=True)
class AggregateView:
    """Dashboard aggregates recomputed on every request."""

    balance: Balance
    monthly: list[MonthlyPoint]
    categories: list[CategoryAmount]
    transactions: list[Transaction] = field(default_factory=list)


@dataclass(frozen=True)
class CashFlowMonth:
    """One monthly column of the cash-flow matrix."""

    month: int
    label: str
    opening: Decimal
    income: Decimal
    expense: Decimal

    @property
    def operational(self) -> Decimal:
        """Return income minus expense for the month."""
        return self.income - self.expense

    @property
    def closing(self) -> Decimal:
        return self.opening + self.operational


@dataclass(frozen=True)
class CashFlowItem:
    """Monthly values of one description within a category."""

    description: str
    item_code: str
    monthly_values: tuple[Decimal, ...]

    @property
    def total(self) -> Decimal:
        return sum(self.monthly_values, Decimal("0"))


@dataclass(frozen=True)
class CashFlowCategory:
    """Monthly totals of a category and its items."""

    category: str
    monthly_totals: tuple[Decimal, ...]
    items: list[CashFlowItem]

    @property
    def total(self) -> Decimal:
        return sum(self.monthly_totals, Decimal("0"))


@dataclass(frozen=True)
class CashFlowTotals:
    """Row totals across the twelve months."""

    income: Decimal
    expense: Decimal
    operational: Decimal
    closing: Decimal


@dataclass(frozen=True)
class CashFlowMatrix:
    """Twelve-month cash-flow table for a year."""

    year: int
    months: list[CashFlowMonth]
    income_categories: list[CashFlowCategory]
    expense_categories: list[CashFlowCategory]
    totals: CashFlowTotals


__all__ = [
    "Balance",
    "MonthlyPoint",
    "CategoryAmount",
    "AggregateView",
    "CashFlowMonth",
    "CashFlowItem",
    "CashFlowCategory",
    "CashFlowTotals",
    "CashFlowMatrix",
]

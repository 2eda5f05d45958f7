"""Spend aggregation per payer and per category."""
from typing import Iterable

from settleup.config import DEFAULT_CATEGORY
from settleup.schemas import CategoryExpense, ExpenseAnalysis, ExpenseRecord, UserExpense


def analyze_expense_distribution(expenses: Iterable[ExpenseRecord]) -> ExpenseAnalysis:
    """
    Sum full expense amounts (not split shares) by payer and category. Settlement
    state is ignored: this is about what was spent, not what is owed.
    """
    total = 0.0
    user_totals: dict[str, float] = {}
    cat_totals: dict[str, float] = {}

    for e in expenses:
        cat = e.category or DEFAULT_CATEGORY
        total += e.amount
        user_totals[e.payer] = user_totals.get(e.payer, 0.0) + e.amount
        cat_totals[cat] = cat_totals.get(cat, 0.0) + e.amount

    if total == 0:
        return ExpenseAnalysis(total_amount=0.0)

    return ExpenseAnalysis(
        total_amount=total,
        user_expenses=[
            UserExpense(participant=uid, amount=amt, percentage=amt / total * 100)
            for uid, amt in user_totals.items()
        ],
        category_expenses=[
            CategoryExpense(category=cat, amount=amt, percentage=amt / total * 100)
            for cat, amt in cat_totals.items()
        ],
    )

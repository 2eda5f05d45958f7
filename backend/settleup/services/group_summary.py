"""Run the settlement pipeline for a group and attach member names."""
from typing import Iterable

from settleup.config import AMOUNT_DECIMALS
from settleup.models import DebtGraph
from settleup.schemas import (
    BalanceEntry,
    ExpenseRecord,
    GroupExpenseAnalysis,
    MemberInfo,
    NamedSettlement,
    NamedUserExpense,
    SettlementParty,
    SettlementSummary,
)
from settleup.services.cycle_simplifier import simplify_transactions
from settleup.services.debt_graph import build_debt_graph
from settleup.services.expense_analyzer import analyze_expense_distribution
from settleup.services.settlement_planner import compute_balances, find_optimal_settlement_plan


def member_directory(members: Iterable[MemberInfo]) -> dict[str, str]:
    return {m.id: m.name or m.email or m.id for m in members}


def _party(uid: str, names: dict[str, str]) -> SettlementParty:
    return SettlementParty(id=uid, name=names.get(uid))


def _named_plan(graph: DebtGraph, names: dict[str, str]) -> list[NamedSettlement]:
    return [
        NamedSettlement(
            from_=_party(s.from_user_id, names),
            to=_party(s.to_user_id, names),
            amount=round(s.amount, AMOUNT_DECIMALS),
        )
        for s in find_optimal_settlement_plan(graph)
    ]


def plan_group_settlements(
    expenses: list[ExpenseRecord], members: Iterable[MemberInfo]
) -> list[NamedSettlement]:
    graph = simplify_transactions(build_debt_graph(expenses))
    return _named_plan(graph, member_directory(members))


def settlement_summary(
    group_id: str, expenses: list[ExpenseRecord], members: list[MemberInfo]
) -> SettlementSummary:
    names = member_directory(members)
    graph = simplify_transactions(build_debt_graph(expenses))
    balances = compute_balances(graph)
    # members with nothing outstanding still get a zero row
    for m in members:
        balances.setdefault(m.id, 0.0)

    return SettlementSummary(
        group_id=group_id,
        members=members,
        balances=[
            BalanceEntry(user_id=uid, name=names.get(uid), balance=round(bal, AMOUNT_DECIMALS))
            for uid, bal in balances.items()
        ],
        settlements=_named_plan(graph, names),
    )


def analyze_group_expenses(
    expenses: list[ExpenseRecord], members: Iterable[MemberInfo]
) -> GroupExpenseAnalysis:
    names = member_directory(members)
    analysis = analyze_expense_distribution(expenses)
    return GroupExpenseAnalysis(
        total_amount=analysis.total_amount,
        user_expenses=[
            NamedUserExpense(**u.model_dump(), name=names.get(u.participant))
            for u in analysis.user_expenses
        ],
        category_expenses=analysis.category_expenses,
    )

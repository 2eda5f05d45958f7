"""Greedy settlement planning over a simplified debt graph."""
import logging

from settleup.config import SETTLEMENT_EPSILON
from settleup.models import DebtGraph
from settleup.schemas import Settlement

logger = logging.getLogger(__name__)


def compute_balances(graph: DebtGraph) -> dict[str, float]:
    """
    participant -> net balance (positive = is owed money, negative = owes money).
    Balances always sum to zero.
    """
    balances: dict[str, float] = {}
    for debtor in graph.participants():
        balances.setdefault(debtor, 0.0)
        for creditor in graph.neighbors(debtor):
            amount = graph.owed(debtor, creditor)
            balances.setdefault(creditor, 0.0)
            balances[debtor] -= amount
            balances[creditor] += amount
    return balances


def find_optimal_settlement_plan(graph: DebtGraph) -> list[Settlement]:
    """
    Match the largest remaining debtor with the largest remaining creditor
    until one side runs out. Emits at most ``creditors + debtors - 1``
    transfers.
    """
    creditors = []  # [user_id, amount_owed_to_them]
    debtors = []
    for uid, bal in compute_balances(graph).items():
        if bal > 0:
            creditors.append([uid, bal])
        elif bal < 0:
            debtors.append([uid, -bal])
    # sort is stable, so ties keep graph order
    creditors.sort(key=lambda x: x[1], reverse=True)
    debtors.sort(key=lambda x: x[1], reverse=True)

    out: list[Settlement] = []
    i, j = 0, 0
    while i < len(creditors) and j < len(debtors):
        creditor = creditors[i]
        debtor = debtors[j]
        transfer = min(creditor[1], debtor[1])
        if transfer > 0:
            out.append(Settlement(from_user_id=debtor[0], to_user_id=creditor[0], amount=transfer))
        creditor[1] -= transfer
        debtor[1] -= transfer
        if creditor[1] <= SETTLEMENT_EPSILON:
            i += 1
        if debtor[1] <= SETTLEMENT_EPSILON:
            j += 1

    logger.debug(
        "Settlement plan: %d transfers for %d creditors, %d debtors",
        len(out),
        len(creditors),
        len(debtors),
    )
    return out

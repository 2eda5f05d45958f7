"""Fold expense records into a netted debt graph."""
import logging
from typing import Iterable

from settleup.models import DebtGraph
from settleup.schemas import ExpenseRecord, SettlementState

logger = logging.getLogger(__name__)


def build_debt_graph(expenses: Iterable[ExpenseRecord]) -> DebtGraph:
    """
    Each unsettled split adds ``split.amount`` to what its participant owes the
    payer. Opposing edges are netted as each debt is inserted, so the result has
    at most one direction per pair. Pending and settled splits are skipped, as
    is the payer's own share.
    """
    graph = DebtGraph()
    for expense in expenses:
        graph.add_participant(expense.payer)
        for split in expense.splits:
            if split.participant == expense.payer:
                continue
            if split.state != SettlementState.UNSETTLED:
                continue
            graph.add_debt(split.participant, expense.payer, split.amount)

    logger.debug(
        "Built debt graph: %d participants, %d edges",
        len(graph.participants()),
        graph.edge_count(),
    )
    return graph

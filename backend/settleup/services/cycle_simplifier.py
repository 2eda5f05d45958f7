"""Cancel directed debt cycles without changing anyone's net balance."""
import logging

from settleup.models import DebtGraph

logger = logging.getLogger(__name__)


def simplify_transactions(graph: DebtGraph) -> DebtGraph:
    """
    Return a copy of ``graph`` with the cycles found by a single depth-first pass
    cancelled.

    A cycle is detected when an edge leads back to a node on the current path.
    Every edge in it is reduced by the smallest edge in it, so the loop's weakest
    link disappears and balances are unchanged. ``visited`` is shared by the
    whole pass: each node is expanded once, which means the cycles found depend
    on participant and neighbour order and not every cycle is guaranteed to be
    found.
    """
    simplified = graph.copy()
    visited: set[str] = set()

    def dfs(node: str, path: list[str]) -> None:
        if node in visited:
            return
        visited.add(node)
        path.append(node)

        for neighbor in simplified.neighbors(node):
            # may have been cancelled earlier in this loop
            if simplified.owed(node, neighbor) <= 0:
                continue
            if neighbor in path:
                cycle = path[path.index(neighbor):]
                _cancel_cycle(simplified, cycle)
            else:
                dfs(neighbor, list(path))

    for node in simplified.participants():
        if node not in visited:
            dfs(node, [])

    return simplified


def _cancel_cycle(graph: DebtGraph, cycle: list[str]) -> None:
    if len(cycle) <= 1:
        return

    edges = [(cycle[i], cycle[(i + 1) % len(cycle)]) for i in range(len(cycle))]
    weights = [graph.owed(debtor, creditor) for debtor, creditor in edges]
    # An edge already cancelled by an earlier cycle breaks the loop.
    if min(weights) <= 0:
        return

    min_debt = min(weights)
    for debtor, creditor in edges:
        graph.reduce(debtor, creditor, min_debt)
    logger.debug("Cancelled cycle %s by %s", " -> ".join(cycle), min_debt)

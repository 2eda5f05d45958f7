"""Debt graph: who owes whom, netted pairwise."""
from typing import Iterator


class DebtGraph:
    """
    Directed weighted graph where ``graph.owed(a, b)`` is what ``a`` owes ``b``.

    Invariants:
    - no self-loops
    - for any pair at most one direction carries a positive amount
    - zero edges are deleted, never stored

    Participants keep first-seen order. Traversal and balance passes iterate
    in that order, so it is part of the observable behaviour.
    """

    def __init__(self):
        self._adj: dict[str, dict[str, float]] = {}

    @classmethod
    def from_dict(cls, data: dict[str, dict[str, float]]) -> "DebtGraph":
        graph = cls()
        for debtor, row in data.items():
            graph.add_participant(debtor)
            for creditor, amount in row.items():
                graph.add_participant(creditor)
                if debtor != creditor and amount > 0:
                    graph._adj[debtor][creditor] = amount
        return graph

    def add_participant(self, participant: str) -> None:
        self._adj.setdefault(participant, {})

    def participants(self) -> list[str]:
        return list(self._adj)

    def neighbors(self, participant: str) -> list[str]:
        """Snapshot of creditors ``participant`` currently owes."""
        return list(self._adj.get(participant, {}))

    def owed(self, debtor: str, creditor: str) -> float:
        return self._adj.get(debtor, {}).get(creditor, 0.0)

    def add_debt(self, debtor: str, creditor: str, amount: float) -> None:
        """Record that ``debtor`` owes ``creditor`` more, netting any reverse edge."""
        if debtor == creditor:
            return
        self.add_participant(debtor)
        self.add_participant(creditor)
        forward = self._adj[debtor].get(creditor, 0.0) + amount
        reverse = self._adj[creditor].get(debtor, 0.0)

        if reverse:
            if reverse >= forward:
                reverse -= forward
                forward = 0.0
            else:
                forward -= reverse
                reverse = 0.0
            self._set(creditor, debtor, reverse)
        self._set(debtor, creditor, forward)

    def reduce(self, debtor: str, creditor: str, amount: float) -> None:
        self._set(debtor, creditor, self.owed(debtor, creditor) - amount)

    def _set(self, debtor: str, creditor: str, amount: float) -> None:
        row = self._adj.setdefault(debtor, {})
        if amount > 0:
            row[creditor] = amount
        else:
            row.pop(creditor, None)

    def edges(self) -> Iterator[tuple[str, str, float]]:
        for debtor, row in self._adj.items():
            for creditor, amount in row.items():
                yield debtor, creditor, amount

    def edge_count(self) -> int:
        return sum(len(row) for row in self._adj.values())

    def total(self) -> float:
        return sum(amount for _, _, amount in self.edges())

    def copy(self) -> "DebtGraph":
        clone = DebtGraph()
        clone._adj = {debtor: dict(row) for debtor, row in self._adj.items()}
        return clone

    def to_dict(self) -> dict[str, dict[str, float]]:
        """Plain mapping of non-empty rows."""
        return {debtor: dict(row) for debtor, row in self._adj.items() if row}

    def __bool__(self) -> bool:
        return any(self._adj.values())

    def __eq__(self, other) -> bool:
        if not isinstance(other, DebtGraph):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"DebtGraph({self.to_dict()!r})"

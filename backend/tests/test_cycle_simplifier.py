import random

import pytest

from settleup.models import DebtGraph
from settleup.schemas import ExpenseRecord, SplitEntry
from settleup.services.cycle_simplifier import simplify_transactions
from settleup.services.debt_graph import build_debt_graph
from settleup.services.settlement_planner import compute_balances


def _random_expenses(seed, people=("A", "B", "C", "D", "E"), count=12):
    rng = random.Random(seed)
    expenses = []
    for _ in range(count):
        payer = rng.choice(people)
        others = rng.sample(people, rng.randint(1, len(people)))
        expenses.append(ExpenseRecord(
            payer=payer,
            amount=0.0,
            splits=[SplitEntry(participant=p, amount=float(rng.randint(1, 200))) for p in others],
        ))
    return expenses


def _assert_same_balances(before, after):
    for uid in set(before) | set(after):
        assert after.get(uid, 0.0) == pytest.approx(before.get(uid, 0.0), abs=1e-6)


def test_three_way_cycle_cancels_completely():
    graph = DebtGraph.from_dict({"A": {"B": 50.0}, "B": {"C": 50.0}, "C": {"A": 50.0}})
    simplified = simplify_transactions(graph)
    assert simplified.to_dict() == {}


def test_cycle_reduced_by_smallest_edge():
    graph = DebtGraph.from_dict({"A": {"B": 50.0}, "B": {"C": 30.0}, "C": {"A": 80.0}})
    simplified = simplify_transactions(graph)
    assert simplified.to_dict() == {"A": {"B": 20.0}, "C": {"A": 50.0}}


def test_input_not_mutated():
    data = {"A": {"B": 50.0}, "B": {"C": 50.0}, "C": {"A": 50.0}}
    graph = DebtGraph.from_dict(data)
    simplify_transactions(graph)
    assert graph.to_dict() == data


def test_acyclic_graph_unchanged(make_expense):
    graph = build_debt_graph([
        make_expense("A", 90.0, ["A", "B", "C"]),
        make_expense("B", 60.0, ["A", "B", "C"]),
    ])
    assert simplify_transactions(graph) == graph


def test_empty_graph():
    assert simplify_transactions(DebtGraph()).to_dict() == {}


def test_cycle_in_second_component():
    graph = DebtGraph.from_dict({
        "A": {"B": 10.0},
        "C": {"D": 5.0},
        "D": {"E": 7.0},
        "E": {"C": 9.0},
    })
    simplified = simplify_transactions(graph)
    assert simplified.to_dict() == {"A": {"B": 10.0}, "D": {"E": 2.0}, "E": {"C": 4.0}}


def test_simplify_is_idempotent():
    graph = DebtGraph.from_dict({
        "A": {"B": 40.0, "D": 10.0},
        "B": {"C": 25.0},
        "C": {"A": 15.0, "D": 5.0},
        "D": {"B": 8.0},
    })
    once = simplify_transactions(graph)
    assert simplify_transactions(once) == once


@pytest.mark.parametrize("seed", range(25))
def test_balances_preserved_and_weight_not_increased(seed):
    graph = build_debt_graph(_random_expenses(seed))
    simplified = simplify_transactions(graph)
    _assert_same_balances(compute_balances(graph), compute_balances(simplified))
    assert simplified.total() <= graph.total() + 1e-9

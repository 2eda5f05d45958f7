import pytest

from settleup.schemas import ExpenseRecord, MemberInfo, SettlementState, SplitEntry


def _expense(payer, amount, participants, category="Other", states=None, expense_id=None):
    share = amount / len(participants)
    states = states or {}
    return ExpenseRecord(
        id=expense_id,
        payer=payer,
        amount=amount,
        category=category,
        splits=[
            SplitEntry(participant=p, amount=share, state=states.get(p, SettlementState.UNSETTLED))
            for p in participants
        ],
    )


@pytest.fixture
def make_expense():
    """Equal-split expense factory: make_expense("A", 90, ["A", "B", "C"])."""
    return _expense


@pytest.fixture
def members():
    return [
        MemberInfo(id="A", name="Alice", email="alice@example.com"),
        MemberInfo(id="B", name="Bob", email="bob@example.com"),
        MemberInfo(id="C", name=None, email="carol@example.com"),
    ]


@pytest.fixture
def dinner(make_expense):
    return make_expense("A", 300.0, ["A", "B", "C"], category="Food", expense_id="e1")

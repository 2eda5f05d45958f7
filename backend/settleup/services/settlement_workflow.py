"""Two-step split settlement: the debtor requests, the payer confirms or rejects.

Records are immutable; every transition returns a new ``ExpenseRecord`` for the
expense store to persist.
"""
import logging
from typing import Iterable, Optional

from settleup.exceptions import (
    InvalidSettlementAction,
    SettlementPermissionError,
    SettlementStateError,
)
from settleup.schemas import ExpenseRecord, SettlementAction, SettlementState, SplitEntry

logger = logging.getLogger(__name__)


def _with_state(expense: ExpenseRecord, participant: str, state: SettlementState) -> ExpenseRecord:
    splits = tuple(
        s.model_copy(update={"state": state}) if s.participant == participant else s
        for s in expense.splits
    )
    return expense.model_copy(update={"splits": splits})


def _pending_split(expense: ExpenseRecord, participant: str, missing_error) -> SplitEntry:
    split = expense.split_for(participant)
    if split is None:
        raise missing_error(
            "Participant not found in expense split",
            {"expense": expense.id, "participant": participant},
        )
    if split.state != SettlementState.PENDING_SETTLEMENT:
        raise SettlementStateError(
            "No pending settlement request for this participant",
            {"expense": expense.id, "participant": participant, "state": split.state.value},
        )
    return split


def _require_payer(expense: ExpenseRecord, actor: str, verb: str) -> None:
    if expense.payer != actor:
        raise SettlementPermissionError(
            f"Only the person who paid can {verb} settlement",
            {"expense": expense.id, "actor": actor},
        )


def request_settlement(expense: ExpenseRecord, actor: str) -> ExpenseRecord:
    split = expense.split_for(actor)
    if split is None:
        raise SettlementPermissionError(
            "Not authorized to settle this expense", {"expense": expense.id, "actor": actor}
        )
    if expense.payer == actor:
        raise SettlementPermissionError(
            "You cannot settle an expense you paid for", {"expense": expense.id, "actor": actor}
        )
    if split.state == SettlementState.SETTLED:
        raise SettlementStateError(
            "Split is already settled", {"expense": expense.id, "participant": actor}
        )
    logger.info("Settlement requested: expense=%s participant=%s", expense.id, actor)
    return _with_state(expense, actor, SettlementState.PENDING_SETTLEMENT)


def confirm_settlement(expense: ExpenseRecord, actor: str, participant: str) -> ExpenseRecord:
    _require_payer(expense, actor, "confirm")
    _pending_split(expense, participant, SettlementStateError)
    logger.info("Settlement confirmed: expense=%s participant=%s", expense.id, participant)
    return _with_state(expense, participant, SettlementState.SETTLED)


def reject_settlement(expense: ExpenseRecord, actor: str, participant: str) -> ExpenseRecord:
    _require_payer(expense, actor, "reject")
    _pending_split(expense, participant, SettlementStateError)
    logger.info("Settlement rejected: expense=%s participant=%s", expense.id, participant)
    return _with_state(expense, participant, SettlementState.UNSETTLED)


def cancel_settlement(expense: ExpenseRecord, actor: str) -> ExpenseRecord:
    _pending_split(expense, actor, SettlementPermissionError)
    logger.info("Settlement request cancelled: expense=%s participant=%s", expense.id, actor)
    return _with_state(expense, actor, SettlementState.UNSETTLED)


def apply_settlement_action(
    expense: ExpenseRecord,
    action,
    actor: str,
    participant: Optional[str] = None,
) -> ExpenseRecord:
    """Dispatch a request/confirm/reject/cancel action coming from the caller."""
    try:
        action = SettlementAction(action)
    except ValueError:
        raise InvalidSettlementAction(
            'Invalid action. Must be "request", "confirm", "reject", or "cancel"',
            {"action": action},
        ) from None

    if action == SettlementAction.REQUEST:
        return request_settlement(expense, actor)
    if action == SettlementAction.CANCEL:
        return cancel_settlement(expense, actor)

    if not participant:
        raise SettlementStateError("User ID is required", {"action": action.value})
    if action == SettlementAction.CONFIRM:
        return confirm_settlement(expense, actor, participant)
    return reject_settlement(expense, actor, participant)


def pending_settlements(expenses: Iterable[ExpenseRecord]) -> list[tuple[ExpenseRecord, SplitEntry]]:
    """Splits awaiting the payer's confirmation, in record order."""
    return [
        (e, s)
        for e in expenses
        for s in e.splits
        if s.state == SettlementState.PENDING_SETTLEMENT
    ]

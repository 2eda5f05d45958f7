"""Pydantic schemas for expense records and computed results."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from settleup.config import DEFAULT_CATEGORY


# ----- Expense records -----
class SettlementState(str, Enum):
    UNSETTLED = "unsettled"
    PENDING_SETTLEMENT = "pending_settlement"
    SETTLED = "settled"


class SettlementAction(str, Enum):
    REQUEST = "request"
    CONFIRM = "confirm"
    REJECT = "reject"
    CANCEL = "cancel"


class SplitEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    participant: str
    amount: float
    state: SettlementState = SettlementState.UNSETTLED


class ExpenseRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    payer: str
    amount: float
    splits: tuple[SplitEntry, ...] = ()
    category: str = DEFAULT_CATEGORY
    description: Optional[str] = None

    def split_for(self, participant: str) -> Optional[SplitEntry]:
        return next((s for s in self.splits if s.participant == participant), None)


# ----- Settlement -----
class Settlement(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_user_id: str
    to_user_id: str
    amount: float


# ----- Analysis -----
class UserExpense(BaseModel):
    participant: str
    amount: float
    percentage: float


class CategoryExpense(BaseModel):
    category: str
    amount: float
    percentage: float


class ExpenseAnalysis(BaseModel):
    total_amount: float = 0.0
    user_expenses: list[UserExpense] = []
    category_expenses: list[CategoryExpense] = []


# ----- Membership directory / annotated output -----
class MemberInfo(BaseModel):
    id: str
    name: Optional[str] = None
    email: Optional[EmailStr] = None


class SettlementParty(BaseModel):
    id: str
    name: Optional[str] = None


class NamedSettlement(BaseModel):
    from_: SettlementParty = Field(alias="from")
    to: SettlementParty
    amount: float

    model_config = ConfigDict(populate_by_name=True)


class BalanceEntry(BaseModel):
    user_id: str
    name: Optional[str] = None
    balance: float


class SettlementSummary(BaseModel):
    group_id: str
    members: list[MemberInfo] = []
    balances: list[BalanceEntry]
    settlements: list[NamedSettlement]


class NamedUserExpense(UserExpense):
    name: Optional[str] = None


class GroupExpenseAnalysis(BaseModel):
    total_amount: float
    user_expenses: list[NamedUserExpense]
    category_expenses: list[CategoryExpense]

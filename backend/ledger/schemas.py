"""Pydantic schemas for request/response."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


# ----- Members -----
class Member(BaseModel):
    user_id: str
    name: Optional[str] = None
    email: Optional[EmailStr] = None


class Party(BaseModel):
    user_id: str
    name: Optional[str] = None


# ----- Records -----
class SplitDetail(BaseModel):
    user_id: str
    amount: float = Field(ge=0)


class ExpenseRecord(BaseModel):
    paid_by: str
    amount: float = Field(gt=0)
    split_details: list[SplitDetail] = []
    description: Optional[str] = None
    category: Optional[str] = None


class SettlementRecord(BaseModel):
    paid_by: str
    paid_to: str
    amount: float = Field(gt=0)


# ----- Balances -----
class NetBalance(BaseModel):
    user_id: str
    name: Optional[str] = None
    net_balance: float


class MemberBalance(NetBalance):
    model_config = ConfigDict(frozen=True)

    email: Optional[EmailStr] = None
    total_paid: float = 0.0
    total_owed: float = 0.0


class FriendBalance(BaseModel):
    user_id: str
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    balance: float


# ----- Transactions -----
class Transaction(BaseModel):
    """`from_user` should pay `amount` to `to_user`. Serialised as `from` / `to`."""

    model_config = ConfigDict(populate_by_name=True)

    from_user: Party = Field(alias="from")
    to_user: Party = Field(alias="to")
    amount: float

    @classmethod
    def between(cls, debtor: NetBalance, creditor: NetBalance, amount: float) -> "Transaction":
        return cls(
            from_user=Party(user_id=debtor.user_id, name=debtor.name),
            to_user=Party(user_id=creditor.user_id, name=creditor.name),
            amount=amount,
        )


class GroupBalances(BaseModel):
    balances: list[MemberBalance]
    transactions: list[Transaction]


class SimplificationStats(BaseModel):
    original_count: int
    simplified_count: int
    transactions_saved: int
    percentage_saved: int


# ----- API payloads -----
class GroupSnapshot(BaseModel):
    members: list[Member]
    former_members: list[Member] = []
    expenses: list[ExpenseRecord] = []
    settlements: list[SettlementRecord] = []


class GroupBalanceResponse(GroupBalances):
    simplified: list[Transaction]
    stats: SimplificationStats


class SimplifyResponse(BaseModel):
    transactions: list[Transaction]
    stats: SimplificationStats


class FriendBalancesRequest(BaseModel):
    user_id: str
    groups: list[GroupSnapshot] = []


class FriendBalancesResponse(BaseModel):
    user_id: str
    friends: list[FriendBalance]
    transactions: list[Transaction]


SPLIT_TYPES = ["equal", "unequal", "percentage"]


class SplitRequest(BaseModel):
    split_type: str = "equal"
    amount: float
    user_ids: list[str] = []
    shares: Optional[dict[str, float]] = None
    percentages: Optional[dict[str, float]] = None


class SplitResponse(BaseModel):
    split_type: str
    amount: float
    split_details: list[SplitDetail]


# ----- Summary -----
class MemberSpending(BaseModel):
    user_id: str
    name: Optional[str] = None
    paid: float


class BudgetStatus(BaseModel):
    limit: float
    spent: float
    remaining: float
    percentage_used: float
    exceeded: bool


class GroupSummary(BaseModel):
    total_expenses: float
    expense_count: int
    category_totals: dict[str, float]
    member_spending: list[MemberSpending]
    budget: Optional[BudgetStatus] = None


class SummaryRequest(GroupSnapshot):
    budget_limit: Optional[float] = Field(default=None, gt=0)

"""Balances: who owes whom for a group snapshot, simplified settle-up, friend totals."""
from fastapi import APIRouter, HTTPException

from ledger.schemas import (
    FriendBalancesRequest, FriendBalancesResponse, GroupBalanceResponse, GroupSnapshot, Member,
    GroupSummary, NetBalance, SplitRequest, SplitResponse, SimplifyResponse, SummaryRequest,
)
from ledger.services.balance_calculator import compute_balances
from ledger.services.debt_simplifier import direct_transactions, get_simplification_stats, simplify
from ledger.services.friends import aggregate_net_balances, friend_balances
from ledger.services.splits import SplitError, build_split_details
from ledger.services.summary import group_summary

router = APIRouter(prefix="/balances", tags=["balances"])


def _all_members(snapshot: GroupSnapshot) -> list[Member]:
    """Current members first, then former members not already listed."""
    seen = {m.user_id for m in snapshot.members}
    if len(seen) != len(snapshot.members):
        raise HTTPException(status_code=400, detail="Duplicate members in group")
    out = list(snapshot.members)
    for m in snapshot.former_members:
        if m.user_id not in seen:
            seen.add(m.user_id)
            out.append(m)
    return out


@router.post("/group", response_model=GroupBalanceResponse)
def get_group_balances(data: GroupSnapshot):
    result = compute_balances(_all_members(data), data.expenses, data.settlements)
    simplified = simplify(result.balances)
    return GroupBalanceResponse(
        balances=result.balances,
        transactions=result.transactions,
        simplified=simplified,
        stats=get_simplification_stats(result.transactions, simplified),
    )


@router.post("/simplify", response_model=SimplifyResponse)
def simplify_balances(data: list[NetBalance]):
    simplified = simplify(data)
    return SimplifyResponse(
        transactions=simplified,
        stats=get_simplification_stats(direct_transactions(data), simplified),
    )


@router.post("/friends", response_model=FriendBalancesResponse)
def get_friend_balances(data: FriendBalancesRequest):
    groups = [g for g in data.groups if any(m.user_id == data.user_id for m in _all_members(g))]
    directory: dict[str, Member] = {}
    for g in groups:
        for m in _all_members(g):
            directory.setdefault(m.user_id, m)

    expenses = [e for g in groups for e in g.expenses]
    settlements = [s for g in groups for s in g.settlements]
    friends = friend_balances(data.user_id, expenses, settlements, directory)

    per_group = [compute_balances(_all_members(g), g.expenses, g.settlements) for g in groups]
    transactions = [
        t for t in simplify(aggregate_net_balances(per_group))
        if data.user_id in (t.from_user.user_id, t.to_user.user_id)
    ]
    return FriendBalancesResponse(user_id=data.user_id, friends=friends, transactions=transactions)


@router.post("/splits", response_model=SplitResponse)
def preview_split(data: SplitRequest):
    try:
        details = build_split_details(
            data.split_type, data.amount,
            user_ids=data.user_ids, shares=data.shares, percentages=data.percentages,
        )
    except SplitError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return SplitResponse(split_type=data.split_type, amount=data.amount, split_details=details)


@router.post("/summary", response_model=GroupSummary)
def get_group_summary(data: SummaryRequest):
    return group_summary(_all_members(data), data.expenses, budget_limit=data.budget_limit)

"""Balances between one user and everyone they share a group with, across groups."""
import logging
from collections import defaultdict
from typing import Iterable, Mapping

from ledger.schemas import ExpenseRecord, FriendBalance, GroupBalances, Member, NetBalance, SettlementRecord
from ledger.services.money import is_settled, round2

logger = logging.getLogger(__name__)


def friend_balances(
    user_id: str,
    expenses: Iterable[ExpenseRecord],
    settlements: Iterable[SettlementRecord],
    directory: Mapping[str, Member],
) -> list[FriendBalance]:
    """
    Positive balance = the friend owes `user_id`, negative = `user_id` owes the friend.
    Only expenses and settlements between the user and that friend count; a third
    person's share of an expense is between them and the payer.
    """
    net: dict[str, float] = defaultdict(float)

    for e in expenses:
        for s in e.split_details:
            if s.user_id == e.paid_by:
                continue
            if e.paid_by == user_id:
                net[s.user_id] += s.amount
            elif s.user_id == user_id:
                net[e.paid_by] -= s.amount

    for st in settlements:
        if st.paid_by == user_id:
            net[st.paid_to] += st.amount
        elif st.paid_to == user_id:
            net[st.paid_by] -= st.amount

    out = []
    for friend_id, bal in net.items():
        if friend_id == user_id or is_settled(bal):
            continue
        member = directory.get(friend_id)
        if member is None:
            logger.warning("Friend %s has a balance but no member record", friend_id)
        out.append(FriendBalance(
            user_id=friend_id,
            name=member.name if member else None,
            email=member.email if member else None,
            balance=round2(bal),
        ))
    out.sort(key=lambda f: -abs(f.balance))
    return out


def aggregate_net_balances(groups: Iterable[GroupBalances]) -> list[NetBalance]:
    """Sum each user's net balance over several groups, first-seen order."""
    totals: dict[str, float] = {}
    names: dict[str, str] = {}
    for g in groups:
        for b in g.balances:
            totals[b.user_id] = totals.get(b.user_id, 0.0) + b.net_balance
            if b.name and b.user_id not in names:
                names[b.user_id] = b.name
    return [
        NetBalance(user_id=uid, name=names.get(uid), net_balance=round2(total))
        for uid, total in totals.items()
    ]

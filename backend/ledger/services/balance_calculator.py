"""Per-member balances for one group, plus the naive (unsorted) settle-up pairing."""
import logging
from collections import defaultdict
from typing import Iterable, Sequence

from ledger.schemas import (
    ExpenseRecord, GroupBalances, Member, MemberBalance, NetBalance, SettlementRecord, Transaction,
)
from ledger.services.money import EPSILON, is_creditor, is_debtor, is_settled, round2

logger = logging.getLogger(__name__)


def compute_balances(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    settlements: Iterable[SettlementRecord],
) -> GroupBalances:
    """
    Net balance per member: paid - owed, then shifted by settlements.
    Positive = is owed money, negative = owes money.

    `members` should hold everyone who ever took part in the group (current and
    former). Records naming anyone else are orphaned: they are logged and left
    out of the result.
    """
    # first record wins when an id is listed twice
    unique: dict[str, Member] = {}
    for m in members:
        unique.setdefault(m.user_id, m)
    known = unique.keys()
    paid: dict[str, float] = defaultdict(float)
    owed: dict[str, float] = defaultdict(float)
    adjust: dict[str, float] = defaultdict(float)
    orphaned = 0.0

    for e in expenses:
        check_split_details(e)
        if e.paid_by in known:
            paid[e.paid_by] += e.amount
        else:
            orphaned += e.amount
        for s in e.split_details:
            if s.user_id in known:
                owed[s.user_id] += s.amount
            else:
                orphaned -= s.amount

    for st in settlements:
        if st.paid_by in known:
            adjust[st.paid_by] += st.amount
        else:
            orphaned += st.amount
        if st.paid_to in known:
            adjust[st.paid_to] -= st.amount
        else:
            orphaned -= st.amount

    if not is_settled(orphaned):
        logger.warning(
            "Records reference users outside the member list; %.2f left unattributed", orphaned,
        )

    nets = {m.user_id: paid[m.user_id] - owed[m.user_id] + adjust[m.user_id] for m in unique.values()}
    check_conservation(nets.values())

    balances = [
        MemberBalance(
            user_id=m.user_id,
            name=m.name,
            email=m.email,
            total_paid=round2(paid[m.user_id]),
            total_owed=round2(owed[m.user_id]),
            net_balance=round2(nets[m.user_id]),
        )
        for m in unique.values()
    ]
    transactions = naive_pair(balances)
    logger.debug("Computed %d balances, %d naive transactions", len(balances), len(transactions))
    return GroupBalances(balances=balances, transactions=transactions)


def check_split_details(expense: ExpenseRecord) -> bool:
    """Warn when an expense's shares don't add up to its amount. Never raises."""
    total = sum(s.amount for s in expense.split_details)
    if abs(total - expense.amount) > EPSILON:
        logger.warning(
            "Split details total %.2f does not match expense amount %.2f (paid by %s)",
            total, expense.amount, expense.paid_by,
        )
        return False
    return True


def check_conservation(net_balances: Iterable[float]) -> bool:
    residual = sum(net_balances)
    if abs(residual) > EPSILON:
        logger.warning("Net balances sum to %.2f instead of 0", residual)
        return False
    return True


def naive_pair(balances: Sequence[NetBalance]) -> list[Transaction]:
    """
    Pair creditors with debtors in the order given, without sorting.
    Only the baseline for the "transactions saved" comparison; see
    debt_simplifier.simplify for the list users are shown.
    """
    creditors = [(b, b.net_balance) for b in balances if is_creditor(b.net_balance)]
    debtors = [(b, -b.net_balance) for b in balances if is_debtor(b.net_balance)]

    out: list[Transaction] = []
    for i in range(len(creditors)):
        for j in range(len(debtors)):
            cb, c_amount = creditors[i]
            db, d_amount = debtors[j]
            if is_settled(c_amount):
                break
            if is_settled(d_amount):
                continue
            transfer = min(c_amount, d_amount)
            out.append(Transaction.between(db, cb, round2(transfer)))
            creditors[i] = (cb, c_amount - transfer)
            debtors[j] = (db, d_amount - transfer)
    return out

"""Cut the number of transfers needed so everyone is settled (who owes whom)."""
import logging
import math
from typing import Sequence

from ledger.schemas import NetBalance, SimplificationStats, Transaction
from ledger.services.money import is_creditor, is_debtor, is_settled, round2

logger = logging.getLogger(__name__)


def simplify(balances: Sequence[NetBalance]) -> list[Transaction]:
    """
    balances: net balance per user (positive = is owed money, negative = owes money),
    from one group or summed across several.

    Greedy: the largest debtor pays the largest creditor until one of them is
    cleared, then move on. Usually far fewer transfers than pairing in input
    order, but not guaranteed to be the smallest possible set.
    """
    creditors = [(b, b.net_balance) for b in balances if is_creditor(b.net_balance)]
    debtors = [(b, -b.net_balance) for b in balances if is_debtor(b.net_balance)]
    creditors.sort(key=lambda x: -x[1])
    debtors.sort(key=lambda x: -x[1])

    out: list[Transaction] = []
    i, j = 0, 0
    while i < len(creditors) and j < len(debtors):
        cb, c_amount = creditors[i]
        db, d_amount = debtors[j]
        transfer = min(c_amount, d_amount)
        if not is_settled(transfer):
            out.append(Transaction.between(db, cb, round2(transfer)))
            creditors[i] = (cb, c_amount - transfer)
            debtors[j] = (db, d_amount - transfer)
        # the smaller side is now within a cent of zero, so at least one pointer moves
        if is_settled(creditors[i][1]):
            i += 1
        if is_settled(debtors[j][1]):
            j += 1

    logger.debug(
        "Simplified %d creditors / %d debtors into %d transactions",
        len(creditors), len(debtors), len(out),
    )
    return out


def direct_transactions(balances: Sequence[NetBalance]) -> list[Transaction]:
    """Every debtor paying every creditor directly, as people would without a ledger."""
    out: list[Transaction] = []
    for creditor in balances:
        if not is_creditor(creditor.net_balance):
            continue
        for debtor in balances:
            if not is_debtor(debtor.net_balance):
                continue
            amount = min(creditor.net_balance, -debtor.net_balance)
            if not is_settled(amount):
                out.append(Transaction.between(debtor, creditor, round2(amount)))
    return out


def get_simplification_stats(
    original: Sequence[Transaction], simplified: Sequence[Transaction],
) -> SimplificationStats:
    original_count = len(original)
    simplified_count = len(simplified)
    saved = original_count - simplified_count
    # half-up, so 12.5% shows as 13%
    percentage = math.floor(saved / original_count * 100 + 0.5) if original_count > 0 else 0
    return SimplificationStats(
        original_count=original_count,
        simplified_count=simplified_count,
        transactions_saved=saved,
        percentage_saved=percentage,
    )

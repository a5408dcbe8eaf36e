"""Spending totals for a group: per category, per payer, and against a budget."""
import logging
from typing import Iterable, Optional, Sequence

from ledger.schemas import BudgetStatus, ExpenseRecord, GroupSummary, Member, MemberSpending
from ledger.services.money import round2

logger = logging.getLogger(__name__)


def budget_status(spent: float, limit: float) -> BudgetStatus:
    return BudgetStatus(
        limit=limit,
        spent=round2(spent),
        remaining=round2(limit - spent),
        percentage_used=round2(spent / limit * 100),
        exceeded=spent > limit,
    )


def group_summary(
    members: Sequence[Member],
    expenses: Iterable[ExpenseRecord],
    budget_limit: Optional[float] = None,
) -> GroupSummary:
    """Expenses without a category are counted under "other"."""
    total = 0.0
    count = 0
    cat_totals: dict[str, float] = {}
    member_paid: dict[str, float] = {}
    for m in members:
        member_paid.setdefault(m.user_id, 0.0)

    for e in expenses:
        total += e.amount
        count += 1
        cat = e.category or "other"
        cat_totals[cat] = cat_totals.get(cat, 0.0) + e.amount
        if e.paid_by in member_paid:
            member_paid[e.paid_by] += e.amount

    names = {m.user_id: m.name for m in reversed(members)}
    budget = None
    if budget_limit is not None:
        budget = budget_status(total, budget_limit)
        if budget.exceeded:
            logger.info("Group spending %.2f exceeds budget %.2f", total, budget_limit)

    return GroupSummary(
        total_expenses=round2(total),
        expense_count=count,
        category_totals={cat: round2(v) for cat, v in cat_totals.items()},
        member_spending=[
            MemberSpending(user_id=uid, name=names.get(uid), paid=round2(paid))
            for uid, paid in member_paid.items()
        ],
        budget=budget,
    )

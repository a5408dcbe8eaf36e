import logging

from conftest import expense, member
from ledger.services.summary import budget_status, group_summary


def test_group_summary_totals():
    expenses = [expense("a", 60, {"a": 30, "b": 30}), expense("a", 40, {"a": 20, "b": 20})]
    expenses[0].category = "food"
    expenses[1].category = "transport"
    summary = group_summary([member("a"), member("b")], expenses)
    assert summary.total_expenses == 100
    assert summary.expense_count == 2
    assert summary.category_totals == {"food": 60, "transport": 40}
    assert [(m.user_id, m.paid) for m in summary.member_spending] == [("a", 100), ("b", 0)]
    assert summary.budget is None


def test_group_summary_empty():
    summary = group_summary([member("a")], [], budget_limit=50)
    assert summary.total_expenses == 0
    assert summary.category_totals == {}
    assert summary.budget.remaining == 50
    assert summary.budget.percentage_used == 0
    assert not summary.budget.exceeded


def test_payer_outside_members_counts_toward_total_only():
    summary = group_summary([member("a")], [expense("zed", 10, {"a": 10})])
    assert summary.total_expenses == 10
    assert [(m.user_id, m.paid) for m in summary.member_spending] == [("a", 0)]


def test_budget_status():
    status = budget_status(33.333, 100)
    assert status.spent == 33.33
    assert status.remaining == 66.67
    assert status.percentage_used == 33.33
    assert not status.exceeded
    assert not budget_status(100, 100).exceeded
    assert budget_status(100.01, 100).exceeded


def test_exceeded_budget_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="ledger"):
        group_summary([member("a")], [expense("a", 120, {"a": 120})], budget_limit=100)
    assert "exceeds budget" in caplog.text

import pytest
from fastapi.testclient import TestClient

from ledger.main import app
from ledger.schemas import ExpenseRecord, Member, SettlementRecord, SplitDetail


def member(uid: str) -> Member:
    return Member(user_id=uid, name=uid.upper(), email=f"{uid}@example.com")


def expense(paid_by: str, amount: float, shares: dict[str, float]) -> ExpenseRecord:
    return ExpenseRecord(
        paid_by=paid_by,
        amount=amount,
        split_details=[SplitDetail(user_id=uid, amount=amt) for uid, amt in shares.items()],
    )


def settlement(paid_by: str, paid_to: str, amount: float) -> SettlementRecord:
    return SettlementRecord(paid_by=paid_by, paid_to=paid_to, amount=amount)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def abc():
    return [member("a"), member("b"), member("c")]


@pytest.fixture
def abcd():
    return [member("a"), member("b"), member("c"), member("d")]

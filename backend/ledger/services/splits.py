"""Turn an expense amount plus a split rule into per-member split details."""
from typing import Optional

from ledger.schemas import SPLIT_TYPES, SplitDetail
from ledger.services.money import EPSILON, round2


class SplitError(ValueError):
    """The requested split can't produce shares that add up to the amount."""


def equal_split(amount: float, user_ids: list[str]) -> list[SplitDetail]:
    """Even shares; the rounding remainder goes to the first participant."""
    if not user_ids:
        raise SplitError("At least one participant required")
    if len(set(user_ids)) != len(user_ids):
        raise SplitError("Duplicate participants in split")
    share = round2(amount / len(user_ids))
    remainder = round2(amount - share * len(user_ids))
    return [
        SplitDetail(user_id=uid, amount=round2(share + remainder) if idx == 0 else share)
        for idx, uid in enumerate(user_ids)
    ]


def unequal_split(amount: float, shares: dict[str, float]) -> list[SplitDetail]:
    if not shares:
        raise SplitError("Unequal split requires shares")
    if any(v < 0 for v in shares.values()):
        raise SplitError("Shares cannot be negative")
    total_shares = round2(sum(shares.values()))
    if abs(total_shares - amount) > EPSILON:
        raise SplitError(f"Shares total ({total_shares}) must equal expense amount ({amount})")
    return [SplitDetail(user_id=uid, amount=amt) for uid, amt in shares.items()]


def percentage_split(amount: float, percentages: dict[str, float]) -> list[SplitDetail]:
    if not percentages:
        raise SplitError("Percentage split requires percentages")
    if any(v < 0 for v in percentages.values()):
        raise SplitError("Percentages cannot be negative")
    total_pct = round2(sum(percentages.values()))
    if abs(total_pct - 100) > EPSILON:
        raise SplitError(f"Percentages total ({total_pct}) must equal 100")
    details = [round2(amount * pct / 100) for pct in percentages.values()]
    # per-member rounding can drift a cent; the first participant absorbs it
    details[0] = round2(details[0] + amount - sum(details))
    return [SplitDetail(user_id=uid, amount=amt) for uid, amt in zip(percentages, details)]


def build_split_details(
    split_type: str,
    amount: float,
    user_ids: Optional[list[str]] = None,
    shares: Optional[dict[str, float]] = None,
    percentages: Optional[dict[str, float]] = None,
) -> list[SplitDetail]:
    if split_type not in SPLIT_TYPES:
        raise SplitError(f"Invalid split type. Must be one of: {', '.join(SPLIT_TYPES)}")
    if amount <= 0:
        raise SplitError("Amount must be positive")
    if split_type == "unequal":
        return unequal_split(amount, shares or {})
    if split_type == "percentage":
        return percentage_split(amount, percentages or {})
    return equal_split(amount, user_ids or [])

"""Currency helpers shared by the balance calculator and the debt simplifier."""

# One cent. Anything at or below this in absolute value counts as settled.
EPSILON = 0.01


def round2(value: float) -> float:
    return round(value, 2)


def is_settled(amount: float) -> bool:
    return abs(amount) <= EPSILON


def is_creditor(amount: float) -> bool:
    return amount > EPSILON


def is_debtor(amount: float) -> bool:
    return amount < -EPSILON

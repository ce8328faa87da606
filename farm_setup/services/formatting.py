# farm_setup/services/formatting.py


def group_indian(n: int) -> str:
    """
    12345678 -> '1,23,45,678' (lakh / crore grouping)
    """
    sign = "-" if n < 0 else ""
    digits = str(abs(int(n)))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def format_inr(amount: float, symbol: str = "₹") -> str:
    """Whole rupees, Indian digit grouping: 150000 -> '₹1,50,000'."""
    value = int(round(amount))
    if value < 0:
        return f"-{symbol}{group_indian(-value)}"
    return f"{symbol}{group_indian(value)}"

from decimal import Decimal, ROUND_HALF_UP

TWOPLACES = Decimal("0.01")
# Largest value a Numeric(10, 2) column holds
MAX_AMOUNT = Decimal("99999999.99")


def to_money(value) -> Decimal:
    """Quantize to two decimal places; floats go through str() to avoid binary noise."""
    d = value if isinstance(value, Decimal) else Decimal(str(value))
    return d.quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def to_cents(value) -> int:
    return int((to_money(value) * 100).to_integral_value(rounding=ROUND_HALF_UP))


__all__ = ["TWOPLACES", "MAX_AMOUNT", "to_money", "to_cents"]

"""Monetary rounding utilities"""

from decimal import Context, Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
UNIT = Decimal("1")

# Wide enough for any finite float quantized to cents
_CONTEXT = Context(prec=340)


def round_half_up(value: float, quantum: Decimal = CENT) -> float:
    """Round half away from zero to the given quantum (cents by default)"""
    # repr() gives the shortest string that round-trips, so 2.675 rounds to 2.68
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT))


def round_to_whole(value: float) -> int:
    """Round half away from zero to a whole currency unit"""
    return int(Decimal(repr(value)).quantize(UNIT, rounding=ROUND_HALF_UP, context=_CONTEXT))

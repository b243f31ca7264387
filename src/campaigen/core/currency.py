#!/usr/bin/env python3
"""
Currency Handling Utilities

Spend amounts are kept as Decimal end to end so what the user typed is what
gets stored and listed. Floats are never used for money.
"""

from decimal import Decimal, InvalidOperation, localcontext

CENT = Decimal("0.01")


def parse_amount(value: str | int | Decimal) -> Decimal:
    """
    Parse a currency amount into a Decimal.

    Accepts plain numbers and the usual decorations ("$1,234.50").
    Sign and magnitude are not restricted.

    Args:
        value: Amount as string, int or Decimal

    Returns:
        Decimal amount

    Raises:
        ValueError: If the value is not a finite number

    Examples:
        parse_amount('12.34') -> Decimal('12.34')
        parse_amount('$1,000') -> Decimal('1000')
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    else:
        clean_str = str(value).replace("$", "").replace(",", "").strip()
        if not clean_str:
            raise ValueError("Amount must not be empty")
        try:
            amount = Decimal(clean_str)
        except InvalidOperation:
            raise ValueError(f"Invalid amount: {value}") from None

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value}")
    return amount


def format_amount(amount: Decimal) -> str:
    """
    Format an amount for display with at least two decimal places.

    Extra precision is kept rather than rounded away. Magnitude is not
    bounded by the ambient decimal context.

    Examples:
        format_amount(Decimal('12.3')) -> '12.30'
        format_amount(Decimal('0.125')) -> '0.125'
    """
    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -2:
        return f"{amount:f}"
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return f"{amount.quantize(CENT):f}"

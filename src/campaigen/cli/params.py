#!/usr/bin/env python3
"""
Custom click parameter types for amounts and dates.
"""

from datetime import datetime
from decimal import Decimal

import click

from ..core.currency import parse_amount
from ..core.dates import ensure_utc, parse_date


class AmountParamType(click.ParamType):
    """Decimal currency amount, e.g. 12.34 or $1,200."""

    name = "decimal"

    def convert(self, value, param, ctx) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            return parse_amount(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


class DateParamType(click.ParamType):
    """Date or date-time, interpreted as UTC."""

    name = "date"

    def convert(self, value, param, ctx) -> datetime:
        if isinstance(value, datetime):
            return ensure_utc(value)
        try:
            return parse_date(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


AMOUNT = AmountParamType()
DATE = DateParamType()

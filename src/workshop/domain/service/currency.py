"""Currency display formatting.

Mirrors what ``Intl.NumberFormat('uz-UZ')`` produces for the workshop's
price list: thousands grouped with a non-breaking space, a comma before
the (optional) fraction, and a fixed currency suffix. Display only; the
output is never parsed back.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

NBSP = "\u00a0"


@dataclass(frozen=True)
class CurrencyFormat:
    suffix: str = "so'm"
    group_separator: str = NBSP
    decimal_separator: str = ","
    max_fraction_digits: int = 3

    def format(self, amount: Decimal | int) -> str:
        value = Decimal(amount)
        quantum = Decimal(1).scaleb(-self.max_fraction_digits)
        # quantize needs room for every integer digit plus the fraction
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, value.adjusted() + self.max_fraction_digits + 2)
            value = value.quantize(quantum, rounding=ROUND_HALF_EVEN)

        sign = "-" if value < 0 else ""
        integer_part, _, fraction = f"{abs(value):f}".partition(".")
        fraction = fraction.rstrip("0")

        grouped = f"{int(integer_part):,}".replace(",", self.group_separator)
        number = grouped if not fraction else f"{grouped}{self.decimal_separator}{fraction}"
        return f"{sign}{number} {self.suffix}"


DEFAULT_FORMAT = CurrencyFormat()


def format_currency(amount: Decimal | int, fmt: CurrencyFormat = DEFAULT_FORMAT) -> str:
    """Format *amount* for display, e.g. ``1234567`` -> ``"1 234 567 so'm"``."""
    return fmt.format(amount)

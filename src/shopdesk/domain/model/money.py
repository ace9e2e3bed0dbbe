"""Money Engine — pure functions over integer minor units.

All amounts are integers in the currency's minor unit (cents).  Tax is the
only step that touches a fraction; it is computed in Decimal and rounded
half-up, which for non-negative subtotals is the same as rounding half away
from zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Protocol

from shopdesk.domain.exceptions import ValidationError

CENTS_PER_UNIT = 100
NBSP = "\u00a0"

CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
    "JPY": "¥",
    "CHF": "CHF",
}


class PricedLine(Protocol):
    unit_cents: int
    qty: int


@dataclass(frozen=True)
class MoneySettings:
    """Tax rate, currency and display locale stamped onto new orders.

    Built once at startup (see ``infrastructure.config``) and handed to the
    use cases; nothing in the domain reads the environment.
    """

    tax_rate: Decimal = Decimal("0.21")
    currency_code: str = "EUR"
    locale: str = "es-ES"


@dataclass(frozen=True)
class Totals:
    subtotal_cents: int
    tax_cents: int
    total_cents: int


def compute_tax(subtotal_cents: int, tax_rate: Decimal) -> int:
    # str() first so a float rate like 0.21 is not read as 0.2099999...
    rate = tax_rate if isinstance(tax_rate, Decimal) else Decimal(str(tax_rate))
    raw = Decimal(subtotal_cents) * rate
    return int(raw.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def compute_totals(lines: Iterable[PricedLine], tax_rate: Decimal) -> Totals:
    """Subtotal, tax and total for a set of priced lines.

    ``total_cents == subtotal_cents + tax_cents`` always holds.
    """
    lines = list(lines)
    if not lines:
        raise ValidationError("Order must contain at least one item")

    subtotal_cents = sum(line.unit_cents * line.qty for line in lines)
    tax_cents = compute_tax(subtotal_cents, tax_rate)
    return Totals(
        subtotal_cents=subtotal_cents,
        tax_cents=tax_cents,
        total_cents=subtotal_cents + tax_cents,
    )


def to_units(cents: int) -> Decimal:
    """2500 -> Decimal('25.00')."""
    return (Decimal(cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"))


# --- Display -----------------------------------------------------------------

# decimal separator, group separator, minimum digits before grouping, symbol after
_LOCALE_FORMATS = {
    "es-ES": (",", ".", 5, True),
    "de-DE": (",", ".", 4, True),
    "fr-FR": (",", NBSP, 4, True),
    "en-US": (".", ",", 4, False),
    "en-GB": (".", ",", 4, False),
}


def _group(digits: str, sep: str, min_digits: int) -> str:
    if len(digits) < min_digits:
        return digits
    groups = []
    while digits:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    return sep.join(groups)


def format_money(cents: int, currency: str = "EUR", locale: str = "es-ES") -> str:
    """Render minor units for humans: 302500 in es-ES is "3025,00 €".

    Symbols are separated from the number by a no-break space, as browsers
    and ICU do.

    Presentation only; never feed the result back into arithmetic.
    """
    decimal_sep, group_sep, min_group, symbol_after = _LOCALE_FORMATS.get(
        locale, _LOCALE_FORMATS["en-US"]
    )
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())

    sign = "-" if cents < 0 else ""
    units, minor = divmod(abs(cents), CENTS_PER_UNIT)
    number = f"{_group(str(units), group_sep, min_group)}{decimal_sep}{minor:02d}"

    if symbol_after:
        return f"{sign}{number}{NBSP}{symbol}"
    if symbol.isalpha():
        return f"{sign}{symbol}{NBSP}{number}"
    return f"{sign}{symbol}{number}"

"""
Naira amount helpers.

Paystack takes and reports amounts in kobo (1 Naira = 100 kobo). Conversions
use `Decimal` so integral Naira values survive a round trip exactly.
"""

from decimal import ROUND_HALF_UP, Decimal

KOBO_PER_NAIRA = 100
NAIRA_SYMBOL = "₦"

Amount = int | float | str | Decimal


def _to_decimal(amount: Amount) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        # str() keeps the shortest repr, so 0.1 becomes Decimal("0.1") rather than its binary expansion
        return Decimal(str(amount))
    return Decimal(amount)


def naira_to_kobo(naira: Amount) -> int:
    """Convert Naira to kobo, rounding half-up to the nearest kobo."""
    kobo = _to_decimal(naira) * KOBO_PER_NAIRA
    return int(kobo.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def kobo_to_naira(kobo: int) -> Decimal:
    """Convert kobo to Naira."""
    return Decimal(kobo) / KOBO_PER_NAIRA


def format_naira(amount: Amount) -> str:
    """Format a Naira amount for display, e.g. ``₦1,234.50``."""
    value = _to_decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{NAIRA_SYMBOL}{value:,.2f}"

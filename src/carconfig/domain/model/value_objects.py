"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from carconfig.domain.exceptions import ValidationError

CURRENCY_SYMBOLS = {"INR": "₹"}


@dataclass(frozen=True)
class Money:
    """Whole-unit monetary amount with currency.

    Catalog prices are whole rupees, so the amount is an ``int``:
    there is no rounding anywhere in pricing.
    """

    amount: int
    currency: str = "INR"

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an int, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_price(self.amount, self.currency)

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "INR") -> Money:
        return Money(0, currency)

    @staticmethod
    def of(amount: str | int) -> Money:
        """Convenient factory that coerces catalog input to an int safely."""
        if isinstance(amount, bool) or isinstance(amount, float):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(int(amount))
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


def group_digits(amount: int) -> str:
    """Group digits the en-IN way: 1500000 -> '15,00,000'.

    The last three digits form one group, every group before them
    holds two digits.
    """
    digits = str(amount)
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_price(amount: int, currency: str = "INR") -> str:
    """Render a possibly-negative integer amount as a currency string."""
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    if amount < 0:
        return f"-{symbol}{group_digits(-amount)}"
    return f"{symbol}{group_digits(amount)}"

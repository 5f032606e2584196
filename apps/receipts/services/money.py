"""
Money and tax calculation in integer minor units.

Prices arrive as user-entered decimals ("19.99", 8.25 %) and are converted
once, here, to integer cents and basis points. Everything downstream (the
Receipt row, the templates) works with integers only, so
``subtotal + tax + shipping == total`` holds exactly.

Example::

    >>> amounts = calculate_amounts(
    ...     product_price='19.99', quantity=3, tax_rate='8.25', shipping='5.00'
    ... )
    >>> amounts.subtotal, amounts.tax, amounts.shipping, amounts.total
    (5997, 495, 500, 6992)
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from .exceptions import InvalidReceiptDataError


MINOR_UNITS_PER_MAJOR = 100
BASIS_POINTS_PER_UNIT = 10000

MIN_PRODUCT_PRICE = Decimal('0.01')
MAX_TAX_RATE = Decimal('100')


@dataclass(frozen=True)
class ReceiptAmounts:
    """Derived money breakdown; every amount is in minor units."""

    product_price: int
    quantity: int
    tax_rate: int  # basis points
    shipping: int
    subtotal: int
    tax: int
    total: int


def _to_decimal(value, field: str) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise InvalidReceiptDataError(f"{field} must be a number", field=field)
    if isinstance(value, float):
        value = str(value)
    try:
        result = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidReceiptDataError(f"{field} must be a number", field=field)
    if not result.is_finite():
        raise InvalidReceiptDataError(f"{field} must be a finite number", field=field)
    return result


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def to_minor_units(value: Decimal) -> int:
    """Convert a major-unit decimal to integer minor units, half up."""
    return _round_half_up(value * MINOR_UNITS_PER_MAJOR)


def calculate_amounts(*, product_price, quantity, tax_rate, shipping) -> ReceiptAmounts:
    """
    Validate receipt pricing input and derive the money breakdown.

    Args:
        product_price: Unit price in major units (>= 0.01)
        quantity: Number of units (integer >= 1)
        tax_rate: Tax rate in percent (0-100)
        shipping: Shipping cost in major units (>= 0)

    Returns:
        ReceiptAmounts with price, shipping, subtotal, tax and total in
        minor units and the tax rate in basis points

    Raises:
        InvalidReceiptDataError: If any input is not a number or out of range
    """
    price = _to_decimal(product_price, 'productPrice')
    rate = _to_decimal(tax_rate, 'taxRate')
    shipping_amount = _to_decimal(shipping, 'shipping')

    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise InvalidReceiptDataError("quantity must be a whole number", field='quantity')

    if price < MIN_PRODUCT_PRICE:
        raise InvalidReceiptDataError("productPrice must be at least 0.01", field='productPrice')
    if quantity < 1:
        raise InvalidReceiptDataError("quantity must be at least 1", field='quantity')
    if not (0 <= rate <= MAX_TAX_RATE):
        raise InvalidReceiptDataError("taxRate must be between 0 and 100", field='taxRate')
    if shipping_amount < 0:
        raise InvalidReceiptDataError("shipping cannot be negative", field='shipping')

    price_minor = to_minor_units(price)
    shipping_minor = to_minor_units(shipping_amount)
    tax_rate_bp = _round_half_up(rate * 100)

    subtotal = price_minor * quantity
    tax = _round_half_up(Decimal(subtotal * tax_rate_bp) / BASIS_POINTS_PER_UNIT)

    return ReceiptAmounts(
        product_price=price_minor,
        quantity=quantity,
        tax_rate=tax_rate_bp,
        shipping=shipping_minor,
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax + shipping_minor,
    )


def format_minor_units(amount) -> str:
    """Render minor units as a major-unit string with exactly two decimals."""
    value = Decimal(int(amount)) / MINOR_UNITS_PER_MAJOR
    return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

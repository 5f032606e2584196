"""Storefront-style order numbers for display on receipts."""

import secrets


ORDER_NUMBER_PREFIX = 'W'
ORDER_NUMBER_DIGITS = 9


def generate_order_number() -> str:
    """
    Return a cosmetic order number such as ``W042318957``.

    Not unique and never used as a key; the Receipt's UUID identifies it.
    """
    suffix = secrets.randbelow(10 ** ORDER_NUMBER_DIGITS)
    return f"{ORDER_NUMBER_PREFIX}{suffix:0{ORDER_NUMBER_DIGITS}d}"

"""
Receipts services - Business logic layer.

This package contains all business operations for the receipts app:
- Money and tax calculation
- Order number generation
- Brand-styled rendering and email delivery
- Receipt creation with credit settlement
"""

from .money import (
    ReceiptAmounts,
    calculate_amounts,
    format_minor_units,
)

from .order_numbers import generate_order_number

from .rendering import (
    RenderedReceipt,
    render_receipt,
)

from .delivery import send_receipt

from .receipt_creation import (
    ReceiptCreationResult,
    create_receipt,
)

from .receipt_queries import (
    get_user_receipts,
    get_all_receipts,
)

# Domain Exceptions
from .exceptions import (
    ReceiptsServiceError,
    InvalidReceiptDataError,
    InsufficientCreditsError,
    ReceiptStorageError,
)

__all__ = [
    # Money
    'ReceiptAmounts',
    'calculate_amounts',
    'format_minor_units',
    # Order numbers
    'generate_order_number',
    # Rendering and delivery
    'RenderedReceipt',
    'render_receipt',
    'send_receipt',
    # Lifecycle
    'ReceiptCreationResult',
    'create_receipt',
    'get_user_receipts',
    'get_all_receipts',
    # Exceptions
    'ReceiptsServiceError',
    'InvalidReceiptDataError',
    'InsufficientCreditsError',
    'ReceiptStorageError',
]

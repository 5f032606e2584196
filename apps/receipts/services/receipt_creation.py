"""Receipt lifecycle service - create, send and settle credits."""

from dataclasses import dataclass

import structlog
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator, validate_email
from django.db import DatabaseError, transaction
from django.db.models import F
from django.utils import timezone

from apps.accounts.models import User
from apps.receipts.models import Receipt
from .delivery import send_receipt
from .exceptions import (
    InvalidReceiptDataError,
    InsufficientCreditsError,
    ReceiptStorageError,
)
from .money import calculate_amounts
from .order_numbers import generate_order_number

logger = structlog.get_logger(__name__)

MESSAGE_SENT = 'Receipt sent successfully'
MESSAGE_EMAIL_FAILED = 'Receipt created but email failed'
MESSAGE_CREDIT_UNSETTLED = 'Receipt emailed but no credit was left to settle it'


@dataclass(frozen=True)
class ReceiptCreationResult:
    receipt: Receipt
    email_sent: bool
    message: str


def _validate_contact_fields(*, customer_name, customer_email, billing_address,
                             product_name, product_image_url):
    for field, value in (
        ('customerName', customer_name),
        ('customerEmail', customer_email),
        ('billingAddress', billing_address),
        ('productName', product_name),
    ):
        if not value or not str(value).strip():
            raise InvalidReceiptDataError(f"{field} is required", field=field)

    try:
        validate_email(customer_email)
    except DjangoValidationError:
        raise InvalidReceiptDataError("customerEmail must be a valid email address", field='customerEmail')

    if product_image_url:
        try:
            URLValidator()(product_image_url)
        except DjangoValidationError:
            raise InvalidReceiptDataError("productImageUrl must be a valid URL", field='productImageUrl')


@transaction.atomic
def create_receipt(
    *,
    user: User,
    customer_name: str,
    customer_email: str,
    billing_address: str,
    product_name: str,
    product_price,
    quantity: int,
    tax_rate,
    shipping,
    product_image_url: str = '',
    now=None
) -> ReceiptCreationResult:
    """
    Create a receipt, email it and spend one credit if the email went out.

    This operation:
    1. Validates input and computes the money breakdown
    2. Locks the user row and checks the credit balance
    3. Stores the receipt with a fresh order number
    4. Sends the receipt email
    5. On delivery, deducts one credit and marks the receipt sent

    Steps 1-5 share one transaction, so a receipt is never marked sent
    without its credit being spent. A failed delivery keeps the receipt
    with email_sent=False and leaves the balance untouched. If the balance
    is empty by the time the credit is deducted, the receipt also stays
    unmarked.

    Args:
        user: Account paying for the receipt
        customer_name: Recipient's name shown on the receipt
        customer_email: Address the receipt is sent to
        billing_address: Free-text address
        product_name: Product line shown on the receipt
        product_price: Unit price in major units (>= 0.01)
        quantity: Units purchased (>= 1)
        tax_rate: Tax percentage (0-100)
        shipping: Shipping cost in major units (>= 0)
        product_image_url: Optional product image URL
        now: Clock used for the rendered dates and email_sent_at

    Returns:
        ReceiptCreationResult with the receipt, the email flag and a
        status message

    Raises:
        InvalidReceiptDataError: If any field is missing or out of range
        InsufficientCreditsError: If the user has no credits left
        ReceiptStorageError: If the receipt could not be saved
    """
    amounts = calculate_amounts(
        product_price=product_price,
        quantity=quantity,
        tax_rate=tax_rate,
        shipping=shipping,
    )
    _validate_contact_fields(
        customer_name=customer_name,
        customer_email=customer_email,
        billing_address=billing_address,
        product_name=product_name,
        product_image_url=product_image_url,
    )

    # Serialise concurrent creations for the same user
    locked_user = User.objects.select_for_update().get(pk=user.pk)
    if not locked_user.has_credits():
        logger.info(
            "receipt_rejected_insufficient_credits",
            user_id=str(user.pk),
            credits=locked_user.credits,
        )
        raise InsufficientCreditsError(
            "Insufficient credits. Please contact an administrator to add more credits."
        )

    try:
        with transaction.atomic():
            receipt = Receipt.objects.create(
                user=locked_user,
                customer_name=customer_name.strip(),
                customer_email=customer_email.strip(),
                billing_address=billing_address.strip(),
                product_name=product_name.strip(),
                product_image_url=product_image_url or '',
                product_price=amounts.product_price,
                quantity=amounts.quantity,
                tax_rate=amounts.tax_rate,
                shipping=amounts.shipping,
                subtotal=amounts.subtotal,
                tax=amounts.tax,
                total=amounts.total,
                order_number=generate_order_number(),
            )
    except DatabaseError as e:
        logger.error(
            "receipt_storage_failed",
            user_id=str(user.pk),
            error=str(e),
            error_type=type(e).__name__,
        )
        raise ReceiptStorageError("Failed to create receipt") from e

    logger.info(
        "receipt_created",
        receipt_id=str(receipt.id),
        user_id=str(user.pk),
        order_number=receipt.order_number,
        total=receipt.total,
    )

    email_sent = send_receipt(receipt, now=now)
    if not email_sent:
        return ReceiptCreationResult(
            receipt=receipt,
            email_sent=False,
            message=MESSAGE_EMAIL_FAILED,
        )

    settled = User.objects.filter(pk=user.pk, credits__gte=1).update(
        credits=F('credits') - 1,
        total_receipts_sent=F('total_receipts_sent') + 1,
        updated_at=timezone.now(),
    )
    if not settled:
        # Balance drained between the credit check and delivery
        logger.error(
            "receipt_credit_settlement_failed",
            receipt_id=str(receipt.id),
            user_id=str(user.pk),
        )
        user.refresh_from_db(fields=['credits', 'total_receipts_sent'])
        return ReceiptCreationResult(
            receipt=receipt,
            email_sent=False,
            message=MESSAGE_CREDIT_UNSETTLED,
        )

    receipt.mark_sent(now)
    user.refresh_from_db(fields=['credits', 'total_receipts_sent'])

    return ReceiptCreationResult(
        receipt=receipt,
        email_sent=True,
        message=MESSAGE_SENT,
    )

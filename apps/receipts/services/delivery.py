"""
Receipt email delivery.

Delivery problems are reported as ``False`` rather than raised: the receipt
already exists and the caller decides what a failed send means.
"""

import smtplib

import structlog
from django.conf import settings
from django.core.mail import EmailMultiAlternatives, get_connection

from apps.receipts.brands import get_brand_config, select_brand
from apps.receipts.models import Receipt
from .rendering import render_receipt

logger = structlog.get_logger(__name__)


def build_from_address(display_name: str) -> str:
    return f'"{display_name}" <{settings.RECEIPTS_FROM_EMAIL}>'


def send_receipt(receipt: Receipt, *, now=None, connection=None) -> bool:
    """
    Render a receipt and email it to the customer.

    Args:
        receipt: Receipt to send
        now: Render time passed through to the renderer
        connection: Mail connection to reuse; a new one bounded by
            EMAIL_TIMEOUT is opened when omitted

    Returns:
        True if the transport accepted the message, False otherwise
    """
    brand = select_brand(receipt.product_name, receipt.product_price)
    config = get_brand_config(brand)
    rendered = render_receipt(receipt, brand=brand, now=now)

    if connection is None:
        connection = get_connection(timeout=settings.EMAIL_TIMEOUT)

    message = EmailMultiAlternatives(
        subject=rendered.subject,
        body=rendered.text,
        from_email=build_from_address(config.display_name),
        to=[receipt.customer_email],
        connection=connection,
    )
    message.attach_alternative(rendered.html, 'text/html')

    try:
        accepted = message.send()
    except (smtplib.SMTPException, OSError) as e:
        logger.warning(
            "receipt_delivery_failed",
            receipt_id=str(receipt.id),
            order_number=receipt.order_number,
            brand=brand.value,
            error=str(e),
            error_type=type(e).__name__,
        )
        return False

    if not accepted:
        logger.warning(
            "receipt_delivery_failed",
            receipt_id=str(receipt.id),
            order_number=receipt.order_number,
            brand=brand.value,
            error="transport accepted no messages",
        )
        return False

    logger.info(
        "receipt_delivered",
        receipt_id=str(receipt.id),
        order_number=receipt.order_number,
        brand=brand.value,
    )
    return True

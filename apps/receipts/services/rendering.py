"""
Receipt document rendering.

One renderer for every brand: the brand's ``BrandConfig`` picks the template
and supplies colours, logo, placeholder image and delivery-date policy.
Django's template autoescaping covers every customer-supplied field.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from django.template.loader import render_to_string
from django.utils import timezone

from apps.receipts.brands import Brand, get_brand_config, select_brand
from apps.receipts.models import Receipt


TEXT_TEMPLATE_NAME = 'receipts/email/receipt.txt'


@dataclass(frozen=True)
class RenderedReceipt:
    subject: str
    html: str
    text: str


def format_order_date(moment) -> str:
    """``Monday, March 4, 2024``"""
    return f"{moment:%A, %B} {moment.day}, {moment.year}"


def format_delivery_date(moment) -> str:
    """``Friday, March 8``"""
    return f"{moment:%A, %B} {moment.day}"


def build_subject(receipt: Receipt, brand: Brand) -> str:
    config = get_brand_config(brand)
    return f"Your {config.display_name} Receipt - Order #{receipt.order_number}"


def render_receipt(
    receipt: Receipt,
    *,
    brand: Optional[Brand] = None,
    now=None
) -> RenderedReceipt:
    """
    Render the subject, HTML body and plain-text body for a receipt.

    Dates shown on the receipt are derived from ``now`` (render time), not
    from ``receipt.created_at``; pass ``now`` to pin them.

    Args:
        receipt: Receipt to render
        brand: Brand style; chosen with select_brand when omitted
        now: Render time; defaults to timezone.now()

    Returns:
        RenderedReceipt with subject, html and text
    """
    if brand is None:
        brand = select_brand(receipt.product_name, receipt.product_price)
    config = get_brand_config(brand)

    if now is None:
        now = timezone.now()
    if timezone.is_aware(now):
        now = timezone.localtime(now)

    delivery_date = ''
    if config.delivery_offset_days is not None:
        delivery_date = format_delivery_date(now + timedelta(days=config.delivery_offset_days))

    context = {
        'receipt': receipt,
        'brand': config,
        'order_date': format_order_date(now),
        'delivery_date': delivery_date,
        'product_image_url': receipt.product_image_url or config.placeholder_image_url,
    }

    return RenderedReceipt(
        subject=build_subject(receipt, brand),
        html=render_to_string(config.template_name, context),
        text=render_to_string(TEXT_TEMPLATE_NAME, context),
    )

"""
Brand styles for receipt emails.

A receipt is rendered in one of two visual styles. The style is never chosen
by the user; ``select_brand`` derives it from the product name and price.
Everything that differs between the styles lives in ``BrandConfig`` so a
single renderer serves both.
"""

from dataclasses import dataclass
from typing import Optional

from django.db import models


class Brand(models.TextChoices):
    APPLE = 'apple', 'Apple Store'
    CARTIER = 'cartier', 'Cartier'


@dataclass(frozen=True)
class BrandConfig:
    """Presentation settings for one brand style."""

    brand: Brand
    display_name: str
    template_name: str
    logo_url: str
    placeholder_image_url: str
    accent_color: str
    font_family: str
    # Days added to render time for the "Delivery" line; None hides it
    delivery_offset_days: Optional[int] = None


BRAND_CONFIGS = {
    Brand.APPLE: BrandConfig(
        brand=Brand.APPLE,
        display_name='Apple Store',
        template_name='receipts/email/apple.html',
        logo_url='https://email.images.apple.com/rover/aos/moe/apple_icon_2x.png',
        placeholder_image_url='https://via.placeholder.com/100x100',
        accent_color='#0070C9',
        font_family=(
            "system-ui, -apple-system, BlinkMacSystemFont, 'Segoe UI', "
            "'Helvetica Neue', Helvetica, Arial, sans-serif"
        ),
        delivery_offset_days=4,
    ),
    Brand.CARTIER: BrandConfig(
        brand=Brand.CARTIER,
        display_name='Cartier',
        template_name='receipts/email/cartier.html',
        logo_url='https://media.yoox.biz/ytos/resources/CARTIER/mail/old-images/cartierHead.png',
        placeholder_image_url='https://via.placeholder.com/135x110/8B0000/ffffff?text=Cartier',
        accent_color='#730000',
        font_family="Georgia, 'Times New Roman', Times, serif",
        delivery_offset_days=None,
    ),
}

LUXURY_KEYWORDS = ('cartier', 'watch', 'bracelet', 'ring', 'necklace')

# $3000.00 and above renders as Cartier regardless of name
LUXURY_PRICE_THRESHOLD = 300000


def select_brand(product_name: str, product_price_minor: int) -> Brand:
    """
    Pick the brand style for a product.

    Plain substring matching: "Earring" and "String Lights" both contain
    "ring" and therefore select Cartier.
    """
    name = (product_name or '').lower()
    if any(keyword in name for keyword in LUXURY_KEYWORDS):
        return Brand.CARTIER
    if product_price_minor >= LUXURY_PRICE_THRESHOLD:
        return Brand.CARTIER
    return Brand.APPLE


def get_brand_config(brand: Brand) -> BrandConfig:
    return BRAND_CONFIGS[Brand(brand)]

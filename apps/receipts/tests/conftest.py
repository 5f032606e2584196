import pytest
from datetime import datetime, timezone as dt_timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.receipts.models import Receipt


FIXED_NOW = datetime(2024, 3, 4, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def fixed_now():
    """Monday, March 4, 2024 at noon UTC."""
    return FIXED_NOW


@pytest.fixture
def receipt_user(db):
    """Create and return a user with the default credit balance."""
    return User.objects.create_user(
        email='sender@example.com',
        password='TestPass123!',
        first_name='Sam',
        last_name='Sender',
    )


@pytest.fixture
def broke_user(db):
    """Create and return a user with no credits left."""
    return User.objects.create_user(
        email='broke@example.com',
        password='TestPass123!',
        credits=0,
    )


@pytest.fixture
def other_user(db):
    """Create and return another user."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
    )


def _authenticate(client, user):
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def user_client(api_client, receipt_user):
    """Return API client authenticated as receipt_user."""
    return _authenticate(api_client, receipt_user)


@pytest.fixture
def broke_client(api_client, broke_user):
    """Return API client authenticated as broke_user."""
    return _authenticate(api_client, broke_user)


@pytest.fixture
def receipt_input():
    """Service-level keyword arguments for a valid Apple-style receipt."""
    return {
        'customer_name': 'Jane Doe',
        'customer_email': 'jane@example.com',
        'billing_address': '1 Infinite Loop\nCupertino, CA 95014',
        'product_name': 'iPhone 15',
        'product_price': '19.99',
        'quantity': 3,
        'tax_rate': '8.25',
        'shipping': '5.00',
    }


@pytest.fixture
def receipt_payload():
    """API request body for a valid Apple-style receipt."""
    return {
        'customerName': 'Jane Doe',
        'customerEmail': 'jane@example.com',
        'billingAddress': '1 Infinite Loop\nCupertino, CA 95014',
        'productName': 'iPhone 15',
        'productImageUrl': '',
        'productPrice': '19.99',
        'quantity': 3,
        'taxRate': '8.25',
        'shipping': '5.00',
    }


@pytest.fixture
def make_receipt(db, receipt_user):
    """Factory creating stored receipts with sensible defaults."""
    def _make_receipt(created_at=None, **overrides):
        fields = {
            'user': receipt_user,
            'customer_name': 'Jane Doe',
            'customer_email': 'jane@example.com',
            'billing_address': '1 Infinite Loop',
            'product_name': 'iPhone 15',
            'product_image_url': '',
            'product_price': 1999,
            'quantity': 3,
            'tax_rate': 825,
            'shipping': 500,
            'subtotal': 5997,
            'tax': 495,
            'total': 6992,
            'order_number': 'W000000001',
        }
        fields.update(overrides)
        receipt = Receipt.objects.create(**fields)
        if created_at is not None:
            Receipt.objects.filter(pk=receipt.pk).update(created_at=created_at)
            receipt.refresh_from_db()
        return receipt
    return _make_receipt

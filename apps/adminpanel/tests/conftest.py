import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.adminpanel.services import provision_admin, issue_admin_token
from apps.receipts.models import Receipt


ADMIN_PASSWORD = 'Panel-Pass-2024!'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def panel_admin(db):
    """Create and return an admin panel operator."""
    return provision_admin(username='admin1', password=ADMIN_PASSWORD)


@pytest.fixture
def admin_token(panel_admin):
    """Return a valid admin token for panel_admin."""
    return issue_admin_token(panel_admin)


@pytest.fixture
def admin_client(api_client, admin_token):
    """Return API client authenticated with an admin token."""
    api_client.credentials(HTTP_AUTHORIZATION=f'Admin {admin_token}')
    return api_client


@pytest.fixture
def customer(db):
    """Create and return an end user."""
    return User.objects.create_user(
        email='customer@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def customer_client(api_client, customer):
    """Return API client authenticated as an end user."""
    refresh = RefreshToken.for_user(customer)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def make_receipt(db, customer):
    """Factory creating stored receipts for customer."""
    def _make_receipt(**overrides):
        fields = {
            'user': customer,
            'customer_name': 'Jane Doe',
            'customer_email': 'jane@example.com',
            'billing_address': '1 Infinite Loop',
            'product_name': 'iPhone 15',
            'product_price': 99900,
            'quantity': 1,
            'tax_rate': 0,
            'shipping': 0,
            'subtotal': 99900,
            'tax': 0,
            'total': 99900,
            'order_number': 'W123456789',
        }
        fields.update(overrides)
        return Receipt.objects.create(**fields)
    return _make_receipt

import uuid
import pytest
from django.urls import reverse
from rest_framework import status
from apps.adminpanel.services import issue_admin_token


ADMIN_PASSWORD = 'Panel-Pass-2024!'


@pytest.mark.django_db
class TestAdminLogin:
    """Tests for POST /api/admin/login/"""

    def test_login_returns_token(self, api_client, panel_admin, settings):
        url = reverse('adminpanel:login')
        response = api_client.post(url, {'username': 'admin1', 'password': ADMIN_PASSWORD})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['token']
        assert response.data['expiresIn'] == settings.ADMIN_TOKEN_MAX_AGE
        assert response.data['username'] == 'admin1'

        api_client.credentials(HTTP_AUTHORIZATION=f"Admin {response.data['token']}")
        assert api_client.get(reverse('adminpanel:stats')).status_code == status.HTTP_200_OK

    def test_login_wrong_password(self, api_client, panel_admin):
        url = reverse('adminpanel:login')
        response = api_client.post(url, {'username': 'admin1', 'password': 'wrong'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data['error'] == 'Invalid credentials'

    def test_login_missing_fields(self, api_client, db):
        url = reverse('adminpanel:login')
        response = api_client.post(url, {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_user_credentials_do_not_work(self, api_client, customer):
        url = reverse('adminpanel:login')
        response = api_client.post(url, {'username': customer.email, 'password': 'TestPass123!'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestAdminSession:
    """Tests for /api/admin/status/ and /api/admin/logout/"""

    def test_status_with_token(self, admin_client):
        response = admin_client.get(reverse('adminpanel:status'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'isAdmin': True, 'username': 'admin1'}

    def test_status_without_token(self, api_client, db):
        response = api_client.get(reverse('adminpanel:status'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['isAdmin'] is False

    def test_status_with_bad_token(self, api_client, db):
        api_client.credentials(HTTP_AUTHORIZATION='Admin bogus')
        response = api_client.get(reverse('adminpanel:status'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['isAdmin'] is False

    def test_logout_revokes_token(self, admin_client):
        response = admin_client.post(reverse('adminpanel:logout'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'success': True}

        response = admin_client.get(reverse('adminpanel:users'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_logout_requires_admin(self, api_client, db):
        response = api_client.post(reverse('adminpanel:logout'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestAdminAccessControl:
    """Admin endpoints reject anything but a valid admin token."""

    @pytest.mark.parametrize('url_name', ['users', 'receipts', 'stats'])
    def test_anonymous_rejected(self, api_client, db, url_name):
        response = api_client.get(reverse(f'adminpanel:{url_name}'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.parametrize('url_name', ['users', 'receipts', 'stats'])
    def test_user_jwt_rejected(self, customer_client, url_name):
        response = customer_client.get(reverse(f'adminpanel:{url_name}'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_malformed_admin_header_rejected(self, api_client, db):
        api_client.credentials(HTTP_AUTHORIZATION='Admin')
        response = api_client.get(reverse('adminpanel:users'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_admin_token_does_not_authenticate_user_endpoints(self, admin_client):
        response = admin_client.get(reverse('users:current-user'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_token_for_deleted_admin_rejected(self, api_client, panel_admin):
        token = issue_admin_token(panel_admin)
        panel_admin.delete()

        api_client.credentials(HTTP_AUTHORIZATION=f'Admin {token}')
        response = api_client.get(reverse('adminpanel:users'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestAdminListings:
    """Tests for GET /api/admin/users/ and /api/admin/receipts/"""

    def test_list_users(self, admin_client, customer):
        response = admin_client.get(reverse('adminpanel:users'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['email'] == customer.email
        assert response.data[0]['credits'] == 5
        assert response.data[0]['isActive'] is True

    def test_list_receipts(self, admin_client, make_receipt, customer):
        make_receipt()
        response = admin_client.get(reverse('adminpanel:receipts'))

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['userEmail'] == customer.email

    def test_filter_failed_deliveries(self, admin_client, make_receipt):
        make_receipt(email_sent=True, order_number='W000000001')
        failed = make_receipt(email_sent=False, order_number='W000000002')

        response = admin_client.get(reverse('adminpanel:receipts'), {'emailSent': 'false'})

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data] == [str(failed.id)]

    def test_filter_sent(self, admin_client, make_receipt):
        sent = make_receipt(email_sent=True)
        make_receipt(email_sent=False)

        response = admin_client.get(reverse('adminpanel:receipts'), {'emailSent': 'true'})

        assert [r['id'] for r in response.data] == [str(sent.id)]

    def test_invalid_filter(self, admin_client):
        response = admin_client.get(reverse('adminpanel:receipts'), {'emailSent': 'maybe'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'emailSent' in response.data


@pytest.mark.django_db
class TestAddCredits:
    """Tests for POST /api/admin/add-credits/"""

    def test_add_credits(self, admin_client, customer):
        url = reverse('adminpanel:add-credits')
        response = admin_client.post(url, {'userId': str(customer.id), 'credits': 10}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['credits'] == 15
        customer.refresh_from_db()
        assert customer.credits == 15

    @pytest.mark.parametrize('credits', [0, 1001, -1, 'lots'])
    def test_add_credits_out_of_range(self, admin_client, customer, credits):
        url = reverse('adminpanel:add-credits')
        response = admin_client.post(url, {'userId': str(customer.id), 'credits': credits}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'credits' in response.data
        customer.refresh_from_db()
        assert customer.credits == 5

    def test_add_credits_unknown_user(self, admin_client):
        url = reverse('adminpanel:add-credits')
        response = admin_client.post(url, {'userId': str(uuid.uuid4()), 'credits': 10}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'User not found'

    def test_add_credits_requires_admin(self, customer_client, customer):
        url = reverse('adminpanel:add-credits')
        response = customer_client.post(url, {'userId': str(customer.id), 'credits': 10}, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        customer.refresh_from_db()
        assert customer.credits == 5


@pytest.mark.django_db
class TestAdminStats:
    """Tests for GET /api/admin/stats/"""

    def test_stats(self, admin_client, make_receipt):
        make_receipt(email_sent=True)
        make_receipt(email_sent=False)

        response = admin_client.get(reverse('adminpanel:stats'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {
            'totalUsers': 1,
            'totalReceipts': 2,
            'failedDeliveries': 1,
            'creditsOutstanding': 5,
        }

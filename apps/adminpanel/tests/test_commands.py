import pytest
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError
from apps.adminpanel.models import AdminUser


@pytest.mark.django_db
class TestProvisionAdminCommand:
    """Tests for manage.py provision_admin."""

    def test_with_password_argument(self):
        out = StringIO()
        call_command('provision_admin', username='ops', password='Sup3r-Secret-Pass', stdout=out)

        admin = AdminUser.objects.get(username='ops')
        assert admin.check_password('Sup3r-Secret-Pass')
        assert 'created' in out.getvalue()

    def test_default_username_and_bootstrap_setting(self, settings):
        settings.ADMIN_BOOTSTRAP_PASSWORD = 'Bootstrap-Secret-9'
        call_command('provision_admin', stdout=StringIO())

        admin = AdminUser.objects.get(username='admin1')
        assert admin.check_password('Bootstrap-Secret-9')

    def test_without_password_fails(self, settings):
        settings.ADMIN_BOOTSTRAP_PASSWORD = ''

        with pytest.raises(CommandError, match='No password'):
            call_command('provision_admin', stdout=StringIO())

        assert not AdminUser.objects.exists()

    def test_weak_password_fails(self):
        with pytest.raises(CommandError):
            call_command('provision_admin', password='123', stdout=StringIO())

        assert not AdminUser.objects.exists()

    def test_existing_admin_fails(self):
        call_command('provision_admin', password='Sup3r-Secret-Pass', stdout=StringIO())

        with pytest.raises(CommandError, match='already exists'):
            call_command('provision_admin', password='Other-Secret-Pass', stdout=StringIO())

        assert AdminUser.objects.count() == 1

"""
Management command to create an admin panel operator.

Usage:
    python manage.py provision_admin --username admin1 --password '<secret>'
    ADMIN_BOOTSTRAP_PASSWORD='<secret>' python manage.py provision_admin

The password must come from the command line or the
ADMIN_BOOTSTRAP_PASSWORD setting; there is no built-in default.
"""

from django.conf import settings
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.adminpanel.services import provision_admin, AdminPanelServiceError


class Command(BaseCommand):
    help = 'Create an admin panel account'

    def add_arguments(self, parser):
        parser.add_argument(
            '--username',
            default='admin1',
            help='Admin username (default: admin1)',
        )
        parser.add_argument(
            '--password',
            default=None,
            help='Admin password; falls back to the ADMIN_BOOTSTRAP_PASSWORD setting',
        )

    def handle(self, *args, **options):
        username = options['username']
        password = options['password'] or settings.ADMIN_BOOTSTRAP_PASSWORD

        if not password:
            raise CommandError(
                'No password given. Pass --password or set ADMIN_BOOTSTRAP_PASSWORD.'
            )

        try:
            validate_password(password)
        except ValidationError as e:
            raise CommandError(' '.join(e.messages))

        try:
            admin = provision_admin(username=username, password=password)
        except AdminPanelServiceError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(f'Admin "{admin.username}" created.'))

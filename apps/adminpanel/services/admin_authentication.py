"""
Admin authentication service - credentials and signed tokens.

Tokens are ``django.core.signing`` payloads, timestamped and signed with
SECRET_KEY under a dedicated salt. They carry the admin id and the admin's
token_version; logging out bumps the version, revoking every token issued
before it.
"""

from django.conf import settings
from django.core import signing
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F
from django.utils import timezone
import structlog

from apps.adminpanel.models import AdminUser
from .exceptions import InvalidAdminCredentialsError, AdminTokenError

logger = structlog.get_logger(__name__)

TOKEN_SALT = 'adminpanel.token'


@transaction.atomic
def authenticate_admin(*, username: str, password: str) -> AdminUser:
    """
    Check admin credentials.

    Args:
        username: Admin username (exact match)
        password: Raw password

    Returns:
        Authenticated AdminUser

    Raises:
        InvalidAdminCredentialsError: If the username or password is wrong
    """
    try:
        admin = AdminUser.objects.select_for_update().get(username=username)
    except AdminUser.DoesNotExist:
        # Same hashing cost as a wrong password
        AdminUser().set_password(password)
        logger.warning("admin_login_failed", username=username, reason="unknown_username")
        raise InvalidAdminCredentialsError("Invalid credentials")

    if not admin.check_password(password):
        logger.warning("admin_login_failed", username=username, reason="wrong_password")
        raise InvalidAdminCredentialsError("Invalid credentials")

    admin.last_login = timezone.now()
    admin.save(update_fields=['last_login'])
    logger.info("admin_logged_in", admin_id=str(admin.id), username=admin.username)
    return admin


def issue_admin_token(admin: AdminUser) -> str:
    """Sign a token for admin, valid for ADMIN_TOKEN_MAX_AGE seconds."""
    payload = {'admin_id': str(admin.id), 'v': admin.token_version}
    return signing.dumps(payload, salt=TOKEN_SALT)


def verify_admin_token(token: str) -> AdminUser:
    """
    Resolve a token to its AdminUser.

    Raises:
        AdminTokenError: If the token is tampered with, expired, revoked
            or names an admin that no longer exists
    """
    try:
        payload = signing.loads(token, salt=TOKEN_SALT, max_age=settings.ADMIN_TOKEN_MAX_AGE)
    except signing.SignatureExpired:
        raise AdminTokenError("Admin session expired")
    except signing.BadSignature:
        raise AdminTokenError("Invalid admin token")

    try:
        admin = AdminUser.objects.get(id=payload['admin_id'])
    except (AdminUser.DoesNotExist, KeyError, TypeError, ValueError, ValidationError):
        raise AdminTokenError("Invalid admin token")

    if payload.get('v') != admin.token_version:
        raise AdminTokenError("Admin session has been logged out")

    return admin


def revoke_admin_tokens(*, admin: AdminUser) -> None:
    """Invalidate every token issued to admin so far."""
    AdminUser.objects.filter(pk=admin.pk).update(token_version=F('token_version') + 1)
    admin.refresh_from_db(fields=['token_version'])
    logger.info("admin_logged_out", admin_id=str(admin.id), username=admin.username)

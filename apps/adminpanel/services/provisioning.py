"""Admin provisioning service."""

from django.db import transaction, IntegrityError
import structlog

from apps.adminpanel.models import AdminUser
from .exceptions import AdminPanelServiceError, AdminAlreadyExistsError

logger = structlog.get_logger(__name__)


@transaction.atomic
def provision_admin(*, username: str, password: str) -> AdminUser:
    """
    Create an admin account.

    Args:
        username: Unique admin username
        password: Raw password supplied by the operator

    Returns:
        Created AdminUser

    Raises:
        AdminPanelServiceError: If username or password is blank
        AdminAlreadyExistsError: If the username is taken
    """
    if not username or not username.strip():
        raise AdminPanelServiceError("Username is required")
    if not password:
        raise AdminPanelServiceError("Password is required")

    username = username.strip()
    if AdminUser.objects.filter(username=username).exists():
        raise AdminAlreadyExistsError(f"Admin '{username}' already exists")

    admin = AdminUser(username=username)
    admin.set_password(password)
    try:
        admin.save()
    except IntegrityError as e:
        raise AdminAlreadyExistsError(f"Admin '{username}' already exists") from e

    logger.info("admin_provisioned", admin_id=str(admin.id), username=admin.username)
    return admin

"""Credit management service - admin credit grants."""

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import F, QuerySet
from django.utils import timezone
import structlog

from apps.accounts.models import User
from apps.adminpanel.models import AdminUser
from .exceptions import UserNotFoundError, InvalidCreditAmountError

logger = structlog.get_logger(__name__)

MIN_CREDIT_GRANT = 1
MAX_CREDIT_GRANT = 1000


@transaction.atomic
def grant_credits(*, user_id, credits: int, granted_by: AdminUser = None) -> User:
    """
    Add credits to a user's balance.

    Args:
        user_id: UUID of the user to credit
        credits: Number of credits to add (1-1000)
        granted_by: Admin performing the grant, for the audit log

    Returns:
        The updated User

    Raises:
        InvalidCreditAmountError: If credits is not an integer in 1-1000
        UserNotFoundError: If no user has this id
    """
    if isinstance(credits, bool) or not isinstance(credits, int):
        raise InvalidCreditAmountError("Credits must be a whole number")
    if not (MIN_CREDIT_GRANT <= credits <= MAX_CREDIT_GRANT):
        raise InvalidCreditAmountError(
            f"Credits must be between {MIN_CREDIT_GRANT} and {MAX_CREDIT_GRANT}"
        )

    try:
        updated = User.objects.filter(pk=user_id).update(
            credits=F('credits') + credits,
            updated_at=timezone.now(),
        )
    except (ValueError, ValidationError):
        raise UserNotFoundError("User not found")

    if not updated:
        raise UserNotFoundError("User not found")

    user = User.objects.get(pk=user_id)
    logger.info(
        "admin_credits_granted",
        user_id=str(user.id),
        credits=credits,
        balance=user.credits,
        admin_id=str(granted_by.id) if granted_by else None,
    )
    return user


def get_all_users() -> QuerySet[User]:
    """All users, newest first."""
    return User.objects.order_by('-created_at')

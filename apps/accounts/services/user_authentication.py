"""Email/password login for receipt senders."""

from django.contrib.auth import get_user_model
from django.utils import timezone
import structlog

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()
logger = structlog.get_logger(__name__)


def authenticate_user(*, email: str, password: str) -> User:
    """
    Check a sender's credentials and stamp last_login.

    The stamp is a single-column UPDATE so a login never rewrites the
    credit columns of a row that a receipt send may be settling.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong
        InactiveAccountError: If the account is deactivated
    """
    email = User.objects.normalize_email(email)
    try:
        user = User.objects.get(email__iexact=email)
    except User.DoesNotExist:
        # Same hashing cost as a wrong password
        User().set_password(password)
        logger.warning("user_login_failed", reason="unknown_email")
        raise InvalidCredentialsError("Invalid email or password")

    if not user.check_password(password):
        logger.warning("user_login_failed", user_id=str(user.id), reason="wrong_password")
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        logger.warning("user_login_failed", user_id=str(user.id), reason="inactive")
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    User.objects.filter(pk=user.pk).update(last_login=user.last_login)
    logger.info("user_logged_in", user_id=str(user.id), credits=user.credits)
    return user

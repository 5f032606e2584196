"""User registration service."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model
import structlog

from .exceptions import EmailAlreadyRegisteredError

User = get_user_model()
logger = structlog.get_logger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = ""
) -> User:
    """
    Register a new user with the default credit balance.

    Args:
        email: User's email address
        password: User's password (will be hashed)
        first_name: Optional first name
        last_name: Optional last name

    Returns:
        Created User instance

    Raises:
        EmailAlreadyRegisteredError: If the email is already taken
    """
    email = User.objects.normalize_email(email)
    if User.objects.filter(email__iexact=email).exists():
        raise EmailAlreadyRegisteredError("A user with this email already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
        )
    except IntegrityError as e:
        raise EmailAlreadyRegisteredError("A user with this email already exists") from e

    logger.info("user_registered", user_id=str(user.id), credits=user.credits)
    return user

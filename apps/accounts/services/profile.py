"""Profile edits that leave the credit ledger alone."""

from django.contrib.auth import get_user_model
import structlog

User = get_user_model()
logger = structlog.get_logger(__name__)

PROFILE_FIELDS = ('first_name', 'last_name', 'profile_image_url')


def update_profile(*, user: User, **changes) -> User:
    """
    Update a user's display fields.

    Only the columns in PROFILE_FIELDS (plus updated_at) are written, so a
    stale instance cannot restore credits spent by a concurrent send.

    Raises:
        ValueError: If a field outside PROFILE_FIELDS is passed
    """
    unknown = set(changes) - set(PROFILE_FIELDS)
    if unknown:
        raise ValueError(f"Not a profile field: {', '.join(sorted(unknown))}")

    if not changes:
        return user

    for field, value in changes.items():
        setattr(user, field, value)
    user.save(update_fields=[*changes, 'updated_at'])

    logger.info("user_profile_updated", user_id=str(user.id), fields=sorted(changes))
    return user

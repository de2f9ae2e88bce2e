"""Account management service."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from uuid import UUID

from .exceptions import PasswordConfirmationError

User = get_user_model()

logger = logging.getLogger(__name__)

PROFILE_FIELDS = (
    'full_name',
    'username',
    'bio',
    'website',
    'location',
    'avatar_url',
    'preferred_currency',
)


@transaction.atomic
def update_user_profile(*, user: User, **changes) -> User:
    """
    Update editable profile fields.

    Unknown keys are ignored; email and permissions can't be changed here.

    Returns:
        The updated User instance
    """
    updated = [field for field in PROFILE_FIELDS if field in changes]
    for field in updated:
        setattr(user, field, changes[field])

    if updated:
        user.save(update_fields=updated + ['updated_at'])

    return user


@transaction.atomic
def delete_user_account(*, user_id: UUID, password: str) -> None:
    """
    Permanently delete an account and everything it owns.

    Subscriptions are removed first, then the user row.

    Args:
        user_id: User's ID
        password: User's password for confirmation

    Raises:
        PasswordConfirmationError: If password is incorrect
    """
    user = (
        User.objects
        .select_for_update()
        .get(id=user_id)
    )

    if not user.check_password(password):
        raise PasswordConfirmationError("Invalid password")

    deleted, _ = user.subscriptions.all().delete()
    user.delete()

    logger.info("Deleted account %s with %d subscription(s)", user_id, deleted)

"""
Subscription management service.

All functions are scoped to the owning user: another user's subscription
behaves exactly like a missing one.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.db.models.functions import Lower
from django.utils import timezone

from apps.accounts.models import User
from apps.subscriptions.models import Subscription

from ..exceptions import SubscriptionNotFoundError

logger = logging.getLogger(__name__)

SORT_FIELDS = {
    'date': 'start_date',
    'amount': 'amount',
    'name': Lower('name'),
}

EDITABLE_FIELDS = ('name', 'amount', 'currency', 'type', 'start_date', 'website_url')


def _has_identity(user) -> bool:
    return user is not None and user.is_authenticated


def list_subscriptions(
    *,
    user: Optional[User],
    sort_by: str = 'date',
    sort_order: str = 'desc',
    type: Optional[str] = None,
    currency: Optional[str] = None
) -> QuerySet:
    """
    Get a user's subscriptions, filtered and sorted.

    Args:
        user: Owner; anonymous or None yields an empty queryset
        sort_by: 'date' (start date), 'amount' or 'name'
        sort_order: 'asc' or 'desc'
        type: Optional recurrence kind filter
        currency: Optional stored-currency filter

    Returns:
        QuerySet of Subscription
    """
    if not _has_identity(user):
        return Subscription.objects.none()

    queryset = Subscription.objects.filter(user=user)

    if type:
        queryset = queryset.filter(type=type)
    if currency:
        queryset = queryset.filter(currency=currency)

    field = SORT_FIELDS.get(sort_by, SORT_FIELDS['date'])
    if isinstance(field, str):
        ordering = f'-{field}' if sort_order == 'desc' else field
    else:
        ordering = field.desc() if sort_order == 'desc' else field.asc()

    # Stable order for equal keys
    return queryset.order_by(ordering, '-created_at', 'id')


def get_subscription(*, user: User, subscription_id: UUID) -> Subscription:
    """
    Get one of the user's subscriptions.

    Raises:
        SubscriptionNotFoundError: If missing or owned by someone else
    """
    if not _has_identity(user):
        raise SubscriptionNotFoundError()

    try:
        return Subscription.objects.get(id=subscription_id, user=user)
    except Subscription.DoesNotExist:
        raise SubscriptionNotFoundError()


@transaction.atomic
def create_subscription(*, user: User, **data) -> Subscription:
    """
    Create a subscription for the user.

    ``start_date`` defaults to today when not given.
    """
    fields = {key: data[key] for key in EDITABLE_FIELDS if key in data}
    if not fields.get('start_date'):
        fields['start_date'] = timezone.localdate()

    subscription = Subscription.objects.create(user=user, **fields)
    logger.info("User %s created subscription %s", user.id, subscription.id)
    return subscription


@transaction.atomic
def update_subscription(*, user: User, subscription_id: UUID, **data) -> Subscription:
    """
    Update fields of one of the user's subscriptions.

    Raises:
        SubscriptionNotFoundError: If missing or owned by someone else
    """
    subscription = get_subscription(user=user, subscription_id=subscription_id)

    updated = [key for key in EDITABLE_FIELDS if key in data]
    for key in updated:
        setattr(subscription, key, data[key])

    if updated:
        subscription.save(update_fields=updated + ['updated_at'])

    return subscription


@transaction.atomic
def delete_subscription(*, user: User, subscription_id: UUID) -> None:
    """
    Delete one of the user's subscriptions.

    Raises:
        SubscriptionNotFoundError: If missing or owned by someone else
    """
    subscription = get_subscription(user=user, subscription_id=subscription_id)
    subscription.delete()
    logger.info("User %s deleted subscription %s", user.id, subscription_id)

"""
Split request service.

Turns a subscription plus a list of friends into per-friend shares and the
messaging links that carry them.
"""

import logging
from decimal import Decimal

from django.conf import settings

from ..exceptions import InvalidSplitError, TooManyParticipantsError
from .messaging import generate_whatsapp_link
from .split_allocation import SplitAllocator

logger = logging.getLogger(__name__)


def prepare_split(*, subscription, participants, message=None, allocator=None):
    """
    Allocate a subscription's split among participants.

    Args:
        subscription: Subscription being split.
        participants: List of dicts with ``phone_number`` and optional
            ``has_paid``.
        message: Optional custom reminder text used for every participant.
        allocator: SplitAllocator to use; defaults to one built from settings.

    Returns:
        dict: A dictionary containing:
            - subscription (Subscription)
            - split_total (Decimal): Sum of all shares.
            - shares (list[dict]): phone_number, has_paid, amount, whatsapp_url

    Raises:
        TooManyParticipantsError: If more participants than allowed.
        InvalidSplitError: If the allocation is rejected (e.g. zero amount).
    """
    max_participants = settings.SUBSCRIPTION_SPLIT_MAX_PARTICIPANTS
    if len(participants) > max_participants:
        raise TooManyParticipantsError(
            f"A subscription can be split with at most {max_participants} people."
        )

    allocator = allocator or SplitAllocator()
    allocation = allocator.allocate(subscription.amount, len(participants))
    if not allocation['is_valid']:
        raise InvalidSplitError(allocation['error'])

    shares = []
    for participant, amount in zip(participants, allocation['shares']):
        phone = participant['phone_number']
        shares.append({
            'phone_number': phone,
            'has_paid': participant.get('has_paid', False),
            'amount': amount,
            'whatsapp_url': generate_whatsapp_link(phone, subscription, amount, message),
        })

    logger.info(
        "Prepared split of subscription %s among %d participant(s)",
        subscription.id, len(shares)
    )

    return {
        'subscription': subscription,
        'split_total': sum(allocation['shares'], Decimal('0')),
        'shares': shares,
    }


def check_split(*, subscription, shares, allocator=None):
    """
    Check hand-edited share amounts against the subscription's split total.

    Returns:
        dict: is_balanced, expected_total, actual_total
    """
    allocator = allocator or SplitAllocator()
    return {
        'is_balanced': allocator.is_balanced(subscription.amount, shares),
        'expected_total': allocator.split_total(subscription.amount),
        'actual_total': sum(shares, Decimal('0')),
    }

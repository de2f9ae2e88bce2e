"""Services for subscriptions business logic."""

from .subscription_management import (
    list_subscriptions,
    get_subscription,
    create_subscription,
    update_subscription,
    delete_subscription,
)
from .split_allocation import SplitAllocator
from .split_requests import prepare_split, check_split
from .messaging import (
    format_phone_number,
    build_reminder_message,
    generate_whatsapp_link,
)

__all__ = [
    # Subscription management
    'list_subscriptions',
    'get_subscription',
    'create_subscription',
    'update_subscription',
    'delete_subscription',
    # Splitting
    'SplitAllocator',
    'prepare_split',
    'check_split',
    # Messaging
    'format_phone_number',
    'build_reminder_message',
    'generate_whatsapp_link',
]

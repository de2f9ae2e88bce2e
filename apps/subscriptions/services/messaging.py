"""
Messaging hand-off for split reminders.

Builds WhatsApp click-to-chat links (``https://wa.me/<number>?text=...``)
that open a chat with a friend and a prefilled payment reminder. Nothing is
sent from the server; the client opens the link.
"""

import re
from urllib.parse import quote

from django.conf import settings

from apps.currency.currencies import currency_symbol

WHATSAPP_BASE_URL = 'https://wa.me/'

_NON_PHONE_CHARS = re.compile(r'[^\d+]')


def format_phone_number(phone, default_country_code=None):
    """
    Normalize a phone number to international ``+<digits>`` form.

    Numbers without a leading ``+`` get the default country code.

    Example:
        >>> format_phone_number('98765 43210')
        '+919876543210'
        >>> format_phone_number('+1 (555) 010-9999')
        '+15550109999'
    """
    if default_country_code is None:
        default_country_code = settings.SPLIT_DEFAULT_COUNTRY_CODE

    cleaned = _NON_PHONE_CHARS.sub('', phone or '')
    if not cleaned.startswith('+'):
        cleaned = default_country_code + cleaned

    # Only the leading plus survives
    return '+' + cleaned[1:].replace('+', '')


def build_reminder_message(subscription, share_amount):
    """Default reminder text for one participant's share."""
    symbol = currency_symbol(subscription.currency)
    return (
        f"Payment Reminder: {subscription.name}\n\n"
        f"Total Amount: {symbol}{subscription.amount:.2f}\n"
        f"Your Share: {symbol}{share_amount:.2f}\n\n"
        f"Please send your payment when possible. Thank you!"
    )


def generate_whatsapp_link(phone, subscription, share_amount, message=None):
    """
    Build the click-to-chat link for one participant.

    Args:
        phone (str): Participant phone number, any formatting.
        subscription (Subscription): The subscription being split.
        share_amount (Decimal): The participant's share.
        message (str, optional): Custom text; the default reminder is used
            when empty.

    Returns:
        str: ``https://wa.me/<digits>?text=<url-encoded message>``
    """
    digits = format_phone_number(phone).lstrip('+')
    text = message or build_reminder_message(subscription, share_amount)
    return f"{WHATSAPP_BASE_URL}{digits}?text={quote(text, safe='')}"

"""
Analytics Module
=================

This module computes spend analytics over a user's subscriptions, converted
into one display currency.

Classes:
    SubscriptionAnalytics: Summary of monthly and yearly spend.

Example:
    Getting a user's spend in rupees::

        from apps.analytics.analytics import SubscriptionAnalytics

        summary = SubscriptionAnalytics.summary(user, currency='INR')
        print(f"Monthly: {summary['monthly_spend']} {summary['currency']}")

Note:
    This module is read-only and doesn't modify any data. Amounts are
    converted one subscription at a time with the shared converter, so a
    summary never mixes currencies.
"""

from decimal import Decimal, ROUND_HALF_UP

from apps.currency.currencies import Currency
from apps.currency.services import get_converter
from apps.subscriptions.models import Subscription, SubscriptionType

CENT = Decimal('0.01')
MONTHS_PER_YEAR = Decimal('12')


class SubscriptionAnalytics:
    """
    Spend analytics for a single user.

    Contribution of one subscription with converted amount ``a``:

    ========  ===============  ==============
    type      monthly_spend    yearly_spend
    ========  ===============  ==============
    monthly   ``a``            ``12 * a``
    yearly    ``a / 12``       ``a``
    onetime   (none)           ``a``
    ========  ===============  ==============

    Totals are rounded to the cent once, after summing.
    """

    @staticmethod
    def empty_summary(currency):
        return {
            'monthly_spend': Decimal('0.00'),
            'yearly_spend': Decimal('0.00'),
            'subscriptions_by_type': {kind: 0 for kind in SubscriptionType.values},
            'total_count': 0,
            'currency': currency,
        }

    @staticmethod
    def summary(user, currency=None, converter=None):
        """
        Summarize a user's subscription spend.

        Args:
            user: Owner of the subscriptions. Anonymous users get a zero
                summary.
            currency (str, optional): Display currency. Defaults to the
                user's preferred currency.
            converter (CurrencyConverter, optional): Defaults to the shared
                converter.

        Returns:
            dict: A dictionary containing:
                - monthly_spend (Decimal)
                - yearly_spend (Decimal)
                - subscriptions_by_type (dict): Count per recurrence kind,
                  every kind present.
                - total_count (int)
                - currency (str)
        """
        if user is None or not user.is_authenticated:
            return SubscriptionAnalytics.empty_summary(currency or Currency.USD.value)

        currency = currency or user.preferred_currency
        summary = SubscriptionAnalytics.empty_summary(currency)

        subscriptions = Subscription.objects.filter(user=user).only('amount', 'currency', 'type')
        if not subscriptions:
            return summary

        converter = converter or get_converter()
        monthly = Decimal('0')
        yearly = Decimal('0')

        for subscription in subscriptions:
            amount = converter.convert(subscription.amount, subscription.currency, currency)

            if subscription.type == SubscriptionType.MONTHLY:
                monthly += amount
                yearly += amount * MONTHS_PER_YEAR
            elif subscription.type == SubscriptionType.YEARLY:
                monthly += amount / MONTHS_PER_YEAR
                yearly += amount
            else:
                yearly += amount

            summary['subscriptions_by_type'][subscription.type] += 1
            summary['total_count'] += 1

        summary['monthly_spend'] = monthly.quantize(CENT, rounding=ROUND_HALF_UP)
        summary['yearly_spend'] = yearly.quantize(CENT, rounding=ROUND_HALF_UP)
        return summary

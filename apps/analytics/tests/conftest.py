import pytest
from decimal import Decimal
from datetime import date
from unittest.mock import Mock, patch
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.currency.services import CurrencyConverter, RateCache
from apps.subscriptions.models import Subscription, SubscriptionType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def analytics_user(db):
    """Create the main analytics test user."""
    return User.objects.create_user(
        email='analytics_user@example.com',
        password='TestPass123!',
        full_name='Analytics User',
    )


@pytest.fixture
def rupee_user(db):
    """A user whose preferred display currency is INR."""
    return User.objects.create_user(
        email='rupee_user@example.com',
        password='TestPass123!',
        preferred_currency='INR',
    )


@pytest.fixture
def analytics_user_client(api_client, analytics_user):
    """Return API client authenticated as analytics_user."""
    refresh = RefreshToken.for_user(analytics_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def converter():
    """Converter with a fixed table: 1 USD = 80 INR."""
    client = Mock()
    client.fetch.return_value = {'USD': Decimal('1'), 'INR': Decimal('80')}
    return CurrencyConverter(
        client=client,
        cache=RateCache(ttl_seconds=3600),
        fallback_rates={'USD': Decimal('1'), 'INR': Decimal('80')},
    )


@pytest.fixture
def patched_converter(converter):
    with patch('apps.analytics.analytics.get_converter', return_value=converter):
        yield converter


def _subscription(user, name, amount, currency, kind):
    return Subscription.objects.create(
        user=user,
        name=name,
        amount=Decimal(amount),
        currency=currency,
        type=kind,
        start_date=date(2024, 1, 1),
    )


@pytest.fixture
def analytics_subscriptions(analytics_user):
    """
    One of each kind:
        monthly 10.00 USD, yearly 120.00 USD, onetime 50.00 USD,
        monthly 800.00 INR (10.00 USD at 80)
    """
    return [
        _subscription(analytics_user, 'Music', '10.00', 'USD', SubscriptionType.MONTHLY),
        _subscription(analytics_user, 'Cloud', '120.00', 'USD', SubscriptionType.YEARLY),
        _subscription(analytics_user, 'Course', '50.00', 'USD', SubscriptionType.ONETIME),
        _subscription(analytics_user, 'Broadband', '800.00', 'INR', SubscriptionType.MONTHLY),
    ]

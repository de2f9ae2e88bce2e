import pytest
from decimal import Decimal
from unittest.mock import Mock
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.currency.exceptions import RateFetchError
from apps.currency.services import CurrencyConverter, RateCache, reset_converter


class FakeClock:
    """Manually advanced clock (seconds)."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture(autouse=True)
def fresh_converter():
    """Make sure no cached rates leak between tests."""
    reset_converter()
    yield
    reset_converter()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def live_rates():
    return {'USD': Decimal('1'), 'INR': Decimal('83')}


@pytest.fixture
def rate_client(live_rates):
    """Rate client stub returning a fixed USD/INR table."""
    client = Mock()
    client.fetch.return_value = live_rates
    return client


@pytest.fixture
def failing_rate_client():
    client = Mock()
    client.fetch.side_effect = RateFetchError("connection refused")
    return client


@pytest.fixture
def converter(rate_client, clock):
    return CurrencyConverter(
        client=rate_client,
        cache=RateCache(ttl_seconds=3600),
        fallback_rates={'USD': Decimal('1'), 'INR': Decimal('80')},
        clock=clock,
    )


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def currency_user(db):
    return User.objects.create_user(
        email='rates@example.com',
        password='TestPass123!',
        full_name='Rate Watcher',
    )


@pytest.fixture
def auth_client(api_client, currency_user):
    """Return API client authenticated as currency_user."""
    refresh = RefreshToken.for_user(currency_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client

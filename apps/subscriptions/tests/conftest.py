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
def owner(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        full_name='Sub Owner',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        full_name='Someone Else',
    )


@pytest.fixture
def owner_client(api_client, owner):
    """Return API client authenticated as owner."""
    refresh = RefreshToken.for_user(owner)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def other_client(other_user):
    client = APIClient()
    refresh = RefreshToken.for_user(other_user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def streaming(owner):
    return Subscription.objects.create(
        user=owner,
        name='Streaming',
        amount=Decimal('100.00'),
        currency='USD',
        type=SubscriptionType.MONTHLY,
        start_date=date(2024, 3, 1),
    )


@pytest.fixture
def owner_subscriptions(owner, streaming):
    """Five subscriptions with distinct dates, amounts and names."""
    rows = [
        ('apple Music', '10.99', 'USD', SubscriptionType.MONTHLY, date(2024, 1, 10)),
        ('Cloud Storage', '1200.00', 'INR', SubscriptionType.YEARLY, date(2023, 6, 1)),
        ('Zeta Course', '49.00', 'USD', SubscriptionType.ONETIME, date(2024, 5, 20)),
        ('Broadband', '999.00', 'INR', SubscriptionType.MONTHLY, date(2022, 11, 5)),
    ]
    created = [streaming]
    for name, amount, currency, kind, start in rows:
        created.append(Subscription.objects.create(
            user=owner,
            name=name,
            amount=Decimal(amount),
            currency=currency,
            type=kind,
            start_date=start,
        ))
    return created


@pytest.fixture
def fixed_converter():
    """Patch the process-wide converter with a fixed USD/INR table."""
    client = Mock()
    client.fetch.return_value = {'USD': Decimal('1'), 'INR': Decimal('83')}
    converter = CurrencyConverter(
        client=client,
        cache=RateCache(ttl_seconds=3600),
        fallback_rates={'USD': Decimal('1'), 'INR': Decimal('83')},
    )
    with patch('apps.subscriptions.views.get_converter', return_value=converter):
        yield converter

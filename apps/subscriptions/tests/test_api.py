"""
API tests for subscriptions endpoints.
"""

import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status

from apps.subscriptions.models import Subscription


@pytest.mark.django_db
class TestSubscriptionList:

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('subscriptions:subscription-list'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_paginated_five_per_page(self, owner_client, owner_subscriptions, owner):
        Subscription.objects.create(user=owner, name='Sixth', amount=Decimal('1.00'))

        response = owner_client.get(reverse('subscriptions:subscription-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 6
        assert len(response.data['results']) == 5
        assert response.data['next'] is not None

        second = owner_client.get(reverse('subscriptions:subscription-list'), {'page': 2})
        assert len(second.data['results']) == 1

    def test_page_size_param(self, owner_client, owner_subscriptions):
        response = owner_client.get(reverse('subscriptions:subscription-list'), {'page_size': 2})
        assert len(response.data['results']) == 2

    def test_sort_by_name(self, owner_client, owner_subscriptions):
        response = owner_client.get(
            reverse('subscriptions:subscription-list'),
            {'sort_by': 'name', 'sort_order': 'asc'}
        )

        names = [row['name'] for row in response.data['results']]
        assert names == ['apple Music', 'Broadband', 'Cloud Storage', 'Streaming', 'Zeta Course']

    def test_filter_by_type(self, owner_client, owner_subscriptions):
        response = owner_client.get(reverse('subscriptions:subscription-list'), {'type': 'onetime'})

        assert response.data['count'] == 1
        assert response.data['results'][0]['name'] == 'Zeta Course'

    def test_invalid_sort_rejected(self, owner_client, owner_subscriptions):
        response = owner_client.get(reverse('subscriptions:subscription-list'), {'sort_by': 'colour'})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_only_own_subscriptions(self, other_client, owner_subscriptions):
        response = other_client.get(reverse('subscriptions:subscription-list'))
        assert response.data['count'] == 0

    def test_display_currency_adds_converted_amount(self, owner_client, streaming, fixed_converter):
        response = owner_client.get(
            reverse('subscriptions:subscription-list'),
            {'display_currency': 'INR'}
        )

        row = response.data['results'][0]
        assert row['amount'] == '100.00'
        assert row['converted_amount'] == '8300.00'
        assert row['display_currency'] == 'INR'

    def test_without_display_currency(self, owner_client, streaming):
        response = owner_client.get(reverse('subscriptions:subscription-list'))
        assert response.data['results'][0]['converted_amount'] is None


@pytest.mark.django_db
class TestSubscriptionCrud:

    def test_create(self, owner_client, owner):
        response = owner_client.post(
            reverse('subscriptions:subscription-list'),
            {
                'name': 'Video Service',
                'amount': '649.00',
                'currency': 'INR',
                'type': 'monthly',
                'start_date': '2024-02-01',
            },
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Video Service'
        assert Subscription.objects.filter(user=owner, name='Video Service').exists()

    def test_create_without_start_date(self, owner_client):
        response = owner_client.post(
            reverse('subscriptions:subscription-list'),
            {'name': 'Gym', 'amount': '30.00'},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['start_date'] is not None

    @pytest.mark.parametrize('payload', [
        {'name': 'Bad', 'amount': '-1.00'},
        {'name': 'Bad', 'amount': '10.00', 'currency': 'EUR'},
        {'name': 'Bad', 'amount': '10.00', 'type': 'weekly'},
        {'name': '   ', 'amount': '10.00'},
    ])
    def test_create_invalid(self, owner_client, payload):
        response = owner_client.post(reverse('subscriptions:subscription-list'), payload, format='json')
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve(self, owner_client, streaming):
        response = owner_client.get(reverse('subscriptions:subscription-detail', args=[streaming.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(streaming.id)

    def test_retrieve_ignores_list_params(self, owner_client, streaming):
        response = owner_client.get(
            reverse('subscriptions:subscription-detail', args=[streaming.id]),
            {'sort_by': 'colour', 'page_size': 'many'}
        )

        assert response.status_code == status.HTTP_200_OK

    def test_retrieve_with_display_currency(self, owner_client, streaming, fixed_converter):
        response = owner_client.get(
            reverse('subscriptions:subscription-detail', args=[streaming.id]),
            {'display_currency': 'INR'}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['converted_amount'] == '8300.00'

    def test_retrieve_rejects_unknown_display_currency(self, owner_client, streaming):
        response = owner_client.get(
            reverse('subscriptions:subscription-detail', args=[streaming.id]),
            {'display_currency': 'EUR'}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve_foreign_is_404(self, other_client, streaming):
        response = other_client.get(reverse('subscriptions:subscription-detail', args=[streaming.id]))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_partial_update(self, owner_client, streaming):
        response = owner_client.patch(
            reverse('subscriptions:subscription-detail', args=[streaming.id]),
            {'amount': '120.00'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        streaming.refresh_from_db()
        assert streaming.amount == Decimal('120.00')

    def test_delete(self, owner_client, streaming):
        response = owner_client.delete(reverse('subscriptions:subscription-detail', args=[streaming.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Subscription.objects.filter(id=streaming.id).exists()

    def test_delete_foreign_is_404(self, other_client, streaming):
        response = other_client.delete(reverse('subscriptions:subscription-detail', args=[streaming.id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Subscription.objects.filter(id=streaming.id).exists()


@pytest.mark.django_db
class TestSplitEndpoints:

    def test_split(self, owner_client, streaming):
        response = owner_client.post(
            reverse('subscriptions:subscription-split', args=[streaming.id]),
            {'participants': [
                {'phone_number': '98765 43210'},
                {'phone_number': '+1 555 010 9999', 'has_paid': True},
                {'phone_number': '+91 99999 00000'},
            ]},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['split_total'] == '50.00'
        shares = response.data['shares']
        assert [s['amount'] for s in shares] == ['16.67', '16.67', '16.66']
        assert shares[0]['whatsapp_url'].startswith('https://wa.me/919876543210?text=')
        assert shares[1]['has_paid'] is True

    def test_split_needs_participants(self, owner_client, streaming):
        response = owner_client.post(
            reverse('subscriptions:subscription-split', args=[streaming.id]),
            {'participants': []},
            format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_split_max_five(self, owner_client, streaming):
        participants = [{'phone_number': f'+91987654321{i}'} for i in range(6)]

        response = owner_client.post(
            reverse('subscriptions:subscription-split', args=[streaming.id]),
            {'participants': participants},
            format='json'
        )
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_split_zero_amount(self, owner_client, owner):
        free = Subscription.objects.create(user=owner, name='Free Tier', amount=Decimal('0.00'))

        response = owner_client.post(
            reverse('subscriptions:subscription-split', args=[free.id]),
            {'participants': [{'phone_number': '+919876543210'}]},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Total amount must be greater than 0'}

    def test_split_foreign_is_404(self, other_client, streaming):
        response = other_client.post(
            reverse('subscriptions:subscription-split', args=[streaming.id]),
            {'participants': [{'phone_number': '+919876543210'}]},
            format='json'
        )
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize('shares, balanced', [
        (['16.67', '16.67', '16.66'], True),
        (['20.00', '30.00'], True),
        (['20.00', '29.99'], True),
        (['20.00', '29.98'], False),
        ([], False),
    ])
    def test_check_split(self, owner_client, streaming, shares, balanced):
        response = owner_client.post(
            reverse('subscriptions:subscription-check-split', args=[streaming.id]),
            {'shares': shares},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_balanced'] is balanced
        assert response.data['expected_total'] == '50.00'

    def test_check_split_odd_cent_total(self, owner_client, owner):
        music = Subscription.objects.create(user=owner, name='Music', amount=Decimal('9.99'))

        response = owner_client.post(
            reverse('subscriptions:subscription-check-split', args=[music.id]),
            {'shares': ['4.99']},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['is_balanced'] is True
        assert response.data['expected_total'] == '5.00'
        assert response.data['actual_total'] == '4.99'

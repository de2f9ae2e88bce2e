from rest_framework import serializers
from django.conf import settings
from .models import Subscription, SubscriptionType
from apps.currency.currencies import Currency


# =============================================================================
# Input Serializers
# =============================================================================

class DisplayCurrencyQuerySerializer(serializers.Serializer):
    """
    Validate the display currency query parameter.

    Query Parameters:
        display_currency (str): Add converted_amount in this currency
    """

    display_currency = serializers.ChoiceField(choices=Currency.choices, required=False)


class SubscriptionFilterSerializer(DisplayCurrencyQuerySerializer):
    """
    Validate query parameters for subscription listing.

    Query Parameters:
        sort_by (str): 'date', 'amount' or 'name'
        sort_order (str): 'asc' or 'desc'
        type (str): Filter by recurrence kind
        currency (str): Filter by stored currency
        display_currency (str): Add converted_amount in this currency
    """

    sort_by = serializers.ChoiceField(
        choices=['date', 'amount', 'name'],
        required=False,
        default='date'
    )
    sort_order = serializers.ChoiceField(
        choices=['asc', 'desc'],
        required=False,
        default='desc'
    )
    type = serializers.ChoiceField(choices=SubscriptionType.choices, required=False)
    currency = serializers.ChoiceField(choices=Currency.choices, required=False)


class SplitParticipantSerializer(serializers.Serializer):
    phone_number = serializers.CharField(max_length=32)
    has_paid = serializers.BooleanField(required=False, default=False)

    def validate_phone_number(self, value):
        digits = [ch for ch in value if ch.isdigit()]
        if len(digits) < 6:
            raise serializers.ValidationError('Enter a valid phone number.')
        return value.strip()


class SplitRequestSerializer(serializers.Serializer):
    """
    Validate a split request.

    Fields:
        participants (list): 1 to SUBSCRIPTION_SPLIT_MAX_PARTICIPANTS friends
        message (str): Optional custom reminder text
    """

    participants = SplitParticipantSerializer(many=True)
    message = serializers.CharField(max_length=1000, required=False, allow_blank=True)

    def validate_participants(self, value):
        max_participants = settings.SUBSCRIPTION_SPLIT_MAX_PARTICIPANTS
        if not value:
            raise serializers.ValidationError('Add at least one participant.')
        if len(value) > max_participants:
            raise serializers.ValidationError(
                f'A subscription can be split with at most {max_participants} people.'
            )
        return value


class CheckSplitInputSerializer(serializers.Serializer):
    shares = serializers.ListField(
        child=serializers.DecimalField(max_digits=10, decimal_places=2),
        allow_empty=True
    )


# =============================================================================
# Output Serializers
# =============================================================================

class SubscriptionSerializer(serializers.ModelSerializer):
    """
    Main serializer for subscriptions.

    When the view passes ``display_currency`` in the context, rows carry
    ``converted_amount`` in that currency.
    """

    converted_amount = serializers.SerializerMethodField()
    display_currency = serializers.SerializerMethodField()

    class Meta:
        model = Subscription
        fields = [
            'id',
            'name',
            'amount',
            'currency',
            'type',
            'start_date',
            'website_url',
            'converted_amount',
            'display_currency',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def get_converted_amount(self, obj):
        target = self.context.get('display_currency')
        converter = self.context.get('converter')
        if not target or converter is None:
            return None
        return str(converter.convert(obj.amount, obj.currency, target))

    def get_display_currency(self, obj):
        return self.context.get('display_currency')


class SubscriptionCreateSerializer(serializers.ModelSerializer):
    """Serializer for creating and updating subscriptions."""

    start_date = serializers.DateField(required=False)

    class Meta:
        model = Subscription
        fields = [
            'name',
            'amount',
            'currency',
            'type',
            'start_date',
            'website_url',
        ]

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError('Name cannot be blank.')
        return value


class SplitShareSerializer(serializers.Serializer):
    phone_number = serializers.CharField()
    has_paid = serializers.BooleanField()
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    whatsapp_url = serializers.URLField()


class SplitResponseSerializer(serializers.Serializer):
    subscription = serializers.UUIDField(source='subscription.id')
    currency = serializers.CharField(source='subscription.currency')
    total_amount = serializers.DecimalField(
        source='subscription.amount', max_digits=10, decimal_places=2
    )
    split_total = serializers.DecimalField(max_digits=10, decimal_places=2)
    shares = SplitShareSerializer(many=True)


class CheckSplitResponseSerializer(serializers.Serializer):
    is_balanced = serializers.BooleanField()
    expected_total = serializers.DecimalField(max_digits=10, decimal_places=2)
    actual_total = serializers.DecimalField(max_digits=12, decimal_places=2)

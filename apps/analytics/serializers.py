from rest_framework import serializers
from apps.currency.currencies import Currency


# =============================================================================
# Input Serializers
# =============================================================================

class SummaryQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for the spend summary.

    Query Parameters:
        currency (str): Display currency (defaults to the user's preference)
    """

    currency = serializers.ChoiceField(choices=Currency.choices, required=False)


# =============================================================================
# Response Serializers
# =============================================================================

class SubscriptionsByTypeSerializer(serializers.Serializer):
    monthly = serializers.IntegerField()
    yearly = serializers.IntegerField()
    onetime = serializers.IntegerField()


class SpendSummarySerializer(serializers.Serializer):
    """Spend summary in one display currency."""
    monthly_spend = serializers.DecimalField(max_digits=14, decimal_places=2)
    yearly_spend = serializers.DecimalField(max_digits=14, decimal_places=2)
    subscriptions_by_type = SubscriptionsByTypeSerializer()
    total_count = serializers.IntegerField()
    currency = serializers.CharField()

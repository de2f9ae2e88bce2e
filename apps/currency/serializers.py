"""
Serializers for currency app.

Input Serializers:
    ConvertQuerySerializer - Validates conversion query parameters

Response Serializers:
    ConvertResponseSerializer - Conversion result
    RatesResponseSerializer - Current rate table
"""

from decimal import Decimal
from rest_framework import serializers
from .currencies import Currency


class ConvertQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for currency conversion.

    Query Parameters:
        amount (decimal): Amount to convert
        from (str): Source currency code
        to (str): Target currency code
    """

    amount = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00')
    )
    from_currency = serializers.ChoiceField(choices=Currency.choices)
    to_currency = serializers.ChoiceField(choices=Currency.choices)

    def to_internal_value(self, data):
        # Accept the short ?from=&to= query parameter names
        if hasattr(data, 'dict'):
            data = data.dict()
        data = dict(data)
        if 'from' in data:
            data.setdefault('from_currency', data.pop('from'))
        if 'to' in data:
            data.setdefault('to_currency', data.pop('to'))
        return super().to_internal_value(data)


class ConvertResponseSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2)
    from_currency = serializers.CharField()
    to_currency = serializers.CharField()
    converted_amount = serializers.DecimalField(max_digits=14, decimal_places=2)


class RatesResponseSerializer(serializers.Serializer):
    base = serializers.CharField()
    source = serializers.ChoiceField(choices=['cache', 'live', 'fallback'])
    rates = serializers.DictField(child=serializers.DecimalField(max_digits=16, decimal_places=6))

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .currencies import BASE_CURRENCY
from .serializers import (
    ConvertQuerySerializer,
    ConvertResponseSerializer,
    RatesResponseSerializer,
)
from .services import get_converter


@extend_schema(
    parameters=[
        OpenApiParameter('amount', OpenApiTypes.DECIMAL, required=True, description='Amount to convert'),
        OpenApiParameter('from', OpenApiTypes.STR, required=True, description='Source currency (USD, INR)'),
        OpenApiParameter('to', OpenApiTypes.STR, required=True, description='Target currency (USD, INR)'),
    ],
    responses={200: ConvertResponseSerializer},
    description="Convert an amount between supported currencies.",
    tags=['currency'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def convert(request):
    """Convert an amount - thin HTTP handler."""
    query_serializer = ConvertQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data

    converted = get_converter().convert(
        params['amount'],
        params['from_currency'],
        params['to_currency'],
    )

    return Response(ConvertResponseSerializer({
        'amount': params['amount'],
        'from_currency': params['from_currency'],
        'to_currency': params['to_currency'],
        'converted_amount': converted,
    }).data)


@extend_schema(
    responses={200: RatesResponseSerializer},
    description="Get the exchange rate table currently used for conversions.",
    tags=['currency'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def rates(request):
    """Get current exchange rates."""
    table, source = get_converter().get_rates()

    return Response(RatesResponseSerializer({
        'base': BASE_CURRENCY.value,
        'source': source,
        'rates': table,
    }).data)

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .analytics import SubscriptionAnalytics
from .serializers import SummaryQuerySerializer, SpendSummarySerializer


@extend_schema(
    parameters=[
        OpenApiParameter(
            'currency', OpenApiTypes.STR,
            description='Display currency (USD, INR); defaults to your preferred currency'
        ),
    ],
    responses={200: SpendSummarySerializer},
    description="Get monthly and yearly spend across all of your subscriptions.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary(request):
    """Get spend summary - thin HTTP handler."""
    query_serializer = SummaryQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = SubscriptionAnalytics.summary(
        request.user,
        currency=query_serializer.validated_data.get('currency'),
    )

    return Response(SpendSummarySerializer(data).data)

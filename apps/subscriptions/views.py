import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema

from .serializers import (
    SubscriptionSerializer,
    SubscriptionCreateSerializer,
    SplitResponseSerializer,
    CheckSplitResponseSerializer,
    # Input serializers
    SubscriptionFilterSerializer,
    DisplayCurrencyQuerySerializer,
    SplitRequestSerializer,
    CheckSplitInputSerializer,
)
from .services import (
    list_subscriptions,
    get_subscription,
    create_subscription,
    update_subscription,
    delete_subscription,
    prepare_split,
    check_split,
)
from .exceptions import InvalidSplitError
from .permissions import IsSubscriptionOwner
from apps.currency.services import get_converter

logger = logging.getLogger(__name__)

UUID_REGEX = r'[0-9a-fA-F]{8}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{4}-?[0-9a-fA-F]{12}'


class SubscriptionPagination(PageNumberPagination):
    """Five subscriptions per page by default."""
    page_size = 5
    page_size_query_param = 'page_size'
    max_page_size = 100


class SubscriptionViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Subscription CRUD operations.

    list: Get own subscriptions (sortable, filterable, paginated)
    create: Record a new subscription
    retrieve: Get a specific subscription
    update: Update a subscription
    destroy: Delete a subscription
    split: Split the subscription with friends
    check_split: Check manually edited share amounts
    """

    serializer_class = SubscriptionSerializer
    permission_classes = [IsAuthenticated, IsSubscriptionOwner]
    pagination_class = SubscriptionPagination
    lookup_value_regex = UUID_REGEX

    def _filter_params(self):
        filter_serializer = SubscriptionFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        return filter_serializer.validated_data

    def get_queryset(self):
        """Own subscriptions only, filtered and sorted from query params."""
        if self.action != 'list':
            return list_subscriptions(user=self.request.user)

        params = self._filter_params()
        return list_subscriptions(
            user=self.request.user,
            sort_by=params['sort_by'],
            sort_order=params['sort_order'],
            type=params.get('type'),
            currency=params.get('currency'),
        )

    def get_object(self):
        subscription = get_subscription(
            user=self.request.user,
            subscription_id=self.kwargs[self.lookup_field]
        )
        self.check_object_permissions(self.request, subscription)
        return subscription

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.action in ('list', 'retrieve'):
            # Detail URLs only take display_currency; list params are checked in get_queryset
            query_serializer = DisplayCurrencyQuerySerializer(data=self.request.query_params)
            query_serializer.is_valid(raise_exception=True)
            display_currency = query_serializer.validated_data.get('display_currency')
            if display_currency:
                context['display_currency'] = display_currency
                context['converter'] = get_converter()
        return context

    def get_serializer_class(self):
        if self.action in ('create', 'update', 'partial_update'):
            return SubscriptionCreateSerializer
        return SubscriptionSerializer

    @extend_schema(
        parameters=[SubscriptionFilterSerializer],
        responses=SubscriptionSerializer(many=True),
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(
        parameters=[DisplayCurrencyQuerySerializer],
        responses=SubscriptionSerializer,
    )
    def retrieve(self, request, *args, **kwargs):
        return super().retrieve(request, *args, **kwargs)

    @extend_schema(request=SubscriptionCreateSerializer, responses={201: SubscriptionSerializer})
    def create(self, request, *args, **kwargs):
        serializer = SubscriptionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        subscription = create_subscription(user=request.user, **serializer.validated_data)

        return Response(
            SubscriptionSerializer(subscription).data,
            status=status.HTTP_201_CREATED
        )

    @extend_schema(request=SubscriptionCreateSerializer, responses=SubscriptionSerializer)
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        subscription = self.get_object()

        serializer = SubscriptionCreateSerializer(subscription, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        subscription = update_subscription(
            user=request.user,
            subscription_id=subscription.id,
            **serializer.validated_data
        )
        return Response(SubscriptionSerializer(subscription).data)

    def destroy(self, request, *args, **kwargs):
        subscription = self.get_object()
        delete_subscription(user=request.user, subscription_id=subscription.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=SplitRequestSerializer, responses=SplitResponseSerializer)
    @action(detail=True, methods=['post'])
    def split(self, request, pk=None):
        """
        Split half of the subscription amount among friends.

        POST /api/subscriptions/{id}/split/
        Body: {"participants": [{"phone_number": "+919876543210"}], "message": "optional"}
        """
        subscription = self.get_object()

        input_serializer = SplitRequestSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        try:
            result = prepare_split(
                subscription=subscription,
                participants=input_serializer.validated_data['participants'],
                message=input_serializer.validated_data.get('message') or None,
            )
        except InvalidSplitError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(SplitResponseSerializer(result).data)

    @extend_schema(request=CheckSplitInputSerializer, responses=CheckSplitResponseSerializer)
    @action(detail=True, methods=['post'])
    def check_split(self, request, pk=None):
        """
        Check whether edited share amounts add up to the split total.

        POST /api/subscriptions/{id}/check_split/
        Body: {"shares": ["16.67", "16.67", "16.66"]}
        """
        subscription = self.get_object()

        input_serializer = CheckSplitInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        result = check_split(
            subscription=subscription,
            shares=input_serializer.validated_data['shares']
        )
        return Response(CheckSplitResponseSerializer(result).data)

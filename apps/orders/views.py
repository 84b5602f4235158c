from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from django.db.models import Q
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Order
from .serializers import (
    OrderSerializer,
    OrderListSerializer,
    CheckoutSerializer,
    OrderFilterSerializer,
    OrderStatusUpdateSerializer,
)
from .services import OrderService
from .permissions import IsOrderParticipant, CanUpdateOrderStatus


class OrderPagination(PageNumberPagination):
    """Custom pagination for orders."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class OrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for orders.

    list: Own orders as buyer (default) or seller (?role=seller)
    create: Checkout a listing
    retrieve: Get an order (buyer or seller only)
    """

    queryset = Order.objects.select_related(
        'buyer',
        'buyer__profile',
        'seller',
        'seller__profile',
    )
    serializer_class = OrderSerializer
    permission_classes = [IsAuthenticated, IsOrderParticipant]
    pagination_class = OrderPagination

    def get_permissions(self):
        """Use different permissions for different actions."""
        if self.action == 'update_status':
            return [IsAuthenticated(), CanUpdateOrderStatus()]
        return super().get_permissions()

    def get_queryset(self):
        """Only orders the user takes part in."""
        user = self.request.user
        if self.action != 'list':
            return super().get_queryset().filter(Q(buyer=user) | Q(seller=user))

        filter_serializer = OrderFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if params['role'] == 'seller':
            return OrderService.get_seller_orders(user, status=params.get('status'))
        return OrderService.get_buyer_orders(user, status=params.get('status'))

    def get_serializer_class(self):
        if self.action == 'list':
            return OrderListSerializer
        return OrderSerializer

    @extend_schema(
        parameters=[
            OpenApiParameter('role', OpenApiTypes.STR, description='buyer (default) or seller'),
            OpenApiParameter('status', OpenApiTypes.STR, description='Filter by order status'),
        ],
    )
    def list(self, request, *args, **kwargs):
        return super().list(request, *args, **kwargs)

    @extend_schema(request=CheckoutSerializer, responses={201: OrderSerializer})
    def create(self, request, *args, **kwargs):
        """
        Checkout: buy units of a listing.

        POST /api/orders/
        Body: {"listing": "<uuid>", "quantity": 2, "delivery_location": "...", "delivery_phone": "..."}
        """
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)

        order = OrderService.create_order_from_listing(
            buyer=request.user,
            listing_id=data.pop('listing'),
            **data
        )
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=OrderStatusUpdateSerializer, responses={200: OrderSerializer})
    @action(detail=True, methods=['post'], url_path='status', url_name='update-status')
    def update_status(self, request, pk=None):
        """
        Move the order to its next status, or cancel it.

        POST /api/orders/{id}/status/
        Body: {"status": "shipped"}
        """
        order = self.get_object()
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = OrderService.update_order_status(
            order_id=order.id,
            user=request.user,
            new_status=serializer.validated_data['status'],
        )
        return Response(OrderSerializer(order).data)

from rest_framework import viewsets, mixins, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.orders.serializers import OrderSerializer
from .models import BuyerRequest, Offer
from .permissions import IsRequestOwnerOrReadOnly, IsOfferParticipant
from .serializers import (
    BuyerRequestSerializer,
    BuyerRequestWriteSerializer,
    RequestFilterSerializer,
    RequestCountSerializer,
    OfferSerializer,
    OfferWriteSerializer,
    OfferFilterSerializer,
    AcceptOfferSerializer,
    RejectOfferSerializer,
)
from .services import (
    create_request,
    update_request,
    delete_request,
    get_request_by_id,
    get_open_requests,
    get_buyer_requests,
    get_requests_count,
    create_offer,
    update_offer,
    withdraw_offer,
    get_offers_by_request,
    get_offers_by_seller,
    accept_offer,
    reject_offer,
    # Exceptions
    RequestNotFoundError,
    OfferNotFoundError,
    NotABuyerError,
    NotASellerError,
    UnauthorizedRequestActionError,
    UnauthorizedOfferActionError,
    InvalidBudgetError,
    InvalidRequestStateError,
    RequestNotOpenError,
    OfferNotPendingError,
    InvalidOfferError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class RequestPagination(PageNumberPagination):
    """Custom pagination for requests and offers."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class BuyerRequestViewSet(viewsets.ModelViewSet):
    """
    ViewSet for buyer requests.

    list: Browse open requests (filter by category, search)
    create: Post a request (buyers only)
    retrieve: Get a request
    update: Update a request (owner only)
    partial_update: Partially update a request (owner only)
    destroy: Delete a request (owner only)
    """

    queryset = BuyerRequest.objects.select_related('buyer', 'buyer__profile')
    serializer_class = BuyerRequestSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsRequestOwnerOrReadOnly]
    pagination_class = RequestPagination

    def get_queryset(self):
        """
        Open requests for the list view.

        Filters:
        - category: exact category
        - search: search in title and description
        - exclude_own: hide the current user's own requests
        """
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = RequestFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        exclude_buyer = None
        if params['exclude_own'] and self.request.user.is_authenticated:
            exclude_buyer = self.request.user

        return get_open_requests(
            category=params.get('category'),
            search=params.get('search'),
            exclude_buyer=exclude_buyer,
        )

    def get_serializer_class(self):
        if self.action in ['create', 'update', 'partial_update']:
            return BuyerRequestWriteSerializer
        return BuyerRequestSerializer

    def retrieve(self, request, *args, **kwargs):
        buyer_request = self.get_object()
        return Response(BuyerRequestSerializer(get_request_by_id(request_id=buyer_request.id)).data)

    def create(self, request, *args, **kwargs):
        """Post a new request."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        data.pop('status', None)

        try:
            buyer_request = create_request(buyer=request.user, **data)
        except NotABuyerError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidBudgetError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            BuyerRequestSerializer(buyer_request).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a request (owner only)."""
        partial = kwargs.pop('partial', False)
        buyer_request = self.get_object()

        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            buyer_request = update_request(
                request_id=buyer_request.id,
                user=request.user,
                data=serializer.validated_data
            )
        except UnauthorizedRequestActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (InvalidBudgetError, InvalidRequestStateError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(BuyerRequestSerializer(buyer_request).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a request (owner only)."""
        buyer_request = self.get_object()

        try:
            delete_request(request_id=buyer_request.id, user=request.user)
        except RequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedRequestActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('status', OpenApiTypes.STR, description='open, closed or completed'),
        ],
        responses={200: BuyerRequestSerializer(many=True)},
    )
    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def mine(self, request):
        """All requests of the current buyer, any status."""
        requests = get_buyer_requests(
            buyer=request.user,
            status=request.query_params.get('status'),
        )
        page = self.paginate_queryset(requests)
        serializer = BuyerRequestSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @extend_schema(
        parameters=[
            OpenApiParameter('status', OpenApiTypes.STR, description='Only count requests with this status'),
        ],
        responses={200: RequestCountSerializer},
    )
    @action(detail=False, methods=['get'])
    def count(self, request):
        """Number of requests, optionally by status."""
        return Response({
            'count': get_requests_count(status=request.query_params.get('status'))
        })

    @extend_schema(responses={200: OfferSerializer(many=True)})
    @action(detail=True, methods=['get'], permission_classes=[IsAuthenticated])
    def offers(self, request, pk=None):
        """
        Offers on this request.

        The request owner sees every offer; a seller sees only their own.
        """
        buyer_request = self.get_object()
        offers = get_offers_by_request(request_id=buyer_request.id)
        if buyer_request.buyer_id != request.user.id:
            offers = offers.filter(seller=request.user)
        return Response(OfferSerializer(offers, many=True).data)


class OfferViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    viewsets.GenericViewSet
):
    """
    ViewSet for seller offers.

    list: The current seller's offers (filter by status)
    create: Make an offer, or revise one's pending offer on the same request
    retrieve: Get an offer (its seller or the request owner)
    partial_update: Revise a pending offer (seller only)
    """

    queryset = Offer.objects.select_related('seller', 'seller__profile', 'request')
    serializer_class = OfferSerializer
    permission_classes = [IsAuthenticated, IsOfferParticipant]
    pagination_class = RequestPagination
    http_method_names = ['get', 'post', 'patch', 'head', 'options']

    def get_queryset(self):
        if self.action != 'list':
            return super().get_queryset()

        filter_serializer = OfferFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        return get_offers_by_seller(
            seller=self.request.user,
            status=filter_serializer.validated_data.get('status'),
        )

    @extend_schema(
        request=OfferWriteSerializer,
        responses={
            200: OfferSerializer,
            201: OfferSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Make an offer. Returns 200 when an existing pending offer was revised.",
    )
    def create(self, request, *args, **kwargs):
        serializer = OfferWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        request_id = data.pop('request')

        try:
            offer, created = create_offer(seller=request.user, request_id=request_id, **data)
        except NotASellerError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except RequestNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (RequestNotOpenError, InvalidOfferError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            OfferSerializer(offer).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
        )

    @extend_schema(
        request=OfferWriteSerializer,
        responses={
            200: OfferSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
        },
    )
    def partial_update(self, request, *args, **kwargs):
        offer = self.get_object()
        serializer = OfferWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            offer = update_offer(offer_id=offer.id, user=request.user, data=serializer.validated_data)
        except UnauthorizedOfferActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except OfferNotPendingError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OfferSerializer(offer).data)

    @extend_schema(
        request=None,
        responses={
            200: OfferSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['post'])
    def withdraw(self, request, pk=None):
        """Withdraw a pending offer (seller only)."""
        offer = self.get_object()

        try:
            offer = withdraw_offer(offer_id=offer.id, user=request.user)
        except UnauthorizedOfferActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except OfferNotPendingError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OfferSerializer(offer).data)

    @extend_schema(
        request=AcceptOfferSerializer,
        responses={
            201: OrderSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
        description="Accept the offer: rejects the other pending offers, closes the request and creates the order.",
    )
    @action(detail=True, methods=['post'])
    def accept(self, request, pk=None):
        offer = self.get_object()
        serializer = AcceptOfferSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            order = accept_offer(
                offer_id=offer.id,
                user=request.user,
                order_notes=serializer.validated_data.get('order_notes', ''),
            )
        except OfferNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedOfferActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (OfferNotPendingError, RequestNotOpenError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=RejectOfferSerializer,
        responses={
            200: OfferSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['post'])
    def reject(self, request, pk=None):
        offer = self.get_object()
        serializer = RejectOfferSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            offer = reject_offer(
                offer_id=offer.id,
                user=request.user,
                reason=serializer.validated_data.get('reason', ''),
            )
        except OfferNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedOfferActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (OfferNotPendingError, RequestNotOpenError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OfferSerializer(offer).data)

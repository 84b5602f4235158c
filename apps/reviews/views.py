from rest_framework import status, viewsets, serializers as drf_serializers
from rest_framework.decorators import api_view, action, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly, AllowAny
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Review
from .serializers import (
    ReviewSerializer,
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
    ReviewFilterSerializer,
    SellerResponseSerializer,
    HelpfulResponseSerializer,
    RatingBreakdownSerializer,
)
from .permissions import IsReviewAuthorOrReadOnly, IsProductSeller
from .services import (
    create_review,
    update_review,
    delete_review,
    get_reviews_by_buyer,
    get_review_by_order,
    get_seller_reviews,
    add_seller_response,
    mark_review_helpful,
    get_product_rating_breakdown,
    # Exceptions
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    OrderNotFoundError,
    OrderNotReviewableError,
    UnauthorizedReviewActionError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ReviewPagination(PageNumberPagination):
    """Custom pagination for reviews."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ReviewViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Review CRUD operations.

    list: Get reviews (filter by product, buyer, seller, rating)
    create: Review a delivered order
    retrieve: Get a specific review
    update: Update a review (author only)
    partial_update: Partially update a review (author only)
    destroy: Delete a review (author only)
    """

    queryset = Review.objects.select_related(
        'buyer',
        'buyer__profile',
        'product',
    )
    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsReviewAuthorOrReadOnly]
    pagination_class = ReviewPagination
    http_method_names = ['get', 'post', 'patch', 'delete', 'head', 'options']

    def get_permissions(self):
        if self.action == 'respond':
            return [IsAuthenticated(), IsProductSeller()]
        return super().get_permissions()

    def get_queryset(self):
        """
        Filter reviews based on query parameters.

        Filters:
        - product: UUID of product
        - buyer: UUID of review author
        - seller: UUID of the product's seller
        - rating: exact rating (1-5)
        """
        queryset = super().get_queryset()
        if self.action != 'list':
            return queryset

        filter_serializer = ReviewFilterSerializer(data=self.request.query_params)
        filter_serializer.is_valid(raise_exception=True)
        params = filter_serializer.validated_data

        if 'product' in params:
            queryset = queryset.filter(product_id=params['product'])
        if 'buyer' in params:
            queryset = queryset.filter(buyer_id=params['buyer'])
        if 'seller' in params:
            queryset = queryset.filter(product__seller_id=params['seller'])
        if 'rating' in params:
            queryset = queryset.filter(rating=params['rating'])

        return queryset.order_by('-created_at')

    @extend_schema(
        request=ReviewCreateSerializer,
        responses={
            201: ReviewSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    def create(self, request, *args, **kwargs):
        """Review the product of a delivered order."""
        serializer = ReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            review = create_review(
                buyer=request.user,
                order_id=data['order'],
                rating=data['rating'],
                comment=data.get('comment', ''),
            )
        except OrderNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (OrderNotReviewableError, DuplicateReviewError, InvalidRatingError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ReviewUpdateSerializer,
        responses={
            200: ReviewSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
        },
    )
    def partial_update(self, request, *args, **kwargs):
        review = self.get_object()
        serializer = ReviewUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            review = update_review(
                review_id=review.id,
                user=request.user,
                rating=serializer.validated_data.get('rating'),
                comment=serializer.validated_data.get('comment'),
            )
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidRatingError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data)

    def destroy(self, request, *args, **kwargs):
        review = self.get_object()

        try:
            delete_review(review_id=review.id, user=request.user)
        except ReviewNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def mine(self, request):
        """Reviews written by the current user."""
        reviews = get_reviews_by_buyer(buyer=request.user)
        page = self.paginate_queryset(reviews)
        serializer = ReviewSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @extend_schema(
        request=SellerResponseSerializer,
        responses={
            200: ReviewSerializer,
            403: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['post'])
    def respond(self, request, pk=None):
        """Seller replies to a review of their product."""
        review = self.get_object()
        serializer = SellerResponseSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            review = add_seller_response(
                review_id=review.id,
                user=request.user,
                response=serializer.validated_data['response'],
            )
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(ReviewSerializer(review).data)

    @extend_schema(
        request=None,
        responses={
            200: HelpfulResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['post'], permission_classes=[IsAuthenticated])
    def helpful(self, request, pk=None):
        """Vote a review helpful."""
        try:
            helpful_count = mark_review_helpful(review_id=pk)
        except ReviewNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({'helpful_count': helpful_count})


@extend_schema(
    responses={200: RatingBreakdownSerializer},
    description="Number of reviews per star rating for a product.",
    tags=['reviews'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def product_rating_breakdown(request, product_id):
    breakdown = get_product_rating_breakdown(product_id=product_id)
    return Response({
        'product_id': product_id,
        'breakdown': breakdown,
        'total_reviews': sum(breakdown.values()),
    })


@extend_schema(
    responses={200: ReviewSerializer(many=True)},
    description="Reviews across all products of a seller.",
    tags=['reviews'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def seller_reviews(request, seller_id):
    reviews = get_seller_reviews(seller_id=seller_id)
    return Response(ReviewSerializer(reviews, many=True).data)


@extend_schema(
    responses={
        200: ReviewSerializer,
        404: ErrorResponseSerializer,
    },
    description="The review left for an order, if any.",
    tags=['reviews'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def order_review(request, order_id):
    review = get_review_by_order(order_id=order_id)
    if review is None:
        return Response({'error': 'No review for this order'}, status=status.HTTP_404_NOT_FOUND)

    return Response(ReviewSerializer(review).data)

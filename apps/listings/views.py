from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .models import Product, ListingStatus
from .permissions import IsListingSellerOrReadOnly
from .serializers import (
    ProductSerializer,
    ProductListSerializer,
    ProductWriteSerializer,
    ListingSearchQuerySerializer,
    SimilarListingsQuerySerializer,
    SimilarListingSerializer,
    QuestionSerializer,
    QuestionCreateSerializer,
    AnswerSerializer,
    ListingCountSerializer,
)
from .services import (
    create_listing,
    update_listing,
    delete_listing,
    get_listing_by_id,
    record_listing_view,
    get_listings_count,
    search_listings,
    find_similar_listings,
    get_questions,
    create_question,
    create_seller_answer,
    delete_question,
    # Exceptions
    ListingNotFoundError,
    NotASellerError,
    UnauthorizedListingActionError,
    QuestionNotFoundError,
    UnauthorizedQuestionActionError,
    InvalidQuestionError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ListingPagination(PageNumberPagination):
    """Custom pagination for listings."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class ProductViewSet(viewsets.ModelViewSet):
    """
    ViewSet for listings (products for direct sale).

    list: Search active listings (filters, sort)
    create: Publish a listing (sellers only)
    retrieve: Get a listing and count the view
    update: Update a listing (seller only)
    partial_update: Partially update a listing (seller only)
    destroy: Delete a listing (seller only)
    """

    queryset = Product.objects.select_related('seller', 'seller__profile')
    serializer_class = ProductSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsListingSellerOrReadOnly]
    pagination_class = ListingPagination

    def get_queryset(self):
        """
        Filter listings based on query parameters.

        Filters:
        - seller: UUID of seller
        - category: exact category
        - status: listing status (default active)
        - search: search in title and description
        - min_price / max_price: price range
        - sort: newest, oldest, price_asc, price_desc, popular
        """
        if self.action != 'list':
            return super().get_queryset()

        query_serializer = ListingSearchQuerySerializer(data=self.request.query_params)
        query_serializer.is_valid(raise_exception=True)
        params = query_serializer.validated_data

        return search_listings(
            seller_id=params.get('seller'),
            category=params.get('category'),
            status=params.get('status', ListingStatus.ACTIVE),
            search=params.get('search'),
            min_price=params.get('min_price'),
            max_price=params.get('max_price'),
            sort=params['sort'],
        )

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action in ['list', 'mine']:
            return ProductListSerializer
        elif self.action in ['create', 'update', 'partial_update']:
            return ProductWriteSerializer
        return ProductSerializer

    def retrieve(self, request, *args, **kwargs):
        """Get listing detail and increment its view counter."""
        listing = self.get_object()
        record_listing_view(listing_id=listing.id)
        listing = get_listing_by_id(listing_id=listing.id)
        return Response(ProductSerializer(listing).data)

    def create(self, request, *args, **kwargs):
        """Publish a new listing."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            listing = create_listing(
                seller=request.user,
                **serializer.validated_data
            )
        except NotASellerError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_403_FORBIDDEN
            )

        return Response(
            ProductSerializer(listing).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """Update a listing (seller only)."""
        partial = kwargs.pop('partial', False)
        listing = self.get_object()

        serializer = self.get_serializer(data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            listing = update_listing(
                listing_id=listing.id,
                user=request.user,
                data=serializer.validated_data
            )
        except UnauthorizedListingActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(ProductSerializer(listing).data)

    def destroy(self, request, *args, **kwargs):
        """Delete a listing (seller only)."""
        listing = self.get_object()

        try:
            delete_listing(listing_id=listing.id, user=request.user)
        except ListingNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedListingActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def mine(self, request):
        """All listings of the current seller, any status."""
        listings = search_listings(
            seller_id=request.user.id,
            status=request.query_params.get('status'),
        )
        page = self.paginate_queryset(listings)
        serializer = ProductListSerializer(page, many=True)
        return self.get_paginated_response(serializer.data)

    @extend_schema(
        parameters=[
            OpenApiParameter('title', OpenApiTypes.STR, description='Proposed listing title', required=True),
        ],
        responses={200: SimilarListingSerializer(many=True)},
        description="The current seller's active listings with a similar title (duplicate warning).",
    )
    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def similar(self, request):
        """Warn about likely duplicates before publishing."""
        query_serializer = SimilarListingsQuerySerializer(data=request.query_params)
        query_serializer.is_valid(raise_exception=True)

        matches = find_similar_listings(
            seller=request.user,
            title=query_serializer.validated_data['title'],
        )
        data = [
            {'listing': listing, 'similarity': score, 'match_type': match_type}
            for listing, score, match_type in matches
        ]
        return Response(SimilarListingSerializer(data, many=True).data)

    @extend_schema(
        parameters=[
            OpenApiParameter('status', OpenApiTypes.STR, description='Only count listings with this status'),
        ],
        responses={200: ListingCountSerializer},
    )
    @action(detail=False, methods=['get'])
    def count(self, request):
        """Number of listings, optionally by status."""
        return Response({
            'count': get_listings_count(status=request.query_params.get('status'))
        })

    @extend_schema(
        request=QuestionCreateSerializer,
        responses={
            200: QuestionSerializer(many=True),
            201: QuestionSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(detail=True, methods=['get', 'post'])
    def questions(self, request, pk=None):
        """
        GET: questions on this listing with seller answers.
        POST: ask a question.
        """
        if request.method == 'GET':
            questions = get_questions(product_id=pk)
            return Response(QuestionSerializer(questions, many=True).data)

        serializer = QuestionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            question = create_question(
                product_id=pk,
                author=request.user,
                content=serializer.validated_data['content'],
            )
        except ListingNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(QuestionSerializer(question).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=QuestionCreateSerializer,
        responses={
            201: AnswerSerializer,
            400: ErrorResponseSerializer,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(
        detail=True,
        methods=['post'],
        url_path=r'questions/(?P<question_id>[0-9a-f-]{36})/answer',
        url_name='answer-question',
        permission_classes=[IsAuthenticated],
    )
    def answer_question(self, request, pk=None, question_id=None):
        """Seller answers a question on their listing."""
        serializer = QuestionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            answer = create_seller_answer(
                question_id=question_id,
                author=request.user,
                content=serializer.validated_data['content'],
            )
        except QuestionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedQuestionActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except InvalidQuestionError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(AnswerSerializer(answer).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=None,
        responses={
            204: None,
            403: ErrorResponseSerializer,
            404: ErrorResponseSerializer,
        },
    )
    @action(
        detail=True,
        methods=['delete'],
        url_path=r'questions/(?P<question_id>[0-9a-f-]{36})',
        url_name='delete-question',
        permission_classes=[IsAuthenticated],
    )
    def remove_question(self, request, pk=None, question_id=None):
        """Delete own question or answer."""
        try:
            delete_question(question_id=question_id, user=request.user)
        except QuestionNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedQuestionActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

from rest_framework import serializers
from decimal import Decimal
from apps.accounts.serializers import UserPublicSerializer
from .models import Product, ProductQuestion, Category, ListingStatus
from .services import SORT_ORDERINGS


class ProductSerializer(serializers.ModelSerializer):
    """Full listing detail."""

    seller = UserPublicSerializer(read_only=True)
    is_available = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'seller',
            'title',
            'description',
            'category',
            'price',
            'status',
            'image_url',
            'images',
            'inventory_quantity',
            'specifications',
            'views',
            'average_rating',
            'review_count',
            'is_available',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ProductListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    seller_name = serializers.CharField(source='seller.get_display_name', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id',
            'seller',
            'seller_name',
            'title',
            'category',
            'price',
            'status',
            'image_url',
            'inventory_quantity',
            'views',
            'average_rating',
            'review_count',
            'created_at',
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    """Input for creating and updating listings."""

    title = serializers.CharField(min_length=5, max_length=200)
    description = serializers.CharField(min_length=20, max_length=2000)
    category = serializers.ChoiceField(choices=Category.choices)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    inventory_quantity = serializers.IntegerField(min_value=0, default=0)
    image_url = serializers.URLField(max_length=500, required=False, allow_blank=True, allow_null=True)
    images = serializers.ListField(child=serializers.URLField(max_length=500), required=False)
    specifications = serializers.DictField(required=False)
    status = serializers.ChoiceField(choices=ListingStatus.choices, default=ListingStatus.ACTIVE)


class ListingSearchQuerySerializer(serializers.Serializer):
    """Query parameters accepted by the listing search."""

    seller = serializers.UUIDField(required=False)
    category = serializers.ChoiceField(choices=Category.choices, required=False)
    status = serializers.ChoiceField(choices=ListingStatus.choices, required=False)
    search = serializers.CharField(required=False, allow_blank=True)
    min_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0'), required=False)
    max_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0'), required=False)
    sort = serializers.ChoiceField(choices=list(SORT_ORDERINGS), default='newest')


class SimilarListingsQuerySerializer(serializers.Serializer):
    title = serializers.CharField(min_length=1, max_length=200)


class SimilarListingSerializer(serializers.Serializer):
    listing = ProductListSerializer()
    similarity = serializers.IntegerField()
    match_type = serializers.CharField()


class AnswerSerializer(serializers.ModelSerializer):
    author = UserPublicSerializer(read_only=True)

    class Meta:
        model = ProductQuestion
        fields = ['id', 'author', 'content', 'is_seller_answer', 'parent', 'created_at']
        read_only_fields = fields


class QuestionSerializer(serializers.ModelSerializer):
    """Question with its seller answers."""

    author = UserPublicSerializer(read_only=True)
    answers = AnswerSerializer(many=True, read_only=True)

    class Meta:
        model = ProductQuestion
        fields = ['id', 'product', 'author', 'content', 'answers', 'created_at']
        read_only_fields = fields


class QuestionCreateSerializer(serializers.Serializer):
    content = serializers.CharField(min_length=5, max_length=500)


class ListingCountSerializer(serializers.Serializer):
    count = serializers.IntegerField()

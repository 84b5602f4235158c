from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    """Review with its buyer."""

    buyer = UserPublicSerializer(read_only=True)
    product_title = serializers.CharField(source='product.title', read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'product',
            'product_title',
            'buyer',
            'order',
            'rating',
            'comment',
            'helpful_count',
            'verified_purchase',
            'seller_response',
            'seller_response_at',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    """Input for reviewing a delivered order."""

    order = serializers.UUIDField()
    rating = serializers.IntegerField(min_value=1, max_value=5)
    comment = serializers.CharField(max_length=1000, required=False, allow_blank=True)


class ReviewUpdateSerializer(serializers.Serializer):
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)
    comment = serializers.CharField(max_length=1000, required=False, allow_blank=True)


class ReviewFilterSerializer(serializers.Serializer):
    """Query parameters for the review list."""

    product = serializers.UUIDField(required=False)
    buyer = serializers.UUIDField(required=False)
    seller = serializers.UUIDField(required=False)
    rating = serializers.IntegerField(min_value=1, max_value=5, required=False)


class SellerResponseSerializer(serializers.Serializer):
    response = serializers.CharField(min_length=1, max_length=1000)


class HelpfulResponseSerializer(serializers.Serializer):
    helpful_count = serializers.IntegerField()


class RatingBreakdownSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    breakdown = serializers.DictField(child=serializers.IntegerField())
    total_reviews = serializers.IntegerField()

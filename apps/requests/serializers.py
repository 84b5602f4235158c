from rest_framework import serializers
from django.utils import timezone
from decimal import Decimal
from apps.accounts.serializers import UserPublicSerializer
from apps.listings.models import Category
from .models import BuyerRequest, Offer, RequestStatus, OfferStatus


class BuyerRequestSerializer(serializers.ModelSerializer):
    """Buyer request with its buyer and the number of live offers."""

    buyer = UserPublicSerializer(read_only=True)
    offer_count = serializers.SerializerMethodField()

    class Meta:
        model = BuyerRequest
        fields = [
            'id',
            'buyer',
            'title',
            'description',
            'category',
            'budget_min',
            'budget_max',
            'quantity',
            'deadline',
            'delivery_location',
            'status',
            'offer_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_offer_count(self, obj):
        count = getattr(obj, 'offer_count', None)
        if count is None:
            count = obj.offers.exclude(status=OfferStatus.WITHDRAWN).count()
        return count


class BuyerRequestWriteSerializer(serializers.Serializer):
    """Input for creating and updating requests."""

    title = serializers.CharField(min_length=5, max_length=200)
    description = serializers.CharField(min_length=20, max_length=2000)
    category = serializers.ChoiceField(choices=Category.choices)
    budget_min = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0'), required=False, allow_null=True
    )
    budget_max = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0'), required=False, allow_null=True
    )
    quantity = serializers.IntegerField(min_value=1, default=1)
    deadline = serializers.DateField(required=False, allow_null=True)
    delivery_location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=RequestStatus.choices, required=False)

    def validate_deadline(self, value):
        if value and value < timezone.localdate():
            raise serializers.ValidationError("Deadline cannot be in the past")
        return value

    def validate(self, attrs):
        budget_min = attrs.get('budget_min')
        budget_max = attrs.get('budget_max')
        if budget_min is not None and budget_max is not None and budget_max < budget_min:
            raise serializers.ValidationError({
                'budget_max': 'Maximum budget must be greater than or equal to minimum budget'
            })
        return attrs


class RequestFilterSerializer(serializers.Serializer):
    """Query parameters for browsing open requests."""

    category = serializers.ChoiceField(choices=Category.choices, required=False)
    search = serializers.CharField(required=False, allow_blank=True)
    exclude_own = serializers.BooleanField(required=False, default=False)


class RequestCountSerializer(serializers.Serializer):
    count = serializers.IntegerField()


class OfferSerializer(serializers.ModelSerializer):
    seller = UserPublicSerializer(read_only=True)
    request_title = serializers.CharField(source='request.title', read_only=True)
    total_price = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Offer
        fields = [
            'id',
            'seller',
            'request',
            'request_title',
            'price',
            'description',
            'delivery_timeline',
            'delivery_cost',
            'total_price',
            'payment_terms',
            'attachments',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class OfferWriteSerializer(serializers.Serializer):
    """Input for making or revising an offer."""

    request = serializers.UUIDField()
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    description = serializers.CharField(min_length=50, max_length=1000)
    delivery_timeline = serializers.CharField(max_length=100)
    delivery_cost = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal('0'), default=Decimal('0.00')
    )
    payment_terms = serializers.CharField(max_length=255, required=False, allow_blank=True)
    attachments = serializers.ListField(child=serializers.URLField(max_length=500), required=False)


class OfferFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OfferStatus.choices, required=False)


class AcceptOfferSerializer(serializers.Serializer):
    order_notes = serializers.CharField(max_length=500, required=False, allow_blank=True)


class RejectOfferSerializer(serializers.Serializer):
    reason = serializers.CharField(max_length=500, required=False, allow_blank=True)

from django.conf import settings
from rest_framework import serializers
from apps.accounts.serializers import UserPublicSerializer
from .models import Order, OrderStatus, PaymentMethod


class OrderSerializer(serializers.ModelSerializer):
    """Order detail for its buyer and seller."""

    buyer = UserPublicSerializer(read_only=True)
    seller = UserPublicSerializer(read_only=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    currency = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id',
            'buyer',
            'seller',
            'request',
            'listing',
            'offer',
            'title',
            'description',
            'quantity',
            'agreed_price',
            'total',
            'currency',
            'delivery_location',
            'delivery_phone',
            'delivery_notes',
            'order_notes',
            'payment_method',
            'status',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_currency(self, obj) -> str:
        return settings.MARKETPLACE_CURRENCY


class OrderListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    buyer_name = serializers.CharField(source='buyer.get_display_name', read_only=True)
    seller_name = serializers.CharField(source='seller.get_display_name', read_only=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id',
            'buyer',
            'buyer_name',
            'seller',
            'seller_name',
            'title',
            'quantity',
            'agreed_price',
            'total',
            'status',
            'created_at',
        ]
        read_only_fields = fields


class CheckoutSerializer(serializers.Serializer):
    """Input for buying a listing."""

    listing = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)
    delivery_location = serializers.CharField(max_length=255)
    delivery_phone = serializers.CharField(max_length=30)
    delivery_notes = serializers.CharField(max_length=500, required=False, allow_blank=True)
    order_notes = serializers.CharField(max_length=500, required=False, allow_blank=True)
    payment_method = serializers.ChoiceField(
        choices=PaymentMethod.choices,
        default=PaymentMethod.CASH_ON_DELIVERY,
    )


class OrderFilterSerializer(serializers.Serializer):
    """Query parameters for the order list."""

    role = serializers.ChoiceField(choices=['buyer', 'seller'], default='buyer')
    status = serializers.ChoiceField(choices=OrderStatus.choices, required=False)


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)

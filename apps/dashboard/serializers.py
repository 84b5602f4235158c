"""
Response serializers for dashboard app.

The dashboard endpoints take no input; these serializers format the
dictionaries built by DashboardQueries and document them in the schema.
"""

from rest_framework import serializers
from apps.orders.serializers import OrderListSerializer
from apps.requests.serializers import BuyerRequestSerializer, OfferSerializer


class OrdersByStatusSerializer(serializers.Serializer):
    pending = serializers.IntegerField()
    accepted = serializers.IntegerField()
    shipped = serializers.IntegerField()
    delivered = serializers.IntegerField()
    cancelled = serializers.IntegerField()


class BuyerStatsSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    open = serializers.IntegerField()
    closed = serializers.IntegerField()
    completed = serializers.IntegerField()
    offers_received = serializers.IntegerField()
    orders_by_status = OrdersByStatusSerializer()


class BuyerDashboardSerializer(serializers.Serializer):
    """Buyer dashboard: own requests, orders placed and counters."""
    requests = BuyerRequestSerializer(many=True)
    orders = OrderListSerializer(many=True)
    stats = BuyerStatsSerializer()


class SellerStatsSerializer(serializers.Serializer):
    total_offers = serializers.IntegerField()
    pending = serializers.IntegerField()
    accepted = serializers.IntegerField()
    rejected = serializers.IntegerField()
    completed = serializers.IntegerField(help_text='Delivered orders')
    active_listings = serializers.IntegerField()


class SellerDashboardSerializer(serializers.Serializer):
    """Seller dashboard: fresh open requests, own offers, orders received and counters."""
    requests = BuyerRequestSerializer(many=True)
    offers = OfferSerializer(many=True)
    orders = OrderListSerializer(many=True)
    stats = SellerStatsSerializer()


class HomeStatsSerializer(serializers.Serializer):
    users = serializers.IntegerField()
    products = serializers.IntegerField()
    requests = serializers.IntegerField()

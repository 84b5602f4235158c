"""
Dashboard Module
================

Read-only query methods that assemble the buyer dashboard, the seller
dashboard and the public home page counters from requests, offers, orders
and listings.

Classes:
    DashboardQueries: Static methods, one per dashboard.

Example:
    Building the seller dashboard::

        from apps.dashboard.dashboard import DashboardQueries

        data = DashboardQueries.seller_dashboard(user)
        print(f"{data['stats']['pending']} offers awaiting a decision")

Note:
    This module doesn't modify any data. Collections are returned as
    querysets or lists of model instances so views can serialize them with
    the owning app's serializers; stats are plain dictionaries.
"""

from django.db.models import Count, Q

from apps.accounts.models import User
from apps.listings.models import Product, ListingStatus
from apps.orders.models import Order, OrderStatus
from apps.requests.models import BuyerRequest, Offer, OfferStatus, RequestStatus

LATEST_OPEN_REQUESTS = 6
LATEST_OFFERS = 5


class DashboardQueries:
    """
    Aggregate queries for the dashboard endpoints.

    Methods:
        buyer_dashboard: Requests and orders of a buyer with counters.
        seller_dashboard: Fresh open requests, own offers and orders with counters.
        home_stats: Site-wide counters for the landing page.
    """

    @staticmethod
    def _order_counts(queryset):
        counts = {value: 0 for value in OrderStatus.values}
        for row in queryset.order_by().values('status').annotate(count=Count('id')):
            counts[row['status']] = row['count']
        return counts

    @staticmethod
    def buyer_dashboard(user):
        """
        Everything a buyer sees on their dashboard.

        Args:
            user (User): The buyer.

        Returns:
            dict: ``requests`` (all of the buyer's requests, newest first),
            ``orders`` (orders placed, newest first) and ``stats`` with
            request counts per status, offers received and orders by status.
        """
        requests = list(
            BuyerRequest.objects
            .filter(buyer=user)
            .annotate(offer_count=Count('offers', filter=~Q(offers__status=OfferStatus.WITHDRAWN)))
            .select_related('buyer', 'buyer__profile')
            .order_by('-created_at')
        )
        orders = (
            Order.objects
            .filter(buyer=user)
            .select_related('buyer', 'seller')
            .order_by('-created_at')
        )

        offers_received = (
            Offer.objects
            .filter(request__buyer=user)
            .exclude(status=OfferStatus.WITHDRAWN)
            .count()
        )

        stats = {
            'total': len(requests),
            'open': sum(1 for r in requests if r.status == RequestStatus.OPEN),
            'closed': sum(1 for r in requests if r.status == RequestStatus.CLOSED),
            'completed': sum(1 for r in requests if r.status == RequestStatus.COMPLETED),
            'offers_received': offers_received,
            'orders_by_status': DashboardQueries._order_counts(orders),
        }

        return {
            'requests': requests,
            'orders': list(orders),
            'stats': stats,
        }

    @staticmethod
    def seller_dashboard(user):
        """
        Everything a seller sees on their dashboard.

        Offer counters cover all of the seller's offers, not only the five
        listed.

        Args:
            user (User): The seller.

        Returns:
            dict: ``requests`` (latest open requests of other buyers),
            ``offers`` (latest own offers), ``orders`` (orders received) and
            ``stats``.
        """
        requests = (
            BuyerRequest.objects
            .filter(status=RequestStatus.OPEN)
            .exclude(buyer=user)
            .annotate(offer_count=Count('offers', filter=~Q(offers__status=OfferStatus.WITHDRAWN)))
            .select_related('buyer', 'buyer__profile')
            .order_by('-created_at')[:LATEST_OPEN_REQUESTS]
        )
        offers = (
            Offer.objects
            .filter(seller=user)
            .select_related('seller', 'seller__profile', 'request')
            .order_by('-created_at')[:LATEST_OFFERS]
        )
        orders = (
            Order.objects
            .filter(seller=user)
            .select_related('buyer', 'seller')
            .order_by('-created_at')
        )

        offer_counts = Offer.objects.filter(seller=user).aggregate(
            total=Count('id'),
            pending=Count('id', filter=Q(status=OfferStatus.PENDING)),
            accepted=Count('id', filter=Q(status=OfferStatus.ACCEPTED)),
            rejected=Count('id', filter=Q(status=OfferStatus.REJECTED)),
        )

        stats = {
            'total_offers': offer_counts['total'],
            'pending': offer_counts['pending'],
            'accepted': offer_counts['accepted'],
            'rejected': offer_counts['rejected'],
            'completed': orders.filter(status=OrderStatus.DELIVERED).count(),
            'active_listings': Product.objects.filter(
                seller=user, status=ListingStatus.ACTIVE
            ).count(),
        }

        return {
            'requests': list(requests),
            'offers': list(offers),
            'orders': list(orders),
            'stats': stats,
        }

    @staticmethod
    def home_stats():
        """
        Counters for the public landing page.

        Returns:
            dict: ``users`` (active accounts), ``products`` (active listings)
            and ``requests`` (open requests).
        """
        return {
            'users': User.objects.filter(is_active=True).count(),
            'products': Product.objects.filter(status=ListingStatus.ACTIVE).count(),
            'requests': BuyerRequest.objects.filter(status=RequestStatus.OPEN).count(),
        }

"""Listing search and filtering service."""

from django.db.models import Q, QuerySet
from decimal import Decimal
from uuid import UUID
from typing import Optional

from ..models import Product


SORT_ORDERINGS = {
    'newest': ['-created_at'],
    'oldest': ['created_at'],
    'price_asc': ['price', '-created_at'],
    'price_desc': ['-price', '-created_at'],
    'popular': ['-views', '-created_at'],
}


def search_listings(
    *,
    seller_id: Optional[UUID] = None,
    category: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    sort: str = 'newest',
    limit: Optional[int] = None
) -> QuerySet[Product]:
    """
    Search and filter listings.

    Args:
        seller_id: Only listings of this seller
        category: Exact category
        status: Listing status (None means any)
        search: Case-insensitive term matched in title and description
        min_price: Inclusive lower price bound
        max_price: Inclusive upper price bound
        sort: newest, oldest, price_asc, price_desc or popular
        limit: Cap on the number of results

    Returns:
        Filtered QuerySet of Product
    """
    queryset = Product.objects.select_related('seller', 'seller__profile')

    if seller_id:
        queryset = queryset.filter(seller_id=seller_id)

    if category:
        queryset = queryset.filter(category=category)

    if status:
        queryset = queryset.filter(status=status)

    if search:
        queryset = queryset.filter(
            Q(title__icontains=search) |
            Q(description__icontains=search)
        )

    if min_price is not None:
        queryset = queryset.filter(price__gte=min_price)

    if max_price is not None:
        queryset = queryset.filter(price__lte=max_price)

    queryset = queryset.order_by(*SORT_ORDERINGS.get(sort, SORT_ORDERINGS['newest']))

    if limit:
        queryset = queryset[:limit]

    return queryset

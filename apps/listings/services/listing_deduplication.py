"""Duplicate listing detection using fuzzy matching."""

from typing import List, Tuple, Optional
from uuid import UUID
import re

from fuzzywuzzy import fuzz

from apps.accounts.models import User
from ..models import Product, ListingStatus


# Thresholds for fuzzy matching
EXACT_MATCH_THRESHOLD = 100
HIGH_SIMILARITY_THRESHOLD = 90
MEDIUM_SIMILARITY_THRESHOLD = 80


def normalize_text(text: str) -> str:
    """
    Normalize text for comparison.

    Args:
        text: Text to normalize

    Returns:
        Normalized lowercase text
    """
    text = text.lower().strip()
    text = re.sub(r'\s+', ' ', text)
    text = re.sub(r'[^\w\s-]', '', text)
    return text


def find_similar_listings(
    *,
    seller: User,
    title: str,
    threshold: int = MEDIUM_SIMILARITY_THRESHOLD,
    exclude_id: Optional[UUID] = None
) -> List[Tuple[Product, int, str]]:
    """
    Find the seller's active listings whose title looks like ``title``.

    Sellers are warned before publishing the same product twice.

    Args:
        seller: Seller whose listings are checked
        title: Proposed title
        threshold: Minimum similarity score (0-100)
        exclude_id: Listing to ignore (the one being edited)

    Returns:
        List of (listing, similarity_score, match_type) tuples, best first.
        match_type is 'exact' or 'fuzzy'.
    """
    title_norm = normalize_text(title)

    listings = Product.objects.filter(
        seller=seller,
        status=ListingStatus.ACTIVE,
    )
    if exclude_id:
        listings = listings.exclude(id=exclude_id)

    candidates = []
    for listing in listings:
        if listing.title_normalized == title_norm:
            candidates.append((listing, EXACT_MATCH_THRESHOLD, 'exact'))
            continue

        similarity = fuzz.ratio(title_norm, listing.title_normalized)
        if similarity >= threshold:
            candidates.append((listing, similarity, 'fuzzy'))

    candidates.sort(key=lambda x: x[1], reverse=True)

    return candidates[:10]

"""Services for listings business logic."""

from .exceptions import (
    ListingsServiceError,
    ListingNotFoundError,
    NotASellerError,
    UnauthorizedListingActionError,
    QuestionNotFoundError,
    UnauthorizedQuestionActionError,
    InvalidQuestionError,
)
from .listing_management import (
    create_listing,
    update_listing,
    delete_listing,
    get_listing_by_id,
    record_listing_view,
    get_listings_count,
)
from .listing_search import (
    search_listings,
    SORT_ORDERINGS,
)
from .listing_deduplication import (
    normalize_text,
    find_similar_listings,
    EXACT_MATCH_THRESHOLD,
    HIGH_SIMILARITY_THRESHOLD,
    MEDIUM_SIMILARITY_THRESHOLD,
)
from .questions import (
    get_questions,
    create_question,
    create_seller_answer,
    delete_question,
)

__all__ = [
    # Exceptions
    'ListingsServiceError',
    'ListingNotFoundError',
    'NotASellerError',
    'UnauthorizedListingActionError',
    'QuestionNotFoundError',
    'UnauthorizedQuestionActionError',
    'InvalidQuestionError',
    # Listing Management
    'create_listing',
    'update_listing',
    'delete_listing',
    'get_listing_by_id',
    'record_listing_view',
    'get_listings_count',
    # Listing Search
    'search_listings',
    'SORT_ORDERINGS',
    # Listing Deduplication
    'normalize_text',
    'find_similar_listings',
    'EXACT_MATCH_THRESHOLD',
    'HIGH_SIMILARITY_THRESHOLD',
    'MEDIUM_SIMILARITY_THRESHOLD',
    # Q&A
    'get_questions',
    'create_question',
    'create_seller_answer',
    'delete_question',
]

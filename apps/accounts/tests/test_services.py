"""Service layer tests for accounts app."""

import pytest
from decimal import Decimal

from apps.accounts.models import User, Profile, UserType
from apps.listings.models import Product, Category, ListingStatus
from apps.requests.models import BuyerRequest, Offer, OfferStatus, RequestStatus
from apps.accounts.services import (
    register_user,
    authenticate_user,
    delete_user_account,
    get_profile,
    update_profile,
)
from apps.accounts.services.exceptions import (
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PasswordConfirmationError,
    ProfileNotFoundError,
)


@pytest.mark.django_db
class TestRegistrationService:

    def test_register_creates_profile(self):
        user = register_user(
            email='svc@example.com',
            password='SecurePass123!',
            user_type='buyer',
            first_name='Sara',
        )

        profile = Profile.objects.get(user=user)
        assert profile.is_buyer is True
        assert profile.is_seller is False
        assert profile.rating == Decimal('0.00')

    def test_register_duplicate_email(self, user):
        with pytest.raises(UserRegistrationError):
            register_user(email=user.email, password='SecurePass123!')


@pytest.mark.django_db
class TestAuthenticationService:

    def test_authenticate_is_case_insensitive(self, user):
        authenticated = authenticate_user(email='TestUser@Example.com', password='TestPass123!')
        assert authenticated == user

    def test_authenticate_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')

    def test_authenticate_inactive(self, user_inactive):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=user_inactive.email, password='TestPass123!')

    def test_authenticate_creates_missing_profile(self, db):
        admin = User.objects.create_superuser(email='admin@example.com', password='AdminPass123!')
        assert not Profile.objects.filter(user=admin).exists()

        authenticate_user(email='admin@example.com', password='AdminPass123!')

        profile = Profile.objects.get(user=admin)
        assert profile.user_type == UserType.BOTH

    def test_authenticate_keeps_existing_profile(self, other_user):
        authenticate_user(email=other_user.email, password='OtherPass123!')

        assert Profile.objects.get(user=other_user).user_type == UserType.SELLER


@pytest.mark.django_db
class TestProfileService:

    def test_get_profile(self, user):
        assert get_profile(user_id=user.id).first_name == 'Test'

    def test_get_profile_missing(self, db):
        import uuid
        with pytest.raises(ProfileNotFoundError):
            get_profile(user_id=uuid.uuid4())

    def test_update_ignores_aggregates(self, user):
        profile = update_profile(user_id=user.id, data={
            'last_name': 'Changed',
            'rating': Decimal('4.50'),
            'total_reviews': 10,
        })

        assert profile.last_name == 'Changed'
        assert profile.rating == Decimal('0.00')
        assert profile.total_reviews == 0

    def test_update_null_bio_clears_it(self, other_user):
        profile = update_profile(user_id=other_user.id, data={'bio': None})
        assert profile.bio == ''


@pytest.mark.django_db
class TestDeleteAccountService:

    def test_delete_anonymizes(self, user):
        delete_user_account(user_id=user.id, password='TestPass123!')

        user.refresh_from_db()
        assert user.is_active is False
        assert user.has_usable_password() is False
        assert Profile.objects.get(user=user).first_name == ''

    def test_delete_requires_password(self, user):
        with pytest.raises(PasswordConfirmationError):
            delete_user_account(user_id=user.id, password='wrong')

    def test_delete_takes_user_off_the_market(self, user, other_user):
        open_request = BuyerRequest.objects.create(
            buyer=user,
            title='Need a conference table',
            description='Conference table for twelve people, delivered to Kazanchis.',
            category=Category.FURNITURE,
        )
        completed_request = BuyerRequest.objects.create(
            buyer=user,
            title='Office chairs',
            description='Ten office chairs, already delivered last month.',
            category=Category.FURNITURE,
            status=RequestStatus.COMPLETED,
        )
        their_request = BuyerRequest.objects.create(
            buyer=other_user,
            title='Printer paper',
            description='Fifty reams of A4 paper for the main office.',
            category=Category.OFFICE_SUPPLIES,
        )
        pending_offer = Offer.objects.create(
            seller=user,
            request=their_request,
            price=Decimal('9500.00'),
            description='Fifty reams of 80gsm A4 paper, delivered within the week.',
            delivery_timeline='5 days',
        )
        listing = Product.objects.create(
            seller=user,
            title='Desk Lamp',
            description='LED desk lamp with adjustable arm and warm light.',
            category=Category.ELECTRONICS,
            price=Decimal('1200.00'),
            inventory_quantity=4,
        )
        other_listing = Product.objects.create(
            seller=other_user,
            title='Whiteboard Markers',
            description='Box of twelve whiteboard markers in four colours.',
            category=Category.OFFICE_SUPPLIES,
            price=Decimal('350.00'),
            inventory_quantity=20,
        )

        delete_user_account(user_id=user.id, password='TestPass123!')

        for obj in (open_request, completed_request, their_request, pending_offer, listing, other_listing):
            obj.refresh_from_db()
        assert open_request.status == RequestStatus.CLOSED
        assert completed_request.status == RequestStatus.COMPLETED
        assert their_request.status == RequestStatus.OPEN
        assert pending_offer.status == OfferStatus.WITHDRAWN
        assert listing.status == ListingStatus.INACTIVE
        assert other_listing.status == ListingStatus.ACTIVE

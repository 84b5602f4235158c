from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal
import uuid


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Marketplace account. Email is the login name."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    display_name = models.CharField(max_length=100, blank=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)
    deleted_at = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='users_created_idx'),
        ]

    def __str__(self):
        return self.email

    def get_display_name(self):
        """Return display name, profile full name or email prefix."""
        if self.display_name:
            return self.display_name
        profile = getattr(self, 'profile', None)
        if profile and profile.full_name:
            return profile.full_name
        return self.email.split('@')[0]

    def anonymize(self):
        """Scrub personal data and deactivate the account."""
        self.email = f"deleted_{self.id}@anonymized.local"
        self.display_name = "Deleted User"
        self.is_active = False
        self.deleted_at = timezone.now()
        self.set_unusable_password()
        self.save()

        Profile.objects.filter(user=self).update(
            first_name='',
            last_name='',
            avatar_url='',
            bio='',
            phone_number='',
        )


class UserType(models.TextChoices):
    BUYER = 'buyer', 'Buyer'
    SELLER = 'seller', 'Seller'
    BOTH = 'both', 'Buyer & Seller'


class Profile(models.Model):
    """Public marketplace identity of a user (one per account)."""

    user = models.OneToOneField(
        'accounts.User',
        on_delete=models.CASCADE,
        primary_key=True,
        related_name='profile',
    )
    user_type = models.CharField(max_length=10, choices=UserType.choices, default=UserType.BOTH)
    first_name = models.CharField(max_length=50, blank=True)
    last_name = models.CharField(max_length=50, blank=True)
    avatar_url = models.URLField(max_length=500, blank=True)
    bio = models.TextField(max_length=500, blank=True)
    phone_number = models.CharField(max_length=30, blank=True)
    rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('5.00'))],
    )
    total_reviews = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'profiles'
        indexes = [
            models.Index(fields=['user_type'], name='profiles_user_type_idx'),
        ]

    def __str__(self):
        return f"{self.full_name or self.user.email} ({self.user_type})"

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_buyer(self):
        return self.user_type in (UserType.BUYER, UserType.BOTH)

    @property
    def is_seller(self):
        return self.user_type in (UserType.SELLER, UserType.BOTH)

    def update_aggregate_rating(self):
        """Recompute seller rating from reviews on the seller's listings."""
        from django.db.models import Avg, Count
        from apps.reviews.models import Review

        aggregates = Review.objects.filter(product__seller_id=self.user_id).aggregate(
            avg=Avg('rating'),
            count=Count('id'),
        )
        avg = aggregates['avg']
        self.rating = Decimal(str(round(avg, 2))) if avg is not None else Decimal('0.00')
        self.total_reviews = aggregates['count']
        self.save(update_fields=['rating', 'total_reviews', 'updated_at'])

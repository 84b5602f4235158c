from django.db import models
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid

from apps.listings.models import Category


class RequestStatus(models.TextChoices):
    OPEN = 'open', 'Open'
    CLOSED = 'closed', 'Closed'
    COMPLETED = 'completed', 'Completed'


class OfferStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    REJECTED = 'rejected', 'Rejected'
    WITHDRAWN = 'withdrawn', 'Withdrawn'


class BuyerRequest(models.Model):
    """Something a buyer needs, posted for sellers to make offers on."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='buyer_requests')
    title = models.CharField(max_length=200)
    description = models.TextField(max_length=2000)
    category = models.CharField(max_length=50, choices=Category.choices, db_index=True)
    budget_min = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
    )
    budget_max = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0'))],
    )
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    deadline = models.DateField(null=True, blank=True)
    delivery_location = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=20, choices=RequestStatus.choices, default=RequestStatus.OPEN)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'requests'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='requests_status_created_idx'),
            models.Index(fields=['buyer', 'status'], name='requests_buyer_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def clean(self):
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_max < self.budget_min
        ):
            raise ValidationError({'budget_max': 'Maximum budget must be greater than or equal to minimum budget'})

    @property
    def is_open(self):
        return self.status == RequestStatus.OPEN


class Offer(models.Model):
    """A seller's priced answer to a buyer request."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    seller = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='offers')
    request = models.ForeignKey(BuyerRequest, on_delete=models.CASCADE, related_name='offers')
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    description = models.TextField(max_length=1000)
    delivery_timeline = models.CharField(max_length=100)
    delivery_cost = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0'))],
    )
    payment_terms = models.CharField(max_length=255, blank=True)
    attachments = models.JSONField(default=list, blank=True)
    status = models.CharField(max_length=20, choices=OfferStatus.choices, default=OfferStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'offers'
        constraints = [
            models.UniqueConstraint(fields=['seller', 'request'], name='unique_offer_per_seller_request'),
        ]
        indexes = [
            models.Index(fields=['request', 'status'], name='offers_request_status_idx'),
            models.Index(fields=['seller', 'created_at'], name='offers_seller_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"Offer {self.price} on {self.request_id} by {self.seller_id}"

    @property
    def is_pending(self):
        return self.status == OfferStatus.PENDING

    @property
    def total_price(self):
        return self.price + self.delivery_cost

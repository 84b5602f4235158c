from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class OrderStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    SHIPPED = 'shipped', 'Shipped'
    DELIVERED = 'delivered', 'Delivered'
    CANCELLED = 'cancelled', 'Cancelled'


class PaymentMethod(models.TextChoices):
    CASH_ON_DELIVERY = 'cash_on_delivery', 'Cash on Delivery'
    BANK_TRANSFER = 'bank_transfer', 'Bank Transfer'
    MOBILE_MONEY = 'mobile_money', 'Mobile Money'


# Seller moves an order forward along this sequence.
NEXT_STATUS = {
    OrderStatus.PENDING: OrderStatus.ACCEPTED,
    OrderStatus.ACCEPTED: OrderStatus.SHIPPED,
    OrderStatus.SHIPPED: OrderStatus.DELIVERED,
}

CANCELLABLE_STATUSES = (OrderStatus.PENDING, OrderStatus.ACCEPTED)


class Order(models.Model):
    """
    Agreement between a buyer and a seller.

    Created either when a buyer accepts an offer on a request or when a
    buyer checks out a listing. Title, description and price are copied so
    the order survives later edits of its source.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    buyer = models.ForeignKey('accounts.User', on_delete=models.PROTECT, related_name='buyer_orders')
    seller = models.ForeignKey('accounts.User', on_delete=models.PROTECT, related_name='seller_orders')
    request = models.ForeignKey(
        'requests.BuyerRequest',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
    )
    listing = models.ForeignKey(
        'listings.Product',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders',
    )
    offer = models.OneToOneField(
        'requests.Offer',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order',
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    agreed_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.01'))],
    )
    delivery_location = models.CharField(max_length=255, blank=True)
    delivery_phone = models.CharField(max_length=30, blank=True)
    delivery_notes = models.TextField(max_length=500, blank=True)
    order_notes = models.TextField(max_length=500, blank=True)
    payment_method = models.CharField(max_length=30, choices=PaymentMethod.choices, blank=True)
    status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        indexes = [
            models.Index(fields=['buyer', 'created_at'], name='orders_buyer_created_idx'),
            models.Index(fields=['seller', 'created_at'], name='orders_seller_created_idx'),
            models.Index(fields=['status'], name='orders_status_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.get_status_display()})"

    @property
    def total(self):
        return self.agreed_price * self.quantity

    def is_participant(self, user):
        return user.id in (self.buyer_id, self.seller_id)

    def can_transition_to(self, new_status):
        """Whether ``new_status`` is a legal next step from the current status."""
        if new_status == OrderStatus.CANCELLED:
            return self.status in CANCELLABLE_STATUSES
        return NEXT_STATUS.get(self.status) == new_status

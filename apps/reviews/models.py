from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
import uuid


class Review(models.Model):
    """A buyer's rating of a product, tied to the delivered order it came from."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey('listings.Product', on_delete=models.CASCADE, related_name='reviews')
    buyer = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    order = models.OneToOneField('orders.Order', on_delete=models.CASCADE, related_name='review')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(max_length=1000, blank=True)
    helpful_count = models.PositiveIntegerField(default=0)
    verified_purchase = models.BooleanField(default=False)
    seller_response = models.TextField(max_length=1000, blank=True)
    seller_response_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        indexes = [
            models.Index(fields=['product', 'created_at'], name='reviews_product_created_idx'),
            models.Index(fields=['product', 'rating'], name='reviews_product_rating_idx'),
            models.Index(fields=['buyer', 'created_at'], name='reviews_buyer_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.buyer.get_display_name()} - {self.product.title} ({self.rating}★)"

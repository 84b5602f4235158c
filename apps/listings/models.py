from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator
from decimal import Decimal
import uuid
import re


class Category(models.TextChoices):
    ELECTRONICS = 'Electronics', 'Electronics'
    FURNITURE = 'Furniture', 'Furniture'
    CLOTHING = 'Clothing', 'Clothing'
    BOOKS = 'Books', 'Books'
    HOME_GARDEN = 'Home & Garden', 'Home & Garden'
    SPORTS_OUTDOORS = 'Sports & Outdoors', 'Sports & Outdoors'
    TOYS_GAMES = 'Toys & Games', 'Toys & Games'
    SERVICES = 'Services', 'Services'
    INDUSTRIAL_EQUIPMENT = 'Industrial Equipment', 'Industrial Equipment'
    OFFICE_SUPPLIES = 'Office Supplies', 'Office Supplies'
    FOOD_BEVERAGES = 'Food & Beverages', 'Food & Beverages'
    HEALTH_BEAUTY = 'Health & Beauty', 'Health & Beauty'
    AUTOMOTIVE = 'Automotive', 'Automotive'
    CONSTRUCTION_MATERIALS = 'Construction Materials', 'Construction Materials'
    OTHER = 'Other', 'Other'


class ListingStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    INACTIVE = 'inactive', 'Inactive'
    SOLD = 'sold', 'Sold'


class Product(models.Model):
    """Item a seller publishes for direct sale."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    seller = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='listings')
    title = models.CharField(max_length=200, db_index=True)
    title_normalized = models.CharField(max_length=200, db_index=True, editable=False)
    description = models.TextField(max_length=2000)
    category = models.CharField(max_length=50, choices=Category.choices, db_index=True)
    price = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    status = models.CharField(max_length=20, choices=ListingStatus.choices, default=ListingStatus.ACTIVE)
    image_url = models.URLField(max_length=500, blank=True)
    images = models.JSONField(default=list, blank=True)
    inventory_quantity = models.PositiveIntegerField(default=0)
    specifications = models.JSONField(default=dict, blank=True)
    views = models.PositiveIntegerField(default=0)
    average_rating = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00')), MaxValueValidator(Decimal('5.00'))],
    )
    review_count = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'listings'
        indexes = [
            models.Index(fields=['status', 'created_at'], name='listings_status_created_idx'),
            models.Index(fields=['seller', 'status'], name='listings_seller_status_idx'),
            models.Index(fields=['category', 'status'], name='listings_category_status_idx'),
            models.Index(fields=['price'], name='listings_price_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        self.title_normalized = self._normalize_string(self.title)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'title' in update_fields:
            kwargs['update_fields'] = set(update_fields) | {'title_normalized'}
        super().save(*args, **kwargs)

    @staticmethod
    def _normalize_string(text):
        text = text.lower().strip()
        text = re.sub(r'\s+', ' ', text)
        text = re.sub(r'[^\w\s-]', '', text)
        return text

    @property
    def is_available(self):
        return self.status == ListingStatus.ACTIVE and self.inventory_quantity > 0

    def update_aggregate_rating(self):
        from django.db.models import Avg, Count
        aggregates = self.reviews.aggregate(avg=Avg('rating'), count=Count('id'))
        avg = aggregates['avg']
        self.average_rating = Decimal(str(round(avg, 2))) if avg is not None else Decimal('0.00')
        self.review_count = aggregates['count']
        self.save(update_fields=['average_rating', 'review_count', 'updated_at'])


class ProductQuestion(models.Model):
    """Public question on a listing, or the seller's answer to one."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='questions')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='product_questions')
    content = models.TextField(max_length=500)
    is_seller_answer = models.BooleanField(default=False)
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='answers',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'product_qa'
        indexes = [
            models.Index(fields=['product', 'parent', 'created_at'], name='product_qa_thread_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        kind = 'Answer' if self.is_seller_answer else 'Question'
        return f"{kind} on {self.product_id}: {self.content[:40]}"

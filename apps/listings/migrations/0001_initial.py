from decimal import Decimal
from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import uuid


CATEGORY_CHOICES = [
    ('Electronics', 'Electronics'),
    ('Furniture', 'Furniture'),
    ('Clothing', 'Clothing'),
    ('Books', 'Books'),
    ('Home & Garden', 'Home & Garden'),
    ('Sports & Outdoors', 'Sports & Outdoors'),
    ('Toys & Games', 'Toys & Games'),
    ('Services', 'Services'),
    ('Industrial Equipment', 'Industrial Equipment'),
    ('Office Supplies', 'Office Supplies'),
    ('Food & Beverages', 'Food & Beverages'),
    ('Health & Beauty', 'Health & Beauty'),
    ('Automotive', 'Automotive'),
    ('Construction Materials', 'Construction Materials'),
    ('Other', 'Other'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(db_index=True, max_length=200)),
                ('title_normalized', models.CharField(db_index=True, editable=False, max_length=200)),
                ('description', models.TextField(max_length=2000)),
                ('category', models.CharField(choices=CATEGORY_CHOICES, db_index=True, max_length=50)),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('status', models.CharField(choices=[('active', 'Active'), ('inactive', 'Inactive'), ('sold', 'Sold')], default='active', max_length=20)),
                ('image_url', models.URLField(blank=True, max_length=500)),
                ('images', models.JSONField(blank=True, default=list)),
                ('inventory_quantity', models.PositiveIntegerField(default=0)),
                ('specifications', models.JSONField(blank=True, default=dict)),
                ('views', models.PositiveIntegerField(default=0)),
                ('average_rating', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=3, validators=[django.core.validators.MinValueValidator(Decimal('0.00')), django.core.validators.MaxValueValidator(Decimal('5.00'))])),
                ('review_count', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('seller', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='listings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'listings',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'created_at'], name='listings_status_created_idx'),
                    models.Index(fields=['seller', 'status'], name='listings_seller_status_idx'),
                    models.Index(fields=['category', 'status'], name='listings_category_status_idx'),
                    models.Index(fields=['price'], name='listings_price_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ProductQuestion',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('content', models.TextField(max_length=500)),
                ('is_seller_answer', models.BooleanField(default=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_questions', to=settings.AUTH_USER_MODEL)),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='answers', to='listings.productquestion')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='questions', to='listings.product')),
            ],
            options={
                'db_table': 'product_qa',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['product', 'parent', 'created_at'], name='product_qa_thread_idx'),
                ],
            },
        ),
    ]

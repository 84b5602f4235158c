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
            name='BuyerRequest',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(max_length=2000)),
                ('category', models.CharField(choices=CATEGORY_CHOICES, db_index=True, max_length=50)),
                ('budget_min', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('budget_max', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('quantity', models.PositiveIntegerField(default=1, validators=[django.core.validators.MinValueValidator(1)])),
                ('deadline', models.DateField(blank=True, null=True)),
                ('delivery_location', models.CharField(blank=True, max_length=255)),
                ('status', models.CharField(choices=[('open', 'Open'), ('closed', 'Closed'), ('completed', 'Completed')], default='open', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('buyer', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='buyer_requests', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'requests',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['status', 'created_at'], name='requests_status_created_idx'),
                    models.Index(fields=['buyer', 'status'], name='requests_buyer_status_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Offer',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('description', models.TextField(max_length=1000)),
                ('delivery_timeline', models.CharField(max_length=100)),
                ('delivery_cost', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('payment_terms', models.CharField(blank=True, max_length=255)),
                ('attachments', models.JSONField(blank=True, default=list)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('accepted', 'Accepted'), ('rejected', 'Rejected'), ('withdrawn', 'Withdrawn')], default='pending', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('request', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='offers', to='requests.buyerrequest')),
                ('seller', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='offers', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'offers',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['request', 'status'], name='offers_request_status_idx'),
                    models.Index(fields=['seller', 'created_at'], name='offers_seller_created_idx'),
                ],
                'constraints': [
                    models.UniqueConstraint(fields=('seller', 'request'), name='unique_offer_per_seller_request'),
                ],
            },
        ),
    ]

"""
Management command to print row counts of the marketplace tables.

Usage:
    python manage.py check_tables
"""

from django.core.management.base import BaseCommand

from apps.accounts.models import User, Profile
from apps.listings.models import Product, ProductQuestion
from apps.messaging.models import Conversation, Message
from apps.notifications.models import Notification
from apps.orders.models import Order
from apps.requests.models import BuyerRequest, Offer
from apps.reviews.models import Review

MODELS = [
    User,
    Profile,
    Product,
    ProductQuestion,
    BuyerRequest,
    Offer,
    Order,
    Conversation,
    Message,
    Review,
    Notification,
]


class Command(BaseCommand):
    help = 'Print the number of rows in each marketplace table'

    def handle(self, *args, **options):
        width = max(len(model._meta.db_table) for model in MODELS)
        for model in MODELS:
            count = model.objects.count()
            line = f'{model._meta.db_table.ljust(width)}  {count}'
            if count:
                self.stdout.write(line)
            else:
                self.stdout.write(self.style.WARNING(line))

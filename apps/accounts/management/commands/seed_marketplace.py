"""
Management command to seed the marketplace with demo data.

Usage:
    python manage.py seed_marketplace [--clear]

This creates:
- 1 admin and 5 users (2 buyers, 2 sellers, 1 both) with profiles
- 8 listings across categories
- 4 buyer requests with offers
- Orders from an accepted offer and from listing checkouts
- Conversations with messages
- Reviews on delivered orders

Orders, offers and reviews go through the service layer so inventory,
request status and ratings stay consistent.
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal
from datetime import date, timedelta

from apps.accounts.models import User, Profile, UserType
from apps.listings.models import Product, ProductQuestion, Category
from apps.messaging.models import Conversation, Message
from apps.messaging.services import get_or_create_conversation, send_message
from apps.notifications.models import Notification
from apps.orders.models import Order, OrderStatus, PaymentMethod
from apps.orders.services import OrderService
from apps.requests.models import BuyerRequest, Offer
from apps.requests.services import create_request, create_offer, accept_offer, reject_offer
from apps.reviews.models import Review
from apps.reviews.services import create_review, add_seller_response

DEMO_PASSWORD = 'password123'

USERS = [
    ('abebe@example.com', 'Abebe Kebede', UserType.BUYER, 'Abebe', 'Kebede'),
    ('hana@example.com', 'Hana Girma', UserType.BUYER, 'Hana', 'Girma'),
    ('merkato@example.com', 'Merkato Office Supply', UserType.SELLER, 'Tigist', 'Alemu'),
    ('bole@example.com', 'Bole Electronics', UserType.SELLER, 'Dawit', 'Haile'),
    ('selam@example.com', 'Selam Trading', UserType.BOTH, 'Selam', 'Tadesse'),
]

LISTINGS = [
    # (seller email, title, category, price, inventory)
    ('merkato@example.com', 'Ergonomic Office Chair', Category.FURNITURE, '4500.00', 12),
    ('merkato@example.com', 'A4 Printer Paper (5 reams)', Category.OFFICE_SUPPLIES, '950.00', 80),
    ('merkato@example.com', 'Steel Filing Cabinet', Category.FURNITURE, '6200.00', 4),
    ('bole@example.com', 'HP LaserJet Pro Printer', Category.ELECTRONICS, '18500.00', 5),
    ('bole@example.com', 'Wireless Keyboard and Mouse', Category.ELECTRONICS, '1350.00', 30),
    ('bole@example.com', '24 Inch LED Monitor', Category.ELECTRONICS, '9800.00', 8),
    ('selam@example.com', 'Ethiopian Coffee Beans 1kg', Category.FOOD_BEVERAGES, '700.00', 40),
    ('selam@example.com', 'Safety Helmets (box of 10)', Category.CONSTRUCTION_MATERIALS, '3600.00', 6),
]

REQUESTS = [
    # (buyer email, title, category, budget_min, budget_max, quantity)
    ('abebe@example.com', 'Need 20 office desks', Category.FURNITURE, '60000', '90000', 20),
    ('abebe@example.com', 'Laptops for new staff', Category.ELECTRONICS, '150000', '220000', 5),
    ('hana@example.com', 'Catering for a 50 person event', Category.SERVICES, '15000', '25000', 1),
    ('selam@example.com', 'Bulk cement delivery', Category.CONSTRUCTION_MATERIALS, '40000', '55000', 100),
]


class Command(BaseCommand):
    help = 'Seed the marketplace with demo users, listings, requests, offers, orders, messages and reviews'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete existing marketplace data before seeding',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Seeding marketplace...')

        users = self.create_users()
        listings = self.create_listings(users)
        requests = self.create_requests(users)
        self.create_offers_and_orders(users, requests)
        self.create_listing_orders(users, listings)
        self.create_conversations(users, listings)
        self.create_questions(users, listings)

        self.stdout.write(self.style.SUCCESS('Marketplace seeded successfully!'))
        self.stdout.write('')
        self.stdout.write('Demo accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        for email, display_name, user_type, _, _ in USERS:
            self.stdout.write(f'  {email} / {DEMO_PASSWORD} ({user_type})')

    def clear_data(self):
        """Delete all marketplace data, children before parents."""
        Review.objects.all().delete()
        Message.objects.all().delete()
        Conversation.objects.all().delete()
        Order.objects.all().delete()
        Offer.objects.all().delete()
        BuyerRequest.objects.all().delete()
        ProductQuestion.objects.all().delete()
        Product.objects.all().delete()
        Notification.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'display_name': 'Admin User',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {}
        for index, (email, display_name, user_type, first_name, last_name) in enumerate(USERS, start=1):
            user, _ = User.objects.get_or_create(
                email=email,
                defaults={'display_name': display_name}
            )
            user.set_password(DEMO_PASSWORD)
            user.save()
            Profile.objects.update_or_create(
                user=user,
                defaults={
                    'user_type': user_type,
                    'first_name': first_name,
                    'last_name': last_name,
                    'phone_number': f'+25191100000{index}',
                }
            )
            users[email] = user
        return users

    def create_listings(self, users):
        self.stdout.write('  Creating listings...')

        listings = {}
        for seller_email, title, category, price, inventory in LISTINGS:
            listing, _ = Product.objects.get_or_create(
                seller=users[seller_email],
                title=title,
                defaults={
                    'description': f'{title}. New, with receipt and local warranty. Delivery within Addis Ababa.',
                    'category': category,
                    'price': Decimal(price),
                    'inventory_quantity': inventory,
                    'specifications': {'condition': 'new'},
                }
            )
            listings[title] = listing
        return listings

    def create_requests(self, users):
        self.stdout.write('  Creating buyer requests...')

        requests = []
        for buyer_email, title, category, budget_min, budget_max, quantity in REQUESTS:
            existing = BuyerRequest.objects.filter(buyer=users[buyer_email], title=title).first()
            if existing:
                requests.append(existing)
                continue
            requests.append(create_request(
                buyer=users[buyer_email],
                title=title,
                description=f'{title}. Please include delivery cost and warranty terms in your offer.',
                category=category,
                budget_min=Decimal(budget_min),
                budget_max=Decimal(budget_max),
                quantity=quantity,
                deadline=date.today() + timedelta(days=21),
                delivery_location='Addis Ababa',
            ))
        return requests

    def create_offers_and_orders(self, users, requests):
        """Offers on every open request; the first request gets an accepted offer and a delivered order."""
        self.stdout.write('  Creating offers and orders...')

        merkato = users['merkato@example.com']
        bole = users['bole@example.com']
        selam = users['selam@example.com']

        desks, laptops, catering, cement = requests
        if not desks.is_open:
            self.stdout.write('    Requests already decided, skipping offers')
            return

        desk_offer, _ = create_offer(
            seller=merkato,
            request_id=desks.id,
            price=Decimal('78000.00'),
            description='Twenty melamine office desks 140x70cm with cable management, assembled on site.',
            delivery_timeline='10 days',
            delivery_cost=Decimal('2500.00'),
            payment_terms='50% upfront, 50% on delivery',
        )
        create_offer(
            seller=selam,
            request_id=desks.id,
            price=Decimal('72000.00'),
            description='Twenty solid wood office desks, locally made, delivery and assembly included.',
            delivery_timeline='3 weeks',
        )
        laptop_offer, _ = create_offer(
            seller=bole,
            request_id=laptops.id,
            price=Decimal('205000.00'),
            description='Five business laptops, Core i5, 16GB RAM, 512GB SSD, one year warranty each.',
            delivery_timeline='5 days',
        )
        create_offer(
            seller=selam,
            request_id=catering.id,
            price=Decimal('21000.00'),
            description='Traditional Ethiopian buffet for fifty guests including coffee ceremony and service staff.',
            delivery_timeline='On the event day',
        )

        order = accept_offer(offer_id=desk_offer.id, user=users['abebe@example.com'], order_notes='Deliver to the 3rd floor')
        for next_status in (OrderStatus.ACCEPTED, OrderStatus.SHIPPED, OrderStatus.DELIVERED):
            OrderService.update_order_status(order.id, merkato, next_status)

        reject_offer(offer_id=laptop_offer.id, user=users['abebe@example.com'], reason='Over our budget')

    def create_listing_orders(self, users, listings):
        """Checkouts at different stages; delivered ones get reviewed."""
        self.stdout.write('  Creating listing orders and reviews...')

        abebe = users['abebe@example.com']
        hana = users['hana@example.com']

        if Order.objects.filter(listing__isnull=False).exists():
            self.stdout.write('    Listing orders already exist, skipping')
            return

        purchases = [
            (abebe, 'Ergonomic Office Chair', 2, OrderStatus.DELIVERED, 5, 'Comfortable and well built.'),
            (hana, 'Ergonomic Office Chair', 1, OrderStatus.DELIVERED, 4, 'Good chair, delivery was a day late.'),
            (hana, 'HP LaserJet Pro Printer', 1, OrderStatus.DELIVERED, 3, ''),
            (abebe, 'Wireless Keyboard and Mouse', 3, OrderStatus.SHIPPED, None, None),
            (hana, 'Ethiopian Coffee Beans 1kg', 2, OrderStatus.PENDING, None, None),
        ]

        for buyer, title, quantity, final_status, rating, comment in purchases:
            listing = listings[title]
            order = OrderService.create_order_from_listing(
                buyer=buyer,
                listing_id=listing.id,
                quantity=quantity,
                delivery_location='Bole, Addis Ababa',
                delivery_phone=buyer.profile.phone_number,
                payment_method=PaymentMethod.CASH_ON_DELIVERY,
            )

            for next_status in (OrderStatus.ACCEPTED, OrderStatus.SHIPPED, OrderStatus.DELIVERED):
                if order.status == final_status:
                    break
                order = OrderService.update_order_status(order.id, listing.seller, next_status)

            if rating is not None:
                review = create_review(buyer=buyer, order_id=order.id, rating=rating, comment=comment)
                if rating < 5:
                    add_seller_response(
                        review_id=review.id,
                        user=listing.seller,
                        response='Thank you for the feedback, we are working on it.',
                    )

    def create_conversations(self, users, listings):
        self.stdout.write('  Creating conversations...')

        hana = users['hana@example.com']
        bole = users['bole@example.com']
        monitor = listings['24 Inch LED Monitor']

        conversation, created = get_or_create_conversation(
            user=hana,
            other_user_id=bole.id,
            listing_id=monitor.id,
        )
        if not created:
            return

        send_message(conversation_id=conversation.id, sender=hana, content='Hi, does the monitor have HDMI input?')
        send_message(conversation_id=conversation.id, sender=bole, content='Yes, HDMI and DisplayPort.')
        send_message(conversation_id=conversation.id, sender=hana, content='Great, can you deliver to Kazanchis?')

    def create_questions(self, users, listings):
        self.stdout.write('  Creating product questions...')

        cabinet = listings['Steel Filing Cabinet']
        if cabinet.questions.exists():
            return

        question = ProductQuestion.objects.create(
            product=cabinet,
            author=users['abebe@example.com'],
            content='Does the cabinet come with keys for every drawer?',
        )
        ProductQuestion.objects.create(
            product=cabinet,
            author=cabinet.seller,
            parent=question,
            is_seller_answer=True,
            content='Yes, two keys are included and they open all four drawers.',
        )

"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 3 users (admin, alice, ravi)
- A mix of monthly, yearly and one-time subscriptions in USD and INR
"""

from django.core.management.base import BaseCommand
from django.db import transaction
from decimal import Decimal
from datetime import date

from apps.accounts.models import User
from apps.subscriptions.models import Subscription, SubscriptionType


SAMPLE_SUBSCRIPTIONS = {
    'alice@example.com': [
        ('Music Streaming', '10.99', 'USD', SubscriptionType.MONTHLY, date(2024, 1, 5), 'https://music.example.com'),
        ('Video Streaming', '15.49', 'USD', SubscriptionType.MONTHLY, date(2023, 9, 12), 'https://video.example.com'),
        ('Cloud Storage', '99.99', 'USD', SubscriptionType.YEARLY, date(2023, 3, 1), ''),
        ('Online Course', '49.00', 'USD', SubscriptionType.ONETIME, date(2024, 4, 20), ''),
    ],
    'ravi@example.com': [
        ('Broadband', '999.00', 'INR', SubscriptionType.MONTHLY, date(2022, 11, 5), ''),
        ('Cricket Pass', '1499.00', 'INR', SubscriptionType.YEARLY, date(2024, 3, 22), ''),
        ('Music Streaming', '119.00', 'INR', SubscriptionType.MONTHLY, date(2024, 2, 1), ''),
        ('Code Editor License', '89.00', 'USD', SubscriptionType.YEARLY, date(2023, 7, 15), ''),
        ('Gym Membership', '2500.00', 'INR', SubscriptionType.MONTHLY, date(2024, 1, 1), ''),
        ('Conference Ticket', '12000.00', 'INR', SubscriptionType.ONETIME, date(2024, 6, 10), ''),
    ],
}


class Command(BaseCommand):
    help = 'Create sample data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        count = self.create_subscriptions(users)

        self.stdout.write(self.style.SUCCESS(f'Sample data created successfully! ({count} subscriptions)'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  alice@example.com / password123')
        self.stdout.write('  ravi@example.com / password123 (prefers INR)')

    def clear_data(self):
        """Clear sample users and everything they own."""
        emails = ['admin@example.com', *SAMPLE_SUBSCRIPTIONS]
        Subscription.objects.filter(user__email__in=emails).delete()
        User.objects.filter(email__in=emails).delete()

    def create_users(self):
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'full_name': 'Admin User',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        alice, _ = User.objects.get_or_create(
            email='alice@example.com',
            defaults={'full_name': 'Alice Tracker'}
        )
        alice.set_password('password123')
        alice.save()

        ravi, _ = User.objects.get_or_create(
            email='ravi@example.com',
            defaults={
                'full_name': 'Ravi Saver',
                'preferred_currency': 'INR',
            }
        )
        ravi.set_password('password123')
        ravi.save()

        return {user.email: user for user in (admin, alice, ravi)}

    def create_subscriptions(self, users):
        self.stdout.write('  Creating subscriptions...')

        count = 0
        for email, rows in SAMPLE_SUBSCRIPTIONS.items():
            for name, amount, currency, kind, start, url in rows:
                _, created = Subscription.objects.get_or_create(
                    user=users[email],
                    name=name,
                    defaults={
                        'amount': Decimal(amount),
                        'currency': currency,
                        'type': kind,
                        'start_date': start,
                        'website_url': url,
                    }
                )
                count += created
        return count

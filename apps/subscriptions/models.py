from django.db import models
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
import uuid

from apps.currency.currencies import Currency


class SubscriptionType(models.TextChoices):
    MONTHLY = 'monthly', 'Monthly'
    YEARLY = 'yearly', 'Yearly'
    ONETIME = 'onetime', 'One-time'


class Subscription(models.Model):
    """A recurring or one-time expense owned by a single user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='subscriptions'
    )

    name = models.CharField(max_length=200)

    # Financial details
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    currency = models.CharField(
        max_length=3,
        choices=Currency.choices,
        default=Currency.USD
    )
    type = models.CharField(
        max_length=10,
        choices=SubscriptionType.choices,
        default=SubscriptionType.MONTHLY
    )

    start_date = models.DateField(default=timezone.localdate)
    website_url = models.URLField(max_length=500, blank=True)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'subscriptions'
        indexes = [
            models.Index(fields=['user', 'start_date'], name='subs_user_start_idx'),
            models.Index(fields=['user', 'type'], name='subs_user_type_idx'),
        ]
        ordering = ['-start_date', '-created_at']

    def __str__(self):
        return f"{self.name} - {self.amount} {self.currency} ({self.get_type_display()})"

# Generated manually for subscriptions app

import uuid
from decimal import Decimal
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Subscription',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=10, validators=[MinValueValidator(Decimal('0.00'))])),
                ('currency', models.CharField(choices=[('USD', 'US Dollar'), ('INR', 'Indian Rupee')], default='USD', max_length=3)),
                ('type', models.CharField(choices=[('monthly', 'Monthly'), ('yearly', 'Yearly'), ('onetime', 'One-time')], default='monthly', max_length=10)),
                ('start_date', models.DateField(default=django.utils.timezone.localdate)),
                ('website_url', models.URLField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='subscriptions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'subscriptions',
                'ordering': ['-start_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['user', 'start_date'], name='subs_user_start_idx'),
                    models.Index(fields=['user', 'type'], name='subs_user_type_idx'),
                ],
            },
        ),
    ]

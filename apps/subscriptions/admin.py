from django.contrib import admin
from .models import Subscription


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    """Admin interface for subscriptions."""

    list_display = [
        'name',
        'user',
        'amount',
        'currency',
        'type',
        'start_date',
        'created_at',
    ]
    list_filter = ['type', 'currency', 'start_date']
    search_fields = ['name', 'user__email', 'user__full_name']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'start_date'
    ordering = ['-start_date']

    fieldsets = (
        ('Subscription', {
            'fields': ('id', 'user', 'name', 'website_url')
        }),
        ('Billing', {
            'fields': ('amount', 'currency', 'type', 'start_date')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

"""
Custom permission classes for subscriptions app.
"""
from rest_framework.permissions import BasePermission


class IsSubscriptionOwner(BasePermission):
    """
    Object-level permission: only the owner may touch a subscription.

    Querysets are already scoped to the owner, so this only guards
    objects reached some other way.
    """

    message = 'You can only access your own subscriptions.'

    def has_object_permission(self, request, view, obj):
        return obj.user_id == request.user.id

"""
Domain exceptions for subscriptions app.

Service errors inherit from SubscriptionServiceError; errors that map
directly to an HTTP status inherit from APIException.
"""
from rest_framework.exceptions import APIException


class SubscriptionServiceError(Exception):
    """Base exception for subscription service errors."""
    pass


class InvalidSplitError(SubscriptionServiceError):
    """Raised when a split can't be allocated (reason in the message)."""
    pass


class SubscriptionNotFoundError(APIException):
    """Subscription not found or owned by another user."""
    status_code = 404
    default_detail = 'Subscription not found.'
    default_code = 'subscription_not_found'


class TooManyParticipantsError(APIException):
    """Split request exceeds the participant limit."""
    status_code = 400
    default_detail = 'Too many participants for one split.'
    default_code = 'too_many_participants'

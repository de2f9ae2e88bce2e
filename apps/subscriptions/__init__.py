"""
Subscriptions App - Subscription Tracking and Cost Splitting

This app stores a user's recurring and one-time subscriptions and lets the
owner split a subscription's cost with friends.

Key Features:
- Subscription CRUD scoped to the owning user
- Sorting, filtering and pagination of the subscription list
- Amounts converted to a display currency on request
- Cent-precise split of half the subscription amount among up to 5 friends
- WhatsApp payment reminder links for each share

Architecture:
- Models: Subscription
- Services: subscription_management, split_allocation, split_requests, messaging
- Views: SubscriptionViewSet with split/check_split actions
- Permissions: IsSubscriptionOwner
- Exceptions: Domain exception hierarchy
"""

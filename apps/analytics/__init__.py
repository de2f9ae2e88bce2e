"""Spend analytics over a user's subscriptions."""

"""Aggregate application use cases."""

from .notifications import NotificationDispatcher, compose, notify

__all__ = ["NotificationDispatcher", "compose", "notify"]

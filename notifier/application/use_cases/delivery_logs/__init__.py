"""Use cases for delivery log auditing."""

from .list_delivery_logs import list_delivery_logs

__all__ = ["list_delivery_logs"]

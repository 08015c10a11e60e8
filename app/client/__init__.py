"""Client-side data access for the student portal REST API."""

from app.client.api import (
    ClientError,
    NotFoundError,
    ResourceClient,
    TransportError,
    ValidationError,
)
from app.client.stats import DashboardStats, fetch_stats
from app.client.store import RESOURCES, Notification, ResourcePreset, ResourceView
from app.client.views import PageView, ViewState, derive_view

__all__ = [
    "ClientError",
    "NotFoundError",
    "TransportError",
    "ValidationError",
    "ResourceClient",
    "DashboardStats",
    "fetch_stats",
    "RESOURCES",
    "Notification",
    "ResourcePreset",
    "ResourceView",
    "PageView",
    "ViewState",
    "derive_view",
]

"""Services for notifications business logic."""

from .exceptions import (
    NotificationsServiceError,
    NotificationNotFoundError,
)
from .notification_management import (
    create_notification,
    notify_on_commit,
    get_notifications,
    get_unread_notification_count,
    mark_notification_as_read,
    mark_all_notifications_as_read,
)

__all__ = [
    # Exceptions
    'NotificationsServiceError',
    'NotificationNotFoundError',
    # Services
    'create_notification',
    'notify_on_commit',
    'get_notifications',
    'get_unread_notification_count',
    'mark_notification_as_read',
    'mark_all_notifications_as_read',
]

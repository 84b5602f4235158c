"""Notification inbox service."""

from django.conf import settings
from django.db import transaction
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional
import logging

from apps.accounts.models import User
from ..models import Notification
from .exceptions import NotificationNotFoundError

logger = logging.getLogger(__name__)


def create_notification(
    *,
    user_id: UUID,
    type: str,
    title: str,
    message: str,
    link: str = ''
) -> Notification:
    """
    Create a notification for a user.

    Args:
        user_id: Recipient
        type: NotificationType value
        title: Short headline
        message: Body text
        link: Client route the notification points to

    Returns:
        Created Notification instance
    """
    notification = Notification.objects.create(
        user_id=user_id,
        type=type,
        title=title,
        message=message,
        link=link,
    )
    logger.debug("Notification %s (%s) for user %s", notification.id, type, user_id)
    return notification


def notify_on_commit(**kwargs) -> None:
    """Create the notification once the surrounding transaction commits."""
    transaction.on_commit(lambda: create_notification(**kwargs))


def get_notifications(*, user: User, limit: Optional[int] = None) -> QuerySet[Notification]:
    """
    Get a user's most recent notifications, newest first.

    Args:
        user: Owner of the notifications
        limit: Maximum number returned (defaults to NOTIFICATIONS_PAGE_LIMIT)
    """
    if limit is None:
        limit = settings.NOTIFICATIONS_PAGE_LIMIT
    return Notification.objects.filter(user=user).order_by('-created_at')[:limit]


def get_unread_notification_count(*, user: User) -> int:
    return Notification.objects.filter(user=user, read=False).count()


@transaction.atomic
def mark_notification_as_read(*, notification_id: UUID, user: User) -> Notification:
    """
    Mark one of the user's notifications as read.

    Raises:
        NotificationNotFoundError: If missing or owned by someone else
    """
    try:
        notification = (
            Notification.objects
            .select_for_update()
            .get(id=notification_id, user=user)
        )
    except Notification.DoesNotExist:
        raise NotificationNotFoundError("Notification not found")

    if not notification.read:
        notification.read = True
        notification.save(update_fields=['read'])

    return notification


def mark_all_notifications_as_read(*, user: User) -> int:
    """
    Mark every unread notification of the user as read.

    Returns:
        Number of notifications updated
    """
    return Notification.objects.filter(user=user, read=False).update(read=True)


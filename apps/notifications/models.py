from django.db import models
import uuid


class NotificationType(models.TextChoices):
    NEW_OFFER = 'new_offer', 'New offer'
    OFFER_ACCEPTED = 'offer_accepted', 'Offer accepted'
    OFFER_REJECTED = 'offer_rejected', 'Offer rejected'
    NEW_ORDER = 'new_order', 'New order'
    ORDER_STATUS_UPDATED = 'order_status_updated', 'Order status updated'
    NEW_REVIEW = 'new_review', 'New review'
    NEW_QUESTION = 'new_question', 'New question'


class Notification(models.Model):
    """In-app notification addressed to a single user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='notifications')
    type = models.CharField(max_length=50, choices=NotificationType.choices)
    title = models.CharField(max_length=200)
    message = models.TextField()
    link = models.CharField(max_length=500, blank=True)
    read = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        indexes = [
            models.Index(fields=['user', 'read'], name='notif_user_read_idx'),
            models.Index(fields=['user', 'created_at'], name='notif_user_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.title}"

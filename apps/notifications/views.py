from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from .serializers import (
    NotificationSerializer,
    NotificationListQuerySerializer,
    UnreadCountSerializer,
    MarkAllReadResponseSerializer,
)
from .services import (
    get_notifications,
    get_unread_notification_count,
    mark_notification_as_read,
    mark_all_notifications_as_read,
    NotificationNotFoundError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    parameters=[
        OpenApiParameter('limit', OpenApiTypes.INT, description='Maximum number of notifications (default 30)'),
    ],
    responses={200: NotificationSerializer(many=True)},
    description="Latest notifications of the current user, newest first.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def notification_list(request):
    """List own notifications."""
    query_serializer = NotificationListQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    notifications = get_notifications(
        user=request.user,
        limit=query_serializer.validated_data.get('limit'),
    )
    return Response(NotificationSerializer(notifications, many=True).data)


@extend_schema(
    responses={200: UnreadCountSerializer},
    description="Number of unread notifications.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def unread_count(request):
    return Response({
        'unread_count': get_unread_notification_count(user=request.user)
    })


@extend_schema(
    request=None,
    responses={
        200: NotificationSerializer,
        404: ErrorResponseSerializer,
    },
    description="Mark one notification as read.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def mark_read(request, pk):
    """Mark a single notification as read (owner only)."""
    try:
        notification = mark_notification_as_read(notification_id=pk, user=request.user)
    except NotificationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(NotificationSerializer(notification).data)


@extend_schema(
    request=None,
    responses={200: MarkAllReadResponseSerializer},
    description="Mark all notifications of the current user as read.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def mark_all_read(request):
    updated = mark_all_notifications_as_read(user=request.user)
    return Response({'updated': updated})

from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    ConversationSerializer,
    ConversationSummarySerializer,
    ConversationDetailSerializer,
    MessageSerializer,
    StartConversationSerializer,
    SendMessageSerializer,
    UnreadMessageCountSerializer,
    MarkReadResponseSerializer,
)
from .services import (
    get_or_create_conversation,
    get_user_conversations,
    get_conversation_with_messages,
    send_message,
    mark_messages_read,
    get_unread_message_count,
    ConversationNotFoundError,
    NotAParticipantError,
    SelfConversationError,
    RecipientNotFoundError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    methods=['GET'],
    responses={200: ConversationSummarySerializer(many=True)},
    description="Own conversations, most recently active first.",
    tags=['messages'],
)
@extend_schema(
    methods=['POST'],
    request=StartConversationSerializer,
    responses={
        200: ConversationSerializer,
        201: ConversationSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Find or start a conversation with another user.",
    tags=['messages'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def conversation_list(request):
    """
    GET: inbox of the current user.
    POST: find or start a conversation.
    """
    if request.method == 'GET':
        conversations = get_user_conversations(user=request.user)
        return Response(ConversationSummarySerializer(conversations, many=True).data)

    serializer = StartConversationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    try:
        conversation, created = get_or_create_conversation(
            user=request.user,
            other_user_id=data['user'],
            listing_id=data.get('listing'),
            request_id=data.get('request'),
        )
    except SelfConversationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except RecipientNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(
        ConversationSerializer(conversation).data,
        status=status.HTTP_201_CREATED if created else status.HTTP_200_OK
    )


@extend_schema(
    responses={
        200: ConversationDetailSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="A conversation with its messages, oldest first.",
    tags=['messages'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def conversation_detail(request, pk):
    try:
        data = get_conversation_with_messages(conversation_id=pk, user=request.user)
    except ConversationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAParticipantError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(ConversationDetailSerializer(data).data)


@extend_schema(
    request=SendMessageSerializer,
    responses={
        201: MessageSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    tags=['messages'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def send(request, pk):
    """Post a message to a conversation (participants only)."""
    serializer = SendMessageSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        message = send_message(
            conversation_id=pk,
            sender=request.user,
            content=serializer.validated_data['content'],
        )
    except ConversationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAParticipantError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)


@extend_schema(
    request=None,
    responses={
        200: MarkReadResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    tags=['messages'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def mark_read(request, pk):
    """Mark the other participant's messages as read."""
    try:
        updated = mark_messages_read(conversation_id=pk, user=request.user)
    except ConversationNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except NotAParticipantError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({'updated': updated})


@extend_schema(
    responses={200: UnreadMessageCountSerializer},
    tags=['messages'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def unread_count(request):
    return Response({
        'unread_count': get_unread_message_count(user=request.user)
    })

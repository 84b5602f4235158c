from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .serializers import (
    UserRegistrationSerializer,
    UserLoginSerializer,
    UserSerializer,
    ProfileSerializer,
    PublicProfileSerializer,
    DeleteAccountSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    delete_user_account,
    get_public_profile,
    update_profile as update_profile_service,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    PasswordConfirmationError,
    ProfileNotFoundError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, help_text="Refresh token to discard")


def _token_pair(user):
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserRegistrationSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new account (with marketplace profile) and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    """Register a new user account."""
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    data = serializer.validated_data.copy()
    data.pop('password_confirm', None)

    try:
        user = register_user(**data)
    except UserRegistrationError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response({
        'message': 'Registration successful',
        'user': UserSerializer(user).data,
        'tokens': _token_pair(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': _token_pair(user),
    })


@extend_schema(
    request=LogoutRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Logout. The client discards its tokens; a supplied refresh token is validated.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Logout the current user."""
    refresh_token = request.data.get('refresh')
    if refresh_token:
        try:
            RefreshToken(refresh_token)
        except TokenError:
            return Response({
                'error': 'Invalid token'
            }, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Logout successful'
    })


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user with their profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user."""
    return Response(UserSerializer(request.user).data)


@extend_schema(
    request=ProfileSerializer,
    responses={
        200: ProfileSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Update the current user's marketplace profile.",
    tags=['auth'],
)
@api_view(['PATCH'])
@permission_classes([IsAuthenticated])
def update_profile(request):
    """Update own profile."""
    serializer = ProfileSerializer(data=request.data, partial=True)
    serializer.is_valid(raise_exception=True)

    try:
        profile = update_profile_service(
            user_id=request.user.id,
            data=serializer.validated_data,
        )
    except ProfileNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(ProfileSerializer(profile).data)


@extend_schema(
    request=DeleteAccountSerializer,
    responses={
        204: None,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Delete the current account. Personal data is anonymized.",
    tags=['auth'],
)
@api_view(['DELETE'])
@permission_classes([IsAuthenticated])
def delete_account(request):
    """Delete (anonymize) the current account."""
    serializer = DeleteAccountSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        delete_user_account(
            user_id=request.user.id,
            password=serializer.validated_data['password'],
        )
    except PasswordConfirmationError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={
        200: PublicProfileSerializer,
        404: ErrorResponseSerializer,
    },
    description="Public profile of any active user.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def public_profile(request, pk):
    """Get another user's public profile."""
    try:
        profile = get_public_profile(user_id=pk)
    except ProfileNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(PublicProfileSerializer(profile).data)

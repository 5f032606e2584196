from django.conf import settings
from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.exceptions import AuthenticationFailed, ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes
from apps.receipts.services import get_all_receipts
from .authentication import AdminTokenAuthentication
from .permissions import IsPanelAdmin
from .serializers import (
    AdminLoginSerializer,
    AdminTokenSerializer,
    AdminStatusSerializer,
    PanelUserSerializer,
    PanelReceiptSerializer,
    AddCreditsSerializer,
    PanelStatsSerializer,
)
from .services import (
    authenticate_admin,
    issue_admin_token,
    revoke_admin_tokens,
    grant_credits,
    get_all_users,
    get_panel_stats,
    InvalidAdminCredentialsError,
    InvalidCreditAmountError,
    UserNotFoundError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class SuccessResponseSerializer(drf_serializers.Serializer):
    success = drf_serializers.BooleanField()


@extend_schema(
    request=AdminLoginSerializer,
    responses={
        200: AdminTokenSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Log in as an admin and receive a signed admin token.",
    tags=['admin'],
)
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def admin_login(request):
    """Exchange admin credentials for an admin token."""
    serializer = AdminLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        admin = authenticate_admin(
            username=serializer.validated_data['username'],
            password=serializer.validated_data['password'],
        )
    except InvalidAdminCredentialsError:
        return Response({
            'error': 'Invalid credentials'
        }, status=status.HTTP_401_UNAUTHORIZED)

    return Response({
        'token': issue_admin_token(admin),
        'expiresIn': settings.ADMIN_TOKEN_MAX_AGE,
        'username': admin.username,
    })


@extend_schema(
    request=None,
    responses={200: SuccessResponseSerializer},
    description="Revoke every admin token issued to the calling admin.",
    tags=['admin'],
)
@api_view(['POST'])
@authentication_classes([AdminTokenAuthentication])
@permission_classes([IsPanelAdmin])
def admin_logout(request):
    """Log out the current admin."""
    revoke_admin_tokens(admin=request.user)
    return Response({'success': True})


@extend_schema(
    responses={200: AdminStatusSerializer},
    description="Report whether the request carries a valid admin token.",
    tags=['admin'],
)
@api_view(['GET'])
@authentication_classes([])
@permission_classes([AllowAny])
def admin_status(request):
    """Check admin session without failing on a bad token."""
    try:
        result = AdminTokenAuthentication().authenticate(request)
    except AuthenticationFailed:
        result = None

    admin = result[0] if result else None
    return Response({
        'isAdmin': admin is not None,
        'username': admin.username if admin else None,
    })


@extend_schema(
    responses={200: PanelUserSerializer(many=True)},
    description="List all users, newest first.",
    tags=['admin'],
)
@api_view(['GET'])
@authentication_classes([AdminTokenAuthentication])
@permission_classes([IsPanelAdmin])
def admin_users(request):
    """List every user with their credit balance."""
    return Response(PanelUserSerializer(get_all_users(), many=True).data)


@extend_schema(
    parameters=[
        OpenApiParameter(
            'emailSent',
            OpenApiTypes.BOOL,
            description='Filter by delivery status; false lists failed deliveries',
        ),
    ],
    responses={200: PanelReceiptSerializer(many=True), 400: ErrorResponseSerializer},
    description="List all receipts, newest first.",
    tags=['admin'],
)
@api_view(['GET'])
@authentication_classes([AdminTokenAuthentication])
@permission_classes([IsPanelAdmin])
def admin_receipts(request):
    """List every receipt, optionally only failed or sent ones."""
    email_sent = None
    raw = request.query_params.get('emailSent')
    if raw is not None:
        value = raw.strip().lower()
        if value in ('true', '1'):
            email_sent = True
        elif value in ('false', '0'):
            email_sent = False
        else:
            raise ValidationError({'emailSent': 'Must be true or false.'})

    receipts = get_all_receipts(email_sent=email_sent)
    return Response(PanelReceiptSerializer(receipts, many=True).data)


@extend_schema(
    request=AddCreditsSerializer,
    responses={
        200: PanelUserSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Add 1-1000 credits to a user's balance.",
    tags=['admin'],
)
@api_view(['POST'])
@authentication_classes([AdminTokenAuthentication])
@permission_classes([IsPanelAdmin])
def add_credits(request):
    """Grant credits to a user."""
    serializer = AddCreditsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = grant_credits(
            user_id=serializer.validated_data['userId'],
            credits=serializer.validated_data['credits'],
            granted_by=request.user,
        )
    except UserNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidCreditAmountError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(PanelUserSerializer(user).data)


@extend_schema(
    responses={200: PanelStatsSerializer},
    description="Totals for the admin dashboard.",
    tags=['admin'],
)
@api_view(['GET'])
@authentication_classes([AdminTokenAuthentication])
@permission_classes([IsPanelAdmin])
def admin_stats(request):
    """Users, receipts, failed deliveries and outstanding credits."""
    stats = get_panel_stats()
    return Response({
        'totalUsers': stats['total_users'],
        'totalReceipts': stats['total_receipts'],
        'failedDeliveries': stats['failed_deliveries'],
        'creditsOutstanding': stats['credits_outstanding'],
    })

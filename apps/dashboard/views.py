from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .dashboard import DashboardQueries
from .serializers import (
    BuyerDashboardSerializer,
    SellerDashboardSerializer,
    HomeStatsSerializer,
)


@extend_schema(
    responses={200: BuyerDashboardSerializer},
    description="Requests, orders and counters of the current user as a buyer.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def buyer_dashboard(request):
    data = DashboardQueries.buyer_dashboard(request.user)
    return Response(BuyerDashboardSerializer(data).data)


@extend_schema(
    responses={200: SellerDashboardSerializer},
    description="Open requests to bid on, own offers, orders received and counters.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def seller_dashboard(request):
    data = DashboardQueries.seller_dashboard(request.user)
    return Response(SellerDashboardSerializer(data).data)


@extend_schema(
    responses={200: HomeStatsSerializer},
    description="Site-wide counters for the landing page.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def home_stats(request):
    return Response(DashboardQueries.home_stats())

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .analytics import DashboardQueries
from .serializers import DashboardQuerySerializer, DashboardResponseSerializer


@extend_schema(
    parameters=[DashboardQuerySerializer],
    responses={200: DashboardResponseSerializer},
    description="Cash, profit, stock value, outstanding debt and production yields.",
    tags=['analytics'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def dashboard(request):
    """Get dashboard figures - thin HTTP handler."""
    query_serializer = DashboardQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)

    data = DashboardQueries.summary(today=query_serializer.validated_data.get('date'))
    return Response(DashboardResponseSerializer(data).data)

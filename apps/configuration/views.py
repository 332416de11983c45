from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import BusinessConfigSerializer, BusinessConfigUpdateSerializer
from .services import load_business_config, update_business_config


@extend_schema(
    methods=['GET'],
    responses={200: BusinessConfigSerializer},
    description="Get the business configuration.",
    tags=['settings'],
)
@extend_schema(
    methods=['PATCH'],
    request=BusinessConfigUpdateSerializer,
    responses={200: BusinessConfigSerializer},
    description="Update the business name, default sale price or currency.",
    tags=['settings'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated])
def business_settings(request):
    """Read or update the business configuration - thin HTTP handler."""
    if request.method == 'PATCH':
        input_serializer = BusinessConfigUpdateSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)
        config = update_business_config(**input_serializer.validated_data)
    else:
        config = load_business_config()

    return Response(BusinessConfigSerializer(config).data)

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    BatchFilterSerializer,
    BatchInputSerializer,
    InventoryRecordSerializer,
    ProductionBatchSerializer,
    StockViewSerializer,
)
from .services import (
    list_batches,
    list_inventory,
    list_stock_views,
    get_stock_view,
    register_batch,
)


@extend_schema(
    responses={200: InventoryRecordSerializer(many=True)},
    description="Stock position of every product that has been produced.",
    tags=['inventory'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def inventory_list(request):
    """List inventory records - thin HTTP handler."""
    return Response(InventoryRecordSerializer(list_inventory(), many=True).data)


@extend_schema(
    responses={200: StockViewSerializer(many=True)},
    description="Active products with current stock, for the sale screen.",
    tags=['inventory'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def stock_list(request):
    """List cached stock views - thin HTTP handler."""
    return Response(StockViewSerializer(list_stock_views(), many=True).data)


@extend_schema(
    responses={200: StockViewSerializer},
    description="Stock view of one product (zero quantity if never produced).",
    tags=['inventory'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def stock_detail(request, product_id):
    """Get a product's stock view - thin HTTP handler."""
    return Response(StockViewSerializer(get_stock_view(product_id=product_id)).data)


@extend_schema(
    methods=['GET'],
    parameters=[BatchFilterSerializer],
    responses={200: ProductionBatchSerializer(many=True)},
    description="Production batches, newest first.",
    tags=['inventory'],
)
@extend_schema(
    methods=['POST'],
    request=BatchInputSerializer,
    responses={201: ProductionBatchSerializer},
    description="Register a production batch and add its units to stock.",
    tags=['inventory'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def batches(request):
    """List or register production batches - thin HTTP handler."""
    if request.method == 'POST':
        input_serializer = BatchInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        batch = register_batch(**input_serializer.validated_data)
        return Response(
            ProductionBatchSerializer(batch).data,
            status=status.HTTP_201_CREATED
        )

    filter_serializer = BatchFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = list_batches(product_id=filter_serializer.validated_data.get('product'))
    return Response(ProductionBatchSerializer(queryset, many=True).data)

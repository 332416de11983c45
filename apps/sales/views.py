from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.configuration.services import load_business_config

from .cart import Cart
from .serializers import (
    CheckoutInputSerializer,
    CheckoutResultSerializer,
    SaleFilterSerializer,
    SaleInputSerializer,
    SaleOutcomeSerializer,
    SaleSerializer,
)
from .services import checkout_cart, list_sales, process_sale


@extend_schema(
    methods=['GET'],
    parameters=[SaleFilterSerializer],
    responses={200: SaleSerializer(many=True)},
    description="Sales newest first, filtered by day and/or customer.",
    tags=['sales'],
)
@extend_schema(
    methods=['POST'],
    request=SaleInputSerializer,
    responses={201: SaleOutcomeSerializer},
    description="Sell one product: debits stock, charges credit, posts to today's cash.",
    tags=['sales'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def sales(request):
    """List sales or process one - thin HTTP handler."""
    if request.method == 'POST':
        input_serializer = SaleInputSerializer(data=request.data)
        input_serializer.is_valid(raise_exception=True)

        outcome = process_sale(config=load_business_config(), **input_serializer.validated_data)
        return Response(SaleOutcomeSerializer(outcome).data, status=status.HTTP_201_CREATED)

    filter_serializer = SaleFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = list_sales(
        business_date=filter_serializer.validated_data.get('date'),
        customer_id=filter_serializer.validated_data.get('customer'),
    )
    return Response(SaleSerializer(queryset, many=True).data)


@extend_schema(
    request=CheckoutInputSerializer,
    responses={200: CheckoutResultSerializer},
    description="Sell every cart line as its own sale; failed lines are reported.",
    tags=['sales'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def checkout(request):
    """Check out a cart - thin HTTP handler."""
    input_serializer = CheckoutInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)
    data = input_serializer.validated_data

    result = checkout_cart(
        cart=Cart.from_dict({'lines': data['lines']}),
        payment_mode=data['payment_mode'],
        config=load_business_config(),
        customer_id=data.get('customer_id'),
    )
    return Response(CheckoutResultSerializer(result).data)

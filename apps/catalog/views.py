from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import ProductSerializer, ProductInputSerializer, ProductFilterSerializer
from .services import (
    create_product,
    update_product,
    deactivate_product,
    reactivate_product,
    delete_product,
    get_product,
    list_products,
)


class ProductViewSet(viewsets.ViewSet):
    """
    ViewSet for the product catalog.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: Active products (``?include_inactive=true`` for all)
    create: Create a product
    retrieve: Get a product
    partial_update: Change name, emoji or color
    destroy: Delete a product with no ledger history
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    @extend_schema(parameters=[ProductFilterSerializer], responses={200: ProductSerializer(many=True)})
    def list(self, request):
        filter_serializer = ProductFilterSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        products = list_products(
            include_inactive=filter_serializer.validated_data['include_inactive']
        )
        return Response(ProductSerializer(products, many=True).data)

    @extend_schema(request=ProductInputSerializer, responses={201: ProductSerializer})
    def create(self, request):
        serializer = ProductInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        product = create_product(**serializer.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: ProductSerializer})
    def retrieve(self, request, pk=None):
        return Response(ProductSerializer(get_product(product_id=pk)).data)

    @extend_schema(request=ProductInputSerializer, responses={200: ProductSerializer})
    def partial_update(self, request, pk=None):
        serializer = ProductInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        product = update_product(product_id=pk, **serializer.validated_data)
        return Response(ProductSerializer(product).data)

    def destroy(self, request, pk=None):
        delete_product(product_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=None, responses={200: ProductSerializer})
    @action(detail=True, methods=['post'])
    def deactivate(self, request, pk=None):
        """Hide product from the sale screen."""
        return Response(ProductSerializer(deactivate_product(product_id=pk)).data)

    @extend_schema(request=None, responses={200: ProductSerializer})
    @action(detail=True, methods=['post'])
    def reactivate(self, request, pk=None):
        """Show a deactivated product again."""
        return Response(ProductSerializer(reactivate_product(product_id=pk)).data)

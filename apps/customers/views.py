from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    CustomerInputSerializer,
    CustomerSerializer,
    DebtorSerializer,
    PaymentInputSerializer,
    PaymentSerializer,
    PromiseInputSerializer,
    StatementLineSerializer,
)
from .services import (
    create_customer,
    update_customer,
    delete_customer,
    get_customer,
    list_customers,
    list_debtors,
    list_payments,
    record_payment,
    reconcile_balance,
    set_promised_payment_date,
    get_account_statement,
)


class CustomerViewSet(viewsets.ViewSet):
    """
    ViewSet for customers and their debt.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    list: All customers by name
    create: Create a customer
    retrieve: Customer detail with balance
    partial_update: Change name, phone or notes
    destroy: Delete a customer who owes nothing
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-fA-F-]{36}'

    @extend_schema(responses={200: CustomerSerializer(many=True)})
    def list(self, request):
        return Response(CustomerSerializer(list_customers(), many=True).data)

    @extend_schema(request=CustomerInputSerializer, responses={201: CustomerSerializer})
    def create(self, request):
        serializer = CustomerInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = create_customer(**serializer.validated_data)
        return Response(CustomerSerializer(customer).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: CustomerSerializer})
    def retrieve(self, request, pk=None):
        return Response(CustomerSerializer(get_customer(customer_id=pk)).data)

    @extend_schema(request=CustomerInputSerializer, responses={200: CustomerSerializer})
    def partial_update(self, request, pk=None):
        serializer = CustomerInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        customer = update_customer(customer_id=pk, **serializer.validated_data)
        return Response(CustomerSerializer(customer).data)

    def destroy(self, request, pk=None):
        delete_customer(customer_id=pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        methods=['GET'],
        responses={200: PaymentSerializer(many=True)},
    )
    @extend_schema(
        methods=['POST'],
        request=PaymentInputSerializer,
        responses={201: PaymentSerializer},
    )
    @action(detail=True, methods=['get', 'post'])
    def payments(self, request, pk=None):
        """List a customer's payments or record a new one."""
        if request.method == 'POST':
            serializer = PaymentInputSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)

            payment = record_payment(customer_id=pk, **serializer.validated_data)
            return Response(PaymentSerializer(payment).data, status=status.HTTP_201_CREATED)

        get_customer(customer_id=pk)
        return Response(PaymentSerializer(list_payments(customer_id=pk), many=True).data)

    @extend_schema(responses={200: StatementLineSerializer(many=True)})
    @action(detail=True, methods=['get'])
    def statement(self, request, pk=None):
        """Charges and payments with running balance, newest first."""
        lines = get_account_statement(customer_id=pk)
        return Response(StatementLineSerializer(lines, many=True).data)

    @extend_schema(request=PromiseInputSerializer, responses={200: CustomerSerializer})
    @action(detail=True, methods=['post'])
    def promise(self, request, pk=None):
        """Set or clear the promised payment date."""
        serializer = PromiseInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = set_promised_payment_date(
            customer_id=pk,
            promised_date=serializer.validated_data['promised_date'],
        )
        return Response(CustomerSerializer(customer).data)

    @extend_schema(request=None, responses={200: CustomerSerializer})
    @action(detail=True, methods=['post'])
    def reconcile(self, request, pk=None):
        """Recompute the balance from sales and payments."""
        return Response(CustomerSerializer(reconcile_balance(customer_id=pk)).data)

    @extend_schema(responses={200: DebtorSerializer(many=True)})
    @action(detail=False, methods=['get'])
    def debtors(self, request):
        """Customers with debt, overdue first."""
        return Response(DebtorSerializer(list_debtors(), many=True).data)

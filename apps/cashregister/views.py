from datetime import date

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from apps.core.exceptions import InvalidInputError

from .serializers import (
    CashOutSerializer,
    ClosingsFilterSerializer,
    CloseDayInputSerializer,
    DaySummarySerializer,
)
from .services import close_day, get_day_summary, list_cash_outs


def _parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidInputError(f"Invalid date: {value}. Use YYYY-MM-DD")


@extend_schema(
    responses={200: DaySummarySerializer},
    description="Today's cash register totals.",
    tags=['cash'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def today(request):
    """Today's summary - thin HTTP handler."""
    return Response(DaySummarySerializer(get_day_summary()).data)


@extend_schema(
    responses={200: DaySummarySerializer},
    description="Cash register totals of a past or current day (YYYY-MM-DD).",
    tags=['cash'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def day_detail(request, day):
    """A day's summary - thin HTTP handler."""
    return Response(DaySummarySerializer(get_day_summary(_parse_day(day))).data)


@extend_schema(
    request=CloseDayInputSerializer,
    responses={201: CashOutSerializer},
    description="Count the drawer, record the withdrawal and close today.",
    tags=['cash'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def close(request):
    """Close today - thin HTTP handler."""
    input_serializer = CloseDayInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    cash_out = close_day(**input_serializer.validated_data)
    return Response(CashOutSerializer(cash_out).data, status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[ClosingsFilterSerializer],
    responses={200: CashOutSerializer(many=True)},
    description="Most recent cash-outs, newest first.",
    tags=['cash'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def closings(request):
    """Cash-out history - thin HTTP handler."""
    filter_serializer = ClosingsFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    cash_outs = list_cash_outs(limit=filter_serializer.validated_data['limit'])
    return Response(CashOutSerializer(cash_outs, many=True).data)

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import CreateOrderSerializer, OrderSerializer


class OrderListCreateAPIView(APIView):
    def get(self, request):
        """
        GET /api/v1/orders/ -> the current user's orders, newest first
        """
        orders = services.list_orders(request.session_context)
        return Response(OrderSerializer(orders, many=True).data)

    def post(self, request):
        """
        POST /api/v1/orders/
        Body: { "token": "<razorpay payment id>" }
        Charges the whole cart and turns it into an order.
        """
        serializer = CreateOrderSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = services.create_order(request.session_context, token=serializer.validated_data["token"])
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)


class OrderDetailAPIView(APIView):
    def get(self, request, pk):
        order = services.get_order(request.session_context, pk)
        return Response(OrderSerializer(order).data)

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import AddToCartSerializer, CartItemSerializer


def cart_response(ctx, status_code=status.HTTP_200_OK):
    qs = services.get_cart(ctx)
    serializer = CartItemSerializer(qs, many=True)
    return Response(
        {"items": serializer.data, "total": services.cart_total(qs)},
        status=status_code,
    )


class CartListCreateAPIView(APIView):
    def get(self, request, format=None):
        return cart_response(request.session_context)

    def post(self, request, format=None):
        """
        Expected payload:
        {
            "item": <id>
        }
        """
        serializer = AddToCartSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        ctx = request.session_context
        _, created = services.add_to_cart(ctx, item_id=serializer.validated_data["item"])
        return cart_response(ctx, status.HTTP_201_CREATED if created else status.HTTP_200_OK)


class CartItemDetailAPIView(APIView):
    def delete(self, request, pk, format=None):
        ctx = request.session_context
        services.remove_from_cart(ctx, cart_item_id=pk)
        return cart_response(ctx)

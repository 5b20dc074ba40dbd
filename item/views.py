from django.conf import settings
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from . import services
from .models import Item
from .serializers import ItemSearchResultSerializer, ItemSerializer


class ItemPagination(PageNumberPagination):
    page_size = settings.ITEMS_PER_PAGE
    page_size_query_param = "page_size"
    max_page_size = 100


class ItemViewSet(viewsets.ModelViewSet):
    """
    GET    /items/              paginated list (?search=, ?ordering=, ?user=)
    POST   /items/              createItem
    GET    /items/{id}/         single item
    PATCH  /items/{id}/         updateItem (owner only)
    DELETE /items/{id}/         deleteItem (owner holding ADMIN or ITEMDELETE)
    GET    /items/search/?searchTerm=  dropdown search
    """
    queryset = Item.objects.all()
    serializer_class = ItemSerializer
    pagination_class = ItemPagination
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]
    filter_backends = [DjangoFilterBackend, OrderingFilter, SearchFilter]

    filterset_fields = {
        "user": ["exact"],
    }
    ordering_fields = ["created_at", "price", "title"]
    search_fields = ["title", "description"]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        item = services.create_item(request.session_context, **serializer.validated_data)
        return Response(self.get_serializer(item).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None, *args, **kwargs):
        serializer = self.get_serializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        item = services.update_item(request.session_context, pk, **serializer.validated_data)
        return Response(self.get_serializer(item).data, status=status.HTTP_200_OK)

    def destroy(self, request, pk=None, *args, **kwargs):
        deleted = services.delete_item(request.session_context, pk)
        return Response(deleted, status=status.HTTP_200_OK)

    @action(detail=False, methods=["get"], pagination_class=None, filter_backends=[])
    def search(self, request):
        """
        GET /api/v1/items/search/?searchTerm=shoe
        Matches title or description; returns id, image and title only.
        """
        qs = services.search_items(request.query_params.get("searchTerm"))
        return Response(ItemSearchResultSerializer(qs, many=True).data)

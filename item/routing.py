from django.urls import path

from .consumers import ItemSearchConsumer

websocket_urlpatterns = [
    path("ws/search/", ItemSearchConsumer.as_asgi()),
]

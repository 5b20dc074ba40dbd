import asyncio
import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer
from django.conf import settings

from .serializers import ItemSearchResultSerializer
from .services import search_items

logger = logging.getLogger(__name__)


@database_sync_to_async
def run_search(term):
    return ItemSearchResultSerializer(search_items(term), many=True).data


def _log_failure(task):
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Search failed", exc_info=exc)


class ItemSearchConsumer(AsyncJsonWebsocketConsumer):
    """
    Search-as-you-type. Every {"searchTerm": ...} message restarts the
    debounce timer; only the last term typed is actually searched.
    """

    pending = None

    async def connect(self):
        self.delay = settings.SEARCH_DEBOUNCE_SECONDS
        await self.accept()

    async def disconnect(self, code):
        self._cancel_pending()

    async def receive_json(self, content, **kwargs):
        term = (content.get("searchTerm") if isinstance(content, dict) else None) or ""
        self._cancel_pending()
        self.pending = asyncio.ensure_future(self._search_later(str(term)))
        self.pending.add_done_callback(_log_failure)

    def _cancel_pending(self):
        if self.pending is not None and not self.pending.done():
            self.pending.cancel()
        self.pending = None

    async def _search_later(self, term):
        await asyncio.sleep(self.delay)
        items = await run_search(term)
        logger.debug("search %r matched %d items", term, len(items))
        await self.send_json({"searchTerm": term, "items": items})

# osrs_items/catalog.py
import os
from typing import Iterable, Iterator, List, Optional, Tuple

from . import storage
from .image_url import get_item_image_url
from .logger import get_logger
from .models import ImageUrlOptions, Item, ItemFilter

logger = get_logger(__name__)


def _valid_query_id(item_id) -> bool:
    return isinstance(item_id, int) and not isinstance(item_id, bool)


class Catalog:
    """
    Read-only queries over a loaded item dataset.

    The catalog keeps its own tuple of items; nothing here mutates it, so one
    instance can be built at startup and shared.
    """

    def __init__(self, items: Iterable[Item] = ()):
        self._items = tuple(items)

    @classmethod
    def load(cls, path: str | os.PathLike = storage.ITEMS_PATH) -> "Catalog":
        """
        Build a catalog from a dataset file. A missing or unreadable file
        gives an empty catalog instead of an error.
        """
        try:
            return cls(storage.load_items(path))
        except storage.DatasetError as e:
            logger.warning("No item data available (%s); catalog is empty.", e)
            return cls()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    @property
    def items(self) -> Tuple[Item, ...]:
        return self._items

    def get_by_id(self, item_id: int) -> Optional[Item]:
        if not _valid_query_id(item_id):
            return None
        return next((it for it in self._items if it.has_id(item_id)), None)

    def get_all_by_id(self, item_id: int) -> List[Item]:
        if not _valid_query_id(item_id):
            return []
        return [it for it in self._items if it.has_id(item_id)]

    def get_by_exact_name(self, name: str) -> Optional[Item]:
        return next((it for it in self._items if it.name == name), None)

    def search_by_name(self, query: str, limit: Optional[int] = None) -> List[Item]:
        """Case-insensitive substring match on the full name, in dataset order."""
        return self.get_filtered(ItemFilter(name_contains=query, limit=limit))

    def get_filtered(self, item_filter: Optional[ItemFilter] = None) -> List[Item]:
        """
        Items matching every set field of `item_filter`, in dataset order.
        `limit` is applied last; None or <= 0 means no limit.
        """
        results: Iterable[Item] = self._items
        if item_filter is None:
            return list(results)

        if item_filter.name_contains is not None:
            needle = item_filter.name_contains.lower()
            results = [it for it in results if needle in it.name.lower()]

        if item_filter.has_variant is not None:
            results = [it for it in results if it.has_variant == item_filter.has_variant]

        results = list(results)
        if item_filter.limit and item_filter.limit > 0:
            results = results[: item_filter.limit]
        return results

    def count(self) -> int:
        return len(self._items)

    def unique_base_names(self) -> List[str]:
        return sorted({it.base_name for it in self._items})

    def variants_of(self, base_name: str) -> List[Item]:
        return [it for it in self._items if it.base_name == base_name]

    def image_url_for(self, name: str, options: Optional[ImageUrlOptions] = None) -> str:
        return get_item_image_url(name, options)

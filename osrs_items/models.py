# osrs_items/models.py
from dataclasses import dataclass
from typing import Optional, Tuple


DEFAULT_THUMB_WIDTH = 120


@dataclass(frozen=True)
class ImageUrlOptions:
    """How to render an item's wiki image URL."""
    width: int = DEFAULT_THUMB_WIDTH
    use_thumb: bool = True


@dataclass(frozen=True)
class Item:
    """
    One row of the wiki's Item_IDs table.

    `id` is a single int for most items; rows covering several ids (ranges or
    comma lists) keep them as a tuple in wiki order. `image_url` is derived
    from `base_name` when the dataset is built and is never set on its own.
    """
    id: int | Tuple[int, ...]
    name: str
    base_name: str
    image_url: str
    variant: Optional[str] = None

    @property
    def ids(self) -> Tuple[int, ...]:
        if isinstance(self.id, tuple):
            return self.id
        return (self.id,)

    def has_id(self, item_id: int) -> bool:
        return item_id in self.ids

    @property
    def has_variant(self) -> bool:
        return self.variant is not None


@dataclass(frozen=True)
class ItemFilter:
    """Criteria for Catalog.get_filtered; unset fields do not filter."""
    name_contains: Optional[str] = None
    has_variant: Optional[bool] = None
    limit: Optional[int] = None

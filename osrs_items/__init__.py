from .builder import build_item, build_items
from .catalog import Catalog
from .ids import IdParseError, parse_item_ids
from .image_url import (
    ImageUrls,
    ParsedName,
    construct_base_image_filename,
    construct_image_filename,
    get_item_image_url,
    get_item_image_urls,
    parse_item_name,
)
from .models import ImageUrlOptions, Item, ItemFilter
from .storage import DatasetError, load_items, save_items

__all__ = [
    "Catalog",
    "DatasetError",
    "IdParseError",
    "ImageUrlOptions",
    "ImageUrls",
    "Item",
    "ItemFilter",
    "ParsedName",
    "build_item",
    "build_items",
    "construct_base_image_filename",
    "construct_image_filename",
    "get_item_image_url",
    "get_item_image_urls",
    "load_items",
    "parse_item_ids",
    "parse_item_name",
    "save_items",
]

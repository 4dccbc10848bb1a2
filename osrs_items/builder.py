# osrs_items/builder.py
from typing import Iterable, List, Tuple

from .ids import IdParseError, parse_item_ids
from .image_url import get_item_image_url, parse_item_name
from .logger import get_logger
from .models import Item

logger = get_logger(__name__)


class ItemBuildError(ValueError):
    """A table row cannot become an Item (e.g. nothing before the '#')."""


def build_item(name: str, id_text: str) -> Item:
    """
    Turn one raw (name, id text) table row into an Item.
    Raises IdParseError if the id text is malformed and ItemBuildError if
    the name has no base name.
    """
    item_name = name.strip()
    base_name, variant = parse_item_name(item_name)
    if not base_name:
        raise ItemBuildError(f"item name {item_name!r} has an empty base name")
    return Item(
        id=parse_item_ids(id_text),
        name=item_name,
        base_name=base_name,
        variant=variant,
        image_url=get_item_image_url(item_name),
    )


def build_items(rows: Iterable[Tuple[str, str]]) -> List[Item]:
    """
    Build Items from raw rows, in order. Malformed rows are logged and
    skipped; the rest of the batch still builds.
    """
    items: List[Item] = []
    skipped = 0
    for name, id_text in rows:
        try:
            items.append(build_item(name, id_text))
        except (IdParseError, ItemBuildError) as e:
            skipped += 1
            logger.warning("Failed to parse item: %s (%s): %s", name, id_text, e)

    if skipped:
        logger.warning("Skipped %d malformed item rows.", skipped)
    logger.debug("Built %d items.", len(items))
    return items

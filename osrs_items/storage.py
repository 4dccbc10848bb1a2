# osrs_items/storage.py
import json
import os
from pathlib import Path
from typing import Any, Dict, List

from .image_url import get_item_image_url, parse_item_name
from .logger import get_logger
from .models import Item

logger = get_logger(__name__)

DEFAULT_ITEMS_PATH = Path(__file__).resolve().parent / "data" / "items.json"
ITEMS_PATH = os.getenv("ITEMS_PATH", str(DEFAULT_ITEMS_PATH))


class DatasetError(Exception):
    """The dataset file is missing or is not a JSON list of item records."""


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def item_to_record(item: Item) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": list(item.id) if isinstance(item.id, tuple) else item.id,
        "name": item.name,
        "baseName": item.base_name,
    }
    if item.variant is not None:
        record["variant"] = item.variant
    record["imageUrl"] = item.image_url
    return record


def record_to_item(record: Dict[str, Any]) -> Item:
    """
    Rebuild an Item from a dataset record. baseName, variant and imageUrl
    are re-derived from the name when a record lacks them.
    Raises ValueError for records without a usable name or id.
    """
    if not isinstance(record, dict):
        raise ValueError(f"expected an object, got {type(record).__name__}")

    name = record.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("record has no name")

    raw_id = record.get("id")
    if _is_int(raw_id):
        item_id: int | tuple[int, ...] = raw_id
    elif isinstance(raw_id, list) and raw_id and all(_is_int(x) for x in raw_id):
        item_id = tuple(raw_id)
    else:
        raise ValueError(f"record {name!r} has invalid id {raw_id!r}")

    if "baseName" in record:
        base_name = record["baseName"]
        variant = record.get("variant")
        if not (isinstance(variant, str) and variant.strip()):
            variant = None
    else:
        base_name, variant = parse_item_name(name)

    if not isinstance(base_name, str) or not base_name.strip():
        raise ValueError(f"record {name!r} has invalid baseName {base_name!r}")

    return Item(
        id=item_id,
        name=name,
        base_name=base_name,
        variant=variant,
        image_url=record.get("imageUrl") or get_item_image_url(name),
    )


def load_items(path: str | os.PathLike = ITEMS_PATH) -> List[Item]:
    """
    Read a dataset file. Malformed records are logged and skipped; a missing
    or unreadable file raises DatasetError.
    """
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise DatasetError(f"dataset not found at {p}") from e
    except (OSError, ValueError) as e:
        # ValueError covers both bad JSON and bytes that are not UTF-8
        raise DatasetError(f"failed to read dataset at {p}: {e}") from e

    if not isinstance(data, list):
        raise DatasetError(f"dataset at {p} must be a JSON list")

    items: List[Item] = []
    for idx, record in enumerate(data):
        try:
            items.append(record_to_item(record))
        except ValueError as e:
            logger.warning("Skipping dataset record #%d in %s: %s", idx, p, e)

    logger.info("Loaded %d items from %s", len(items), p)
    return items


def save_items(items: List[Item], path: str | os.PathLike = ITEMS_PATH) -> Path:
    """
    Write items as a JSON list, replacing the file atomically.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    tmp = p.with_name(p.name + ".tmp")
    records = [item_to_record(it) for it in items]
    with tmp.open("w", encoding="utf-8") as f:
        json.dump(records, f, indent=2, ensure_ascii=False)
        f.write("\n")
    os.replace(tmp, p)
    logger.info("Wrote %d items to %s", len(records), p)
    return p

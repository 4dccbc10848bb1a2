import argparse
import json
import os
from typing import List, Optional

from osrs_items import storage
from osrs_items.diff import diff_items
from osrs_items.logger import get_logger
from osrs_items.models import Item
from fetchers import WikiFetchError, fetch_items

logger = get_logger(__name__)

SAMPLE_SIZE = int(os.getenv("SCRAPE_SAMPLE_SIZE", "3"))
DIFF_LOG_LIMIT = int(os.getenv("SCRAPE_DIFF_LOG_LIMIT", "20"))


def load_previous(path: str) -> List[Item]:
    if not os.path.exists(path):
        return []
    try:
        return storage.load_items(path)
    except storage.DatasetError as e:
        logger.warning("Ignoring unreadable previous dataset: %s", e)
        return []


def log_changes(previous: List[Item], items: List[Item]) -> None:
    if not previous:
        logger.info("No previous dataset; every item is new.")
        return

    added, removed, id_changes = diff_items(previous, items)
    if not (added or removed or id_changes):
        logger.info("No changes since the previous dataset (%d items).", len(previous))
        return

    logger.info(
        "Changes since previous dataset: %d added, %d removed, %d id changes (was %d, now %d items).",
        len(added), len(removed), len(id_changes), len(previous), len(items),
    )
    for it in added[:DIFF_LOG_LIMIT]:
        logger.info("  + %s %s", it.name, it.id)
    for it in removed[:DIFF_LOG_LIMIT]:
        logger.info("  - %s %s", it.name, it.id)
    for it, before, after in id_changes[:DIFF_LOG_LIMIT]:
        logger.info("  ~ %s %s -> %s", it.name, before, after)


def run(output: str, url: Optional[str] = None) -> int:
    logger.info("Starting OSRS Item IDs scraper...")
    try:
        items = fetch_items(url)
    except WikiFetchError as e:
        logger.error("Scraper failed: %s", e)
        return 1

    if not items:
        logger.error("Scrape produced no items; keeping the existing dataset at %s.", output)
        return 1

    log_changes(load_previous(output), items)
    storage.save_items(items, output)

    if SAMPLE_SIZE > 0:
        sample = [storage.item_to_record(it) for it in items[:SAMPLE_SIZE]]
        logger.info("Sample items:\n%s", json.dumps(sample, indent=2, ensure_ascii=False))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape the OSRS wiki Item_IDs table into a JSON dataset.")
    parser.add_argument("--output", default=storage.ITEMS_PATH, help="dataset path (default: $ITEMS_PATH)")
    parser.add_argument("--url", default=None, help="Item_IDs page to scrape (default: $WIKI_ITEM_IDS_URL)")
    args = parser.parse_args(argv)
    return run(args.output, args.url)


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except Exception as e:
        logger.exception("Fatal scraper error: %s", e)
        raise SystemExit(2)

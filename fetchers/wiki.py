# fetchers/wiki.py
import os
from typing import List, Optional, Tuple

import requests
from bs4 import BeautifulSoup
from tenacity import retry, wait_exponential_jitter, stop_after_attempt, RetryError

from osrs_items.builder import build_items
from osrs_items.logger import get_logger
from osrs_items.models import Item

logger = get_logger(__name__)

ITEM_IDS_URL = os.getenv("WIKI_ITEM_IDS_URL", "https://oldschool.runescape.wiki/w/Item_IDs")
USER_AGENT = os.getenv(
    "WIKI_USER_AGENT",
    "osrs-item-ids/0.1 (item id and image url dataset builder)",
)
TIMEOUT = int(os.getenv("WIKI_TIMEOUT", "30"))

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT})


class WikiFetchError(Exception):
    """The Item_IDs page could not be fetched or had no item table."""


@retry(wait=wait_exponential_jitter(initial=1, max=30), stop=stop_after_attempt(5))
def _fetch(url: str) -> str:
    r = SESSION.get(url, timeout=TIMEOUT)
    r.raise_for_status()
    return r.text


def extract_rows(html: str) -> List[Tuple[str, str]]:
    """
    Pull (item name, id text) pairs from the first sortable wikitable.
    Rows with fewer than two cells or an empty name/id are ignored.
    """
    soup = BeautifulSoup(html, "html.parser")
    table = soup.select_one("table.wikitable.sortable")
    if table is None:
        raise WikiFetchError("Could not find the item table on the page")

    rows: List[Tuple[str, str]] = []
    for tr in table.find_all("tr"):
        cells = tr.find_all("td")
        if len(cells) < 2:
            # header rows only carry <th>
            continue
        name = cells[0].get_text().strip()
        id_text = cells[1].get_text().strip()
        if not name or not id_text:
            continue
        rows.append((name, id_text))
    return rows


def fetch_items(url: Optional[str] = None) -> List[Item]:
    """
    Scrape the wiki Item_IDs page and build Items from it.
    Raises WikiFetchError if the page cannot be fetched after retries or
    has no item table.
    """
    target = url or ITEM_IDS_URL
    logger.info("Fetching data from %s", target)

    try:
        html = _fetch(target)
    except RetryError as e:
        raise WikiFetchError(f"Failed to fetch {target} after retries: {e}") from e

    rows = extract_rows(html)
    logger.debug("Item table has %d candidate rows", len(rows))

    items = build_items(rows)
    logger.info("Scraped %d items from %s", len(items), target)
    return items

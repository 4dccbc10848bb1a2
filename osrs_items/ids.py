# osrs_items/ids.py
import re
from typing import List

_INT_RE = re.compile(r"[0-9]+")


class IdParseError(ValueError):
    """Raised when an item id cell cannot be turned into integers."""


def _parse_int(text: str, raw: str) -> int:
    s = text.strip()
    if not _INT_RE.fullmatch(s):
        raise IdParseError(f"invalid item id {s!r} in {raw!r}")
    return int(s)


def _expand_range(part: str, raw: str) -> List[int]:
    bounds = part.split("-")
    if len(bounds) != 2:
        raise IdParseError(f"invalid item id range {part.strip()!r} in {raw!r}")
    start = _parse_int(bounds[0], raw)
    end = _parse_int(bounds[1], raw)
    # A reversed range contributes nothing
    return list(range(start, end + 1))


def parse_item_ids(raw: str) -> int | tuple[int, ...]:
    """
    Parse the id cell of an Item_IDs table row.

    Accepted shapes:
      - single id:      "13263"                  -> 13263
      - range:          "1704-1712"              -> (1704, ..., 1712)
      - list:           "11976, 11978"           -> (11976, 11978)
      - mixed:          "1704-1706, 11976"       -> (1704, 1705, 1706, 11976)

    A single id stays a scalar; anything with a comma or hyphen becomes a
    tuple in the order written. Raises IdParseError on malformed text.
    """
    trimmed = raw.strip()

    if "," in trimmed:
        ids: List[int] = []
        for part in trimmed.split(","):
            if "-" in part:
                ids.extend(_expand_range(part, raw))
            else:
                ids.append(_parse_int(part, raw))
        if not ids:
            raise IdParseError(f"no item ids in {raw!r}")
        return tuple(ids)

    if "-" in trimmed:
        ids = _expand_range(trimmed, raw)
        if not ids:
            raise IdParseError(f"no item ids in {raw!r}")
        return tuple(ids)

    return _parse_int(trimmed, raw)

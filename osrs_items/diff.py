# osrs_items/diff.py
from typing import Dict, Iterable, List, Tuple

from .models import Item


def _by_name(items: Iterable[Item]) -> Dict[str, Item]:
    # Later duplicates win, same as the order they were scraped in
    return {it.name: it for it in items}


def diff_items(
    previous: Iterable[Item], current: Iterable[Item]
) -> tuple[List[Item], List[Item], List[Tuple[Item, int | tuple, int | tuple]]]:
    """
    Compare two datasets by item name.
    Returns:
      (added_items, removed_items, id_changes[(item_after, before_id, after_id)])
    Each list is sorted by name so log output is stable.
    """
    old_map = _by_name(previous)
    new_map = _by_name(current)
    old_names = set(old_map)
    new_names = set(new_map)

    added = [new_map[n] for n in sorted(new_names - old_names)]
    removed = [old_map[n] for n in sorted(old_names - new_names)]

    id_changes: List[Tuple[Item, int | tuple, int | tuple]] = []
    for n in sorted(old_names & new_names):
        before = old_map[n].id
        after = new_map[n].id
        if before != after:
            id_changes.append((new_map[n], before, after))

    return added, removed, id_changes

# fetchers/__init__.py
from .wiki import WikiFetchError, fetch_items

__all__ = ["WikiFetchError", "fetch_items"]

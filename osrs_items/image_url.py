# osrs_items/image_url.py
from dataclasses import replace
from typing import NamedTuple, Optional

from .models import ImageUrlOptions

WIKI_IMAGE_BASE_URL = "https://oldschool.runescape.wiki/images"
DETAIL_SUFFIX = "_detail.png"

# Only these characters are escaped. Full URI quoting would also touch
# characters the wiki keeps literally in file names.
_FILENAME_ESCAPES = str.maketrans({
    "'": "%27",
    "(": "%28",
    ")": "%29",
    "#": "%23",
    "+": "%2B",
    "?": "%3F",
    "&": "%26",
})


class ParsedName(NamedTuple):
    base_name: str
    variant: Optional[str] = None


class ImageUrls(NamedTuple):
    variant_url: str
    base_url: str


def parse_item_name(item_name: str) -> ParsedName:
    """
    Split a wiki item name at its first '#'.

      "Amulet of glory#1"   -> ParsedName("Amulet of glory", "1")
      "Abyssal bludgeon"    -> ParsedName("Abyssal bludgeon", None)

    Anything after the first '#' (further '#' included) is the variant.
    An empty variant is reported as None.
    """
    trimmed = item_name.strip()
    base, sep, variant = trimmed.partition("#")
    if not sep:
        return ParsedName(trimmed)
    return ParsedName(base.strip(), variant.strip() or None)


def construct_image_filename(item_name: str, include_variant: bool = False) -> str:
    """
    Build the wiki detail-image file name for an item, e.g.
    "Abyssal bludgeon" -> "Abyssal_bludgeon_detail.png".

    The variant is dropped unless include_variant is set, in which case it is
    lowercased and appended in parentheses ("Holy scythe#Charged" ->
    "Holy_scythe_%28charged%29_detail.png").
    """
    base_name, variant = parse_item_name(item_name)
    name = base_name

    if include_variant and variant:
        lower = variant.lower()
        if lower.startswith("(") and lower.endswith(")"):
            name = f"{base_name} {lower}"
        else:
            name = f"{base_name} ({lower})"

    name = name.replace(" ", "_").translate(_FILENAME_ESCAPES)
    return f"{name}{DETAIL_SUFFIX}"


def construct_base_image_filename(item_name: str) -> str:
    return construct_image_filename(item_name)


def get_item_image_url(
    item_name: str,
    options: Optional[ImageUrlOptions] = None,
    *,
    width: Optional[int] = None,
    use_thumb: Optional[bool] = None,
) -> str:
    """
    Full wiki image URL for an item. Keyword arguments override the
    matching fields of `options`.

      thumb:     {base}/thumb/{file}/{width}px-{file}
      full size: {base}/{file}
    """
    opts = options or ImageUrlOptions()
    if width is not None:
        opts = replace(opts, width=width)
    if use_thumb is not None:
        opts = replace(opts, use_thumb=use_thumb)

    filename = construct_image_filename(item_name)
    if opts.use_thumb:
        return f"{WIKI_IMAGE_BASE_URL}/thumb/{filename}/{opts.width}px-{filename}"
    return f"{WIKI_IMAGE_BASE_URL}/{filename}"


def get_item_image_urls(
    item_name: str, options: Optional[ImageUrlOptions] = None
) -> ImageUrls:
    # Variants are not part of wiki detail-image names, so both URLs match.
    url = get_item_image_url(item_name, options)
    return ImageUrls(variant_url=url, base_url=url)

"""
Markdown processing module for MarkdownImageLocalizer.

Finds network images in markdown text and rewrites their links.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, List

from logger_setup import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

# Inline images only. Does not cross line boundaries and the alt text
# may not contain a closing bracket.
NETWORK_IMAGE_PATTERN = re.compile(r'!\[(?P<alt>[^\]\n]*?)\]\((?P<url>https?://[^)\n]*?)\)')


@dataclass(frozen=True)
class ImageReference:
    """Represents a matched network image in markdown."""
    full_match: str  # Original markdown text
    alt_text: str    # Alt text for the image
    url: str         # Remote URL of the image


def find_network_images(markdown: str) -> List[ImageReference]:
    """
    Find all inline images whose target is an http(s) URL.

    Local paths and data URLs are ignored. Matches are returned in
    document order and repeated URLs are kept.
    """
    images = [
        ImageReference(m.group(0), m.group("alt"), m.group("url"))
        for m in NETWORK_IMAGE_PATTERN.finditer(markdown)
    ]
    logger.debug(f"Matched {len(images)} network image links")
    return images


def replace_images_with_local(markdown: str, images: List[ImageReference],
                              local_map: Dict[str, str]) -> str:
    """
    Replace network images with their local paths.

    Every occurrence of a reference's original markup is replaced. A URL
    that maps to itself, or is missing from the map, leaves the text as is.

    Args:
        markdown: The original markdown content
        images: References found by find_network_images
        local_map: Mapping of image URL to replacement path

    Returns:
        str: The rewritten markdown
    """
    result = markdown
    for image in images:
        local_path = local_map.get(image.url)
        if not local_path or local_path == image.url:
            continue
        new_mark = f"![{image.alt_text}]({local_path})"
        result = result.replace(image.full_match, new_mark)
    return result

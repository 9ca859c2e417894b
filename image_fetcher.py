"""
Image downloading and naming for MarkdownImageLocalizer.
"""

import logging
import os
import random
import re
import time

from exceptions import DownloadFailure
from http_client import HttpClient
from logger_setup import LOGGER_NAME
from utils import format_file_size

DEFAULT_ASSETS_DIR = "assets"
DEFAULT_EXTENSION = "jpg"
MAX_RANDOM_SUFFIX = 999

EXTENSION_PATTERN = re.compile(r'\.(\w+)(?:\?|$)', re.ASCII)


def get_image_extension(url: str) -> str:
    """
    Get the image extension from a URL.

    Args:
        url: The image URL

    Returns:
        str: The extension without the dot, "jpg" if none is found
    """
    match = EXTENSION_PATTERN.search(url)
    return match.group(1) if match else DEFAULT_EXTENSION


def generate_image_filename(url: str) -> str:
    """Build a file name of the form image_<timestamp>_<random>.<ext>."""
    timestamp = int(time.time() * 1000)
    suffix = random.randint(0, MAX_RANDOM_SUFFIX)
    return f"image_{timestamp}_{suffix}.{get_image_extension(url)}"


def to_markdown_path(path: str, start: str) -> str:
    """
    Express path relative to start as a markdown link target.

    Forward slashes are used on every platform and the result always
    begins with "./".
    """
    relative_path = os.path.relpath(path, start).replace(os.sep, '/')
    return relative_path if relative_path.startswith('./') else f"./{relative_path}"


class ImageFetcher:
    """Downloads images into the asset directory next to a document."""

    def __init__(self, http_client: HttpClient, assets_dir_name: str = DEFAULT_ASSETS_DIR):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.http_client = http_client
        self.assets_dir_name = assets_dir_name

    def assets_dir(self, document_dir: str) -> str:
        """Return the asset directory for a document directory."""
        return os.path.join(document_dir, self.assets_dir_name)

    def download(self, url: str, document_dir: str) -> str:
        """
        Download an image and save it under the document's asset directory.

        Args:
            url: The image URL
            document_dir: Directory containing the markdown document

        Returns:
            str: Path of the saved image relative to document_dir

        Raises:
            DownloadFailure: If the image cannot be retrieved or written
        """
        image_data = self.http_client.download_data(url)

        save_path = os.path.join(self.assets_dir(document_dir), generate_image_filename(url))
        try:
            os.makedirs(os.path.dirname(save_path), exist_ok=True)
            with open(save_path, 'wb') as f:
                f.write(image_data)
        except OSError as e:
            raise DownloadFailure(url, e) from e

        self.logger.info(f"Downloaded: {url} -> {save_path} ({format_file_size(len(image_data))})")
        return to_markdown_path(save_path, document_dir)

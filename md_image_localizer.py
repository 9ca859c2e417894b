#!/usr/bin/env python3
"""
Markdown Image Localizer - Downloads the remote images of a markdown file
and writes a copy of the document that links to the local files.

The rewritten document is saved as <name>_local.md next to the input and
the images go to an assets/ directory beside it. The input is never changed.
"""

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from cli_parser import CommandLineParser, prompt_for_markdown_file
from exceptions import DownloadFailure, LocalizerError
from http_client import HttpClient, create_http_client
from image_fetcher import DEFAULT_ASSETS_DIR, ImageFetcher
from logger_setup import LoggerSetup
from markdown_processor import find_network_images, replace_images_with_local
from utils import document_dir, local_output_path, read_markdown_file, write_markdown_file

__version__ = "1.0.0"


@dataclass
class LocalizationResult:
    """Outcome of localizing one markdown file."""
    input_file: str
    output_file: Optional[str] = None  # None when nothing was written
    images_found: int = 0
    images_converted: int = 0
    files_downloaded: int = 0
    failed_urls: List[str] = field(default_factory=list)


def localize_markdown_file(markdown_file: str, http_client: Optional[HttpClient] = None,
                           assets_dir_name: str = DEFAULT_ASSETS_DIR) -> LocalizationResult:
    """
    Download the network images of a markdown file and write the localized copy.

    Args:
        markdown_file: Path to the markdown file
        http_client: Client used for downloads (a requests client by default)
        assets_dir_name: Name of the image directory beside the document

    Returns:
        LocalizationResult: Counts and paths for the run

    Raises:
        InputReadFailure: If the markdown file cannot be read
        OutputWriteFailure: If the localized copy cannot be written
    """
    logger = LoggerSetup.get_logger()
    result = LocalizationResult(input_file=markdown_file)

    markdown = read_markdown_file(markdown_file)
    logger.info(f"Read file: {markdown_file}")

    images = find_network_images(markdown)
    result.images_found = len(images)
    logger.info(f"Found {len(images)} network images")

    if not images:
        logger.info("No network images to convert")
        return result

    base_dir = document_dir(markdown_file)
    owns_client = http_client is None
    if owns_client:
        http_client = create_http_client()
    fetcher = ImageFetcher(http_client, assets_dir_name)

    local_map: Dict[str, str] = {}
    try:
        for image in images:
            if image.url in local_map:
                logger.debug(f"Reusing result for repeated image: {image.url}")
                continue
            logger.info(f"Processing image: {image.url}")
            try:
                local_map[image.url] = fetcher.download(image.url, base_dir)
                result.files_downloaded += 1
                logger.info(f"Converted: {local_map[image.url]}")
            except DownloadFailure as e:
                logger.warning(f"Conversion failed: {e}")
                local_map[image.url] = image.url
                result.failed_urls.append(image.url)
    finally:
        if owns_client:
            http_client.close()

    result.images_converted = sum(1 for image in images if local_map[image.url] != image.url)

    updated_markdown = replace_images_with_local(markdown, images, local_map)

    output_file = local_output_path(markdown_file)
    write_markdown_file(updated_markdown, output_file)
    result.output_file = output_file
    logger.info(f"Wrote file: {output_file}")
    logger.info(f"Converted {result.images_converted} of {result.images_found} images")

    return result


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the application.

    Args:
        args: Command line arguments (uses sys.argv[1:] if None)

    Returns:
        int: Exit code
    """
    if args is None:
        args = sys.argv[1:]

    options = CommandLineParser.parse(args)
    logger = LoggerSetup.initialize_logger(options.debug, options.verbose,
                                           options.quiet, options.log_file)

    markdown_file = options.markdown_file
    if not markdown_file:
        try:
            markdown_file = prompt_for_markdown_file()
        except (EOFError, KeyboardInterrupt):
            logger.error("No markdown file given")
            return 1
        if not markdown_file:
            logger.error("No markdown file given")
            return 1

    try:
        result = localize_markdown_file(markdown_file, assets_dir_name=options.assets_dir)
    except LocalizerError as e:
        logger.error(str(e))
        if options.debug:
            logger.exception("Stack trace:")
        return 1

    if result.failed_urls:
        logger.info("The following images were not downloaded and still point to the network:")
        for url in result.failed_urls:
            logger.info(f"  {url}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Utility functions for MarkdownImageLocalizer.
"""

import os

from exceptions import InputReadFailure, OutputWriteFailure

OUTPUT_SUFFIX = "_local"


def format_file_size(size_bytes: float, decimals: int = 1) -> str:
    """
    Format a file size in human-readable form.

    Args:
        size_bytes: The size in bytes
        decimals: Number of decimal places to display

    Returns:
        str: The formatted file size
    """
    units = ["B", "KB", "MB", "GB", "TB"]

    if size_bytes == 0:
        return "0 B"

    unit_index = 0
    while size_bytes >= 1024 and unit_index < len(units) - 1:
        size_bytes /= 1024.0
        unit_index += 1

    return f"{size_bytes:.{decimals}f} {units[unit_index]}"


def document_dir(markdown_file: str) -> str:
    """Absolute directory of a markdown file; every output is placed here."""
    return os.path.dirname(os.path.abspath(markdown_file))


def local_output_path(markdown_file: str) -> str:
    """
    Path of the rewritten document: <stem>_local.md beside the input.

    Args:
        markdown_file: Path to the input markdown file

    Returns:
        str: Path to the output file
    """
    stem, _ = os.path.splitext(os.path.basename(markdown_file))
    return os.path.join(document_dir(markdown_file), f"{stem}{OUTPUT_SUFFIX}.md")


def read_markdown_file(file_path: str) -> str:
    """
    Read a whole markdown file as UTF-8 text.

    Raises:
        InputReadFailure: If the file is missing or unreadable
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadFailure(file_path, e) from e


def write_markdown_file(content: str, file_path: str) -> None:
    """
    Write markdown text to a file as UTF-8.

    Raises:
        OutputWriteFailure: If the file cannot be written
    """
    try:
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteFailure(file_path, e) from e

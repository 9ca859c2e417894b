"""
Command line argument parser for MarkdownImageLocalizer.
"""

import argparse
from dataclasses import dataclass
from typing import List, Optional

from image_fetcher import DEFAULT_ASSETS_DIR

PROMPT = "Enter the Markdown file path: "


@dataclass
class CommandLineOptions:
    """Holds the parsed command line options."""
    markdown_file: Optional[str] = None
    assets_dir: str = DEFAULT_ASSETS_DIR
    log_file: Optional[str] = None
    debug: bool = False
    verbose: bool = False
    quiet: bool = False


class CommandLineParser:
    """Parses command line arguments."""

    @staticmethod
    def parse(args: List[str]) -> CommandLineOptions:
        """
        Parse command line arguments.

        Args:
            args: Command line arguments

        Returns:
            CommandLineOptions: The parsed options
        """
        parser = argparse.ArgumentParser(
            prog="md-image-localizer",
            description="Download the remote images of a markdown file and write a copy "
                        "that links to the local files."
        )

        parser.add_argument(
            "markdown_file", nargs="?",
            help="Markdown file to process. Prompted for on stdin if omitted."
        )
        parser.add_argument(
            "--assets-dir", type=str, default=DEFAULT_ASSETS_DIR, metavar="NAME",
            help=f"Name of the image directory created next to the markdown file (default: {DEFAULT_ASSETS_DIR})"
        )
        parser.add_argument(
            "--log-file", "-l", type=str,
            help="Also write log output to FILE"
        )
        verbosity_group = parser.add_mutually_exclusive_group()
        verbosity_group.add_argument(
            "--quiet", "-Q", action="store_true",
            help="Quiet console output: only show errors on stderr."
        )
        verbosity_group.add_argument(
            "--verbose", "-v", action="store_true",
            help="Verbose output: include per-request details in the log file."
        )
        verbosity_group.add_argument(
            "--debug", "-d", action="store_true",
            help="Debug console output: show detailed debug messages on stderr."
        )

        parsed_args = parser.parse_args(args)

        return CommandLineOptions(
            markdown_file=parsed_args.markdown_file,
            assets_dir=parsed_args.assets_dir,
            log_file=parsed_args.log_file,
            debug=parsed_args.debug,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )


def clean_path_input(raw: str) -> str:
    """Strip whitespace and one pair of surrounding quotes from a typed path."""
    path = raw.strip()
    if len(path) >= 2 and path[0] == path[-1] and path[0] in ('"', "'"):
        path = path[1:-1].strip()
    return path


def prompt_for_markdown_file() -> str:
    """Ask for the markdown file path on stdin and read one line."""
    return clean_path_input(input(PROMPT))

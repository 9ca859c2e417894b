"""
Logging setup module for MarkdownImageLocalizer.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = 'md-image-localizer'


class LoggerSetup:
    """Sets up and configures the application logger."""

    _logger: Optional[logging.Logger] = None

    @classmethod
    def initialize_logger(cls, debug: bool = False, verbose: bool = False,
                          quiet: bool = False, log_file: Optional[str] = None) -> logging.Logger:
        """
        Initialize and configure the application logger.

        Args:
            debug: Show debug messages on the console
            verbose: Write debug messages to the log file
            quiet: Only show errors on the console
            log_file: Optional path of a log file
        """
        logger = logging.getLogger(LOGGER_NAME)
        # Handlers filter by their own levels
        logger.setLevel(logging.DEBUG)

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
            handler.close()

        if log_file:
            try:
                file_handler = logging.FileHandler(log_file, 'w', encoding='utf-8')
                file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)-8s: %(message)s'))
                file_handler.setLevel(logging.DEBUG if (debug or verbose) else logging.INFO)
                logger.addHandler(file_handler)
            except OSError as e:
                # Logging is not available yet
                print(f"Failed to create log file '{log_file}': {e}", file=sys.stderr)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        if debug:
            console_handler.setLevel(logging.DEBUG)
        elif quiet:
            console_handler.setLevel(logging.ERROR)
        else:
            console_handler.setLevel(logging.INFO)
        logger.addHandler(console_handler)

        logger.propagate = False
        cls._logger = logger
        return logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get the application logger, configuring defaults on first use.

        Returns:
            logging.Logger: The application logger
        """
        if cls._logger is None:
            cls.initialize_logger()
        return cls._logger

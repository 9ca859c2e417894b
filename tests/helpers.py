"""
Shared test doubles.
"""

import logging

from exceptions import DownloadFailure
from http_client import HttpClient
from logger_setup import LOGGER_NAME, LoggerSetup


class FakeHttpClient(HttpClient):
    """Serves canned responses and records every requested URL."""

    def __init__(self, responses=None):
        self.responses = responses or {}
        self.requested = []
        self.closed = False

    def download_data(self, url):
        self.requested.append(url)
        if url not in self.responses:
            raise DownloadFailure(url, "404 Client Error: Not Found")
        return self.responses[url]

    def close(self):
        self.closed = True


def reset_logging():
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    LoggerSetup._logger = None

"""
HTTP client for downloading images from URLs.
"""

from abc import ABC, abstractmethod
import logging
from typing import Optional

import requests
from requests.exceptions import RequestException

from exceptions import DownloadFailure
from logger_setup import LOGGER_NAME

DOWNLOAD_TIMEOUT = 30  # seconds


class HttpClient(ABC):
    """Abstract base class for HTTP operations."""

    @abstractmethod
    def download_data(self, url: str) -> bytes:
        """
        Download data from a URL.

        Args:
            url: The URL to download from

        Returns:
            bytes: The full response body

        Raises:
            DownloadFailure: If the request fails or the response is not 2xx
        """
        pass

    def close(self) -> None:
        """Release any resources held by the client."""
        pass


class RequestsClient(HttpClient):
    """Implementation of HttpClient using the requests library."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DOWNLOAD_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout

    def download_data(self, url: str) -> bytes:
        """
        Download data from a URL using the requests library.

        Args:
            url: The URL to download from

        Returns:
            bytes: The downloaded data
        """
        logger = logging.getLogger(LOGGER_NAME)

        try:
            logger.debug(f"Downloading from URL: {url}")
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except RequestException as e:
            raise DownloadFailure(url, e) from e
        except ValueError as e:
            # urllib3 rejects some malformed hosts with LocationParseError
            raise DownloadFailure(url, e) from e

        logger.debug(f"Download successful: {url} - Size: {len(response.content)} bytes")
        return response.content

    def close(self) -> None:
        """Release the pooled connections held by the session."""
        self.session.close()


def create_http_client() -> HttpClient:
    """
    Factory function to create an HTTP client.

    Returns:
        HttpClient: An instance of an HttpClient implementation
    """
    return RequestsClient()

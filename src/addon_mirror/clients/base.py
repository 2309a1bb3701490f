"""Base HTTP client with optional retry and timeout support."""

from abc import ABC
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..exceptions import HTTPError, MirrorError
from ..utils.logging import get_logger

logger = get_logger("clients.base")


class BaseHTTPClient(ABC):
    """Base HTTP client.

    Requests fail fast by default: no retries and no timeout. Both can be
    switched on by subclasses that want them.
    """

    error_class: type[MirrorError] = HTTPError

    def __init__(
        self,
        timeout: Optional[int] = None,
        max_retries: int = 0,
        backoff_factor: float = 0.5,
    ):
        """Initialize HTTP client.

        Args:
            timeout: Request timeout in seconds, None to wait indefinitely.
            max_retries: Maximum number of retries for failed requests.
            backoff_factor: Backoff factor for retry delays.
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a session, with a retry strategy if retries are enabled."""
        session = requests.Session()

        if self.max_retries:
            retry_strategy = Retry(
                total=self.max_retries,
                backoff_factor=self.backoff_factor,
                status_forcelist=[429, 500, 502, 503, 504],
                allowed_methods=["HEAD", "GET"],
            )
            adapter = HTTPAdapter(max_retries=retry_strategy)
            session.mount("http://", adapter)
            session.mount("https://", adapter)

        return session

    def _request(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Execute HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, etc.).
            url: Request URL.
            headers: Optional request headers.
            **kwargs: Additional arguments passed to requests.

        Returns:
            Response object with a success status.

        Raises:
            HTTPError: If the request fails or the status is not a success,
                as an instance of the client's `error_class`.
        """
        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                timeout=self.timeout,
                **kwargs,
            )
            response.raise_for_status()
            return response

        except requests.exceptions.Timeout:
            logger.error(f"Request timeout: {url}")
            raise self.error_class(f"Request timeout: {url}") from None
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error: {url} - {e}")
            raise self.error_class(f"Connection error: {url}") from e
        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTP error: {url} - {e}")
            raise self.error_class(f"HTTP error: {url} - {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {url} - {e}")
            raise self.error_class(f"Request failed: {url}") from e

    def get(
        self,
        url: str,
        headers: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Execute GET request."""
        return self._request("GET", url, headers=headers, **kwargs)

    def post(
        self,
        url: str,
        headers: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> requests.Response:
        """Execute POST request."""
        return self._request("POST", url, headers=headers, **kwargs)

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self) -> "BaseHTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

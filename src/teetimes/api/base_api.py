"""
Base API client for the tee times application.
"""

import time
from types import TracebackType

import requests
from requests.adapters import HTTPAdapter

from teetimes.error_codes import ErrorCode
from teetimes.exceptions import HttpStatusError
from teetimes.exceptions import TransportError
from teetimes.utils.logging_utils import LoggerMixin


class BaseAPI(LoggerMixin):
    """Plain HTML fetcher with a fixed timeout and browser user agent."""

    DEFAULT_TIMEOUT = 20
    USER_AGENT = 'Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:85.0) Gecko/20100101 Firefox/85.0'
    FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'

    def __init__(self, timeout: float | None = None, session: requests.Session | None = None):
        """Initialize API client.

        Args:
            timeout: Request timeout in seconds
            session: Optional preconfigured requests session
        """
        super().__init__()
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """
        Create a requests session without retries.

        Returns:
            Session sending the browser user agent
        """
        session = requests.Session()
        session.headers.update({'User-Agent': self.USER_AGENT})

        # A failed attempt is final
        adapter = HTTPAdapter(max_retries=0)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def __enter__(self) -> "BaseAPI":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session."""
        self.session.close()

    def _validate_response(self, response: requests.Response, url: str) -> None:
        """
        Validate response status.

        Args:
            response: Response to validate
            url: Requested URL, for error messages

        Raises:
            HttpStatusError: If status code is outside the 2xx range
        """
        if not 200 <= response.status_code <= 299:
            raise HttpStatusError(
                f"Expected a 200 result, got {response.status_code}",
                status_code=response.status_code,
                url=url
            )

    def fetch(self, url: str, post_body: str | None = None) -> bytes:
        """
        Fetch a page.

        Args:
            url: URL to fetch
            post_body: Pre-encoded ``key=value&key=value`` body; sends a POST when given

        Returns:
            Raw response body

        Raises:
            TransportError: If the request fails or returns no body
            HttpStatusError: If the response status is not 2xx
        """
        method = "GET"
        data = None
        headers = None
        if post_body is not None:
            method = "POST"
            data = post_body.encode("utf-8")
            headers = {'Content-Type': self.FORM_CONTENT_TYPE}

        start_time = time.time()

        try:
            with self.session.request(
                method=method,
                url=url,
                data=data,
                headers=headers,
                timeout=self.timeout
            ) as response:
                elapsed = time.time() - start_time
                self.logger.debug(f"BaseAPI: {method} {url} returned {response.status_code} in {elapsed:.2f} seconds")

                self._validate_response(response, url)
                content = response.content

        except requests.exceptions.Timeout as e:
            elapsed = time.time() - start_time
            self.logger.debug(f"BaseAPI: {method} {url} timed out after {elapsed:.2f} seconds: {e}")
            raise TransportError(
                f"Request to '{url}' timed out after {elapsed:.2f} seconds",
                ErrorCode.TIMEOUT,
                {"url": url}
            ) from e

        except requests.exceptions.RequestException as e:
            self.logger.debug(f"BaseAPI: {method} {url} failed: {e}")
            raise TransportError(f"Something went wrong downloading '{url}': {e!s}", details={"url": url}) from e

        if not content:
            raise TransportError(f"Something went wrong downloading '{url}': empty response", details={"url": url})

        return content

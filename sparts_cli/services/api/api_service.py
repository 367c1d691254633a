import logging
import time
from typing import Dict, Any
from requests import request, Response
from requests.exceptions import Timeout, ConnectionError
from yarl import URL

logger = logging.getLogger(__name__)


class HttpService:
    """
    Makes HTTP requests against a single base address, retrying on connection errors
    and timeouts with an exponential backoff.
    """

    def __init__(
        self,
        base_url: str,
        timeout: int,
        retries: int,
        backoff: float,
    ) -> None:
        self.base_url = base_url
        self.__timeout = timeout
        self.__retries = retries
        self.__backoff = backoff

    def do_request(
        self,
        method: str,
        sub_route: str | None = None,
        json: Dict[str, Any] | None = None,
        headers: Dict[str, str] | None = None,
    ) -> Response:
        """
        Perform an HTTP request. Raises ConnectionError when no attempt reached the server,
        any other requests exception (invalid url, invalid header) is raised as-is.
        """
        request_headers = self.make_headers(headers)
        url = self.make_target_url(sub_route)

        for attempt in range(self.__retries):
            try:
                logger.info(f"Making HTTP {method} request to {url}")
                response = request(
                    method=method,
                    url=str(url),
                    headers=request_headers,
                    timeout=self.__timeout,
                    json=json,
                )
                return response
            except (
                ConnectionError,
                Timeout,
            ) as e:
                logger.warning(f"Failed to make request to {url} on attempt {attempt}")
                logger.debug(f"Request to {url} failed with: {e}")

                if attempt < self.__retries - 1:
                    logger.info(f"Retrying in {self.__backoff * (2**attempt)} seconds")
                    time.sleep(self.__backoff * (2**attempt))

        logger.error(f"Failed to make request to {url} after {self.__retries} attempts")
        raise ConnectionError("Failed to make request after too many retries")

    def make_headers(self, extra: Dict[str, str] | None = None) -> Dict[str, str]:
        # The ledger only speaks json
        headers = {"Content-Type": "application/json"}
        if extra:
            headers.update(extra)

        return headers

    def make_target_url(self, sub_route: str | None = None) -> URL:
        url = self.base_url
        if sub_route:
            url = f"{url.rstrip('/')}/{sub_route.lstrip('/')}"

        return URL(url)

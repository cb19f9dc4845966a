"""Base HTTP client with retry logic and error handling."""

from collections.abc import Sequence
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from shutterstock_connector.utils.exceptions import ExternalServiceError, RateLimitError
from shutterstock_connector.utils.logging import get_logger

logger = get_logger(__name__)

QueryParams = dict[str, Any] | Sequence[tuple[str, Any]]


class BaseHTTPClient:
    """Synchronous HTTP client that opens one short-lived connection per request."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        max_attempts: int = 1,
        service_name: str = "http_client",
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the HTTP client.

        Args:
            base_url: Base URL for all requests
            timeout: Request timeout in seconds
            max_attempts: Attempts per request on transport errors (1 disables retries)
            service_name: Name used in logs and errors
            transport: Optional transport override, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.service_name = service_name
        self._transport = transport

    def _open(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            transport=self._transport,
        )

    def _get_headers(self) -> dict[str, str]:
        """Get default headers. Override in subclasses."""
        return {
            "Accept": "application/json",
            "User-Agent": "ShutterstockConnector/1.0",
        }

    def _make_request(
        self,
        method: str,
        endpoint: str,
        params: QueryParams | None = None,
        json_data: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        """Make an HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            params: Query parameters, a list of pairs for repeated keys
            json_data: JSON body data
            headers: Additional headers
            auth: Basic auth credentials

        Returns:
            Parsed JSON response

        Raises:
            ExternalServiceError: On request failure
            RateLimitError: On 429 response
        """
        request_headers = self._get_headers()
        if headers:
            request_headers.update(headers)

        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        @retry(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )
        def _execute_request() -> httpx.Response:
            with self._open() as client:
                return client.request(
                    method=method,
                    url=url,
                    params=params,
                    json=json_data,
                    headers=request_headers,
                    auth=auth,
                )

        try:
            response = _execute_request()
        except httpx.TimeoutException as e:
            logger.error("request_timeout", service=self.service_name, url=url)
            raise ExternalServiceError(
                message=f"Request timeout to {self.service_name}",
                service=self.service_name,
                details={"url": url, "error": str(e)},
            ) from e
        except httpx.TransportError as e:
            logger.error("transport_error", service=self.service_name, url=url, error=str(e))
            raise ExternalServiceError(
                message=f"Connection error to {self.service_name}",
                service=self.service_name,
                details={"url": url, "error": str(e)},
            ) from e
        except httpx.RequestError as e:
            # Redirect loops and undecodable bodies
            logger.error("request_error", service=self.service_name, url=url, error=str(e))
            raise ExternalServiceError(
                message=f"Request to {self.service_name} failed: {e}",
                service=self.service_name,
                details={"url": url, "error": str(e)},
            ) from e

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """Handle HTTP response and extract JSON.

        Raises:
            RateLimitError: On 429 response
            ExternalServiceError: On error responses or a non-JSON body
        """
        if response.status_code == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                service=self.service_name,
                retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            )

        if response.status_code >= 400:
            logger.error(
                "api_error_response",
                service=self.service_name,
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise ExternalServiceError(
                message=f"{self.service_name} API error: {response.status_code}",
                service=self.service_name,
                status_code=response.status_code,
                details={"response": response.text[:500]},
            )

        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceError(
                message=f"Invalid JSON response from {self.service_name}",
                service=self.service_name,
                status_code=response.status_code,
                details={"error": str(e), "response": response.text[:200]},
            ) from e

    def get(
        self,
        endpoint: str,
        params: QueryParams | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        """Make a GET request."""
        return self._make_request("GET", endpoint, params=params, headers=headers, auth=auth)

    def post(
        self,
        endpoint: str,
        json_data: dict[str, Any] | None = None,
        params: QueryParams | None = None,
        headers: dict[str, str] | None = None,
        auth: tuple[str, str] | None = None,
    ) -> Any:
        """Make a POST request."""
        return self._make_request(
            "POST", endpoint, params=params, json_data=json_data, headers=headers, auth=auth
        )

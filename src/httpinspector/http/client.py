"""
HTTP client for request inspection.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import json
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from httpinspector.errors import ParseError, TransportError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass(frozen=True)
class HTTPRequest:
    """Immutable HTTP request configuration."""
    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    json_body: Any = None
    auth: tuple[str, str] | None = None  # (username, password)
    bearer_token: str | None = None

    @property
    def full_url(self) -> str:
        return build_url_with_params(self.url, self.params)

    @property
    def effective_headers(self) -> dict[str, str]:
        """Headers as sent, including the bearer token and JSON content type."""
        headers = dict(self.headers)
        if self.bearer_token:
            headers = merge_bearer_token(headers, self.bearer_token)
        if self.json_body is not None and not any(
            h.lower() == "content-type" for h in headers
        ):
            headers["Content-Type"] = "application/json"
        return headers


@dataclass
class HTTPResponse:
    """HTTP response details."""
    status_code: int
    status_text: str
    headers: dict[str, str]
    body: Any
    text: str
    elapsed_ms: float
    content_type: str | None = None
    redirect_chain: list[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status_code < 400

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def is_json(self) -> bool:
        return not isinstance(self.body, str)


def build_url_with_params(url: str, params: Mapping[str, str] | None) -> str:
    """Append URL-encoded query parameters to a URL, preserving their order."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return url + separator + urlencode(list(params.items()))


def merge_bearer_token(headers: Mapping[str, str] | None, token: str) -> dict[str, str]:
    """Return a copy of headers with a bearer Authorization header added."""
    merged = dict(headers or {})
    merged["Authorization"] = f"Bearer {token}"
    return merged


def decode_body(response: httpx.Response) -> Any:
    """Decode a response payload as JSON, falling back to its text."""
    text = response.text
    if not text.strip():
        return text
    try:
        return json.loads(text)
    except ValueError:
        return text


class HTTPClient:
    """HTTP client executing a single inspected request at a time."""

    def __init__(self, timeout: float | None = None, verify_ssl: bool = True,
                 transport: httpx.BaseTransport | None = None):
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.transport = transport
        self._client: httpx.Client | None = None

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                verify=self.verify_ssl,
                follow_redirects=True,
                transport=self.transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def request(self, req: HTTPRequest) -> HTTPResponse:
        """Make an HTTP request.

        Non-2xx responses are returned like any other response. Failures
        that leave no response raise TransportError.
        """
        method = req.method.upper()
        url = req.full_url
        headers = req.effective_headers

        content = None
        if req.json_body is not None:
            content = json.dumps(req.json_body)

        auth = None
        if req.auth:
            auth = httpx.BasicAuth(req.auth[0], req.auth[1])

        logger.debug("%s %s", method, url)
        client = self._get_client()
        start_time = time.time()

        try:
            response = client.request(
                method=method,
                url=url,
                headers=headers,
                content=content,
                auth=auth,
            )
        except httpx.InvalidURL as e:
            raise ParseError("URL", str(e)) from e
        except httpx.ConnectError as e:
            logger.debug("Connection to %s failed: %s", url, e)
            raise TransportError(f"Connection failed: {e}") from e
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out after {self.timeout}s") from e
        except httpx.TooManyRedirects as e:
            raise TransportError(f"Too many redirects: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(str(e) or e.__class__.__name__) from e

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug("%s %s -> %d in %.2f ms", method, url,
                     response.status_code, elapsed_ms)

        return HTTPResponse(
            status_code=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            body=decode_body(response),
            text=response.text,
            elapsed_ms=elapsed_ms,
            content_type=response.headers.get("content-type"),
            redirect_chain=[str(r.url) for r in response.history],
        )

    def get(self, url: str, **kwargs) -> HTTPResponse:
        """Make a GET request."""
        return self.request(HTTPRequest(url=url, method="GET", **kwargs))

    def post(self, url: str, **kwargs) -> HTTPResponse:
        """Make a POST request."""
        return self.request(HTTPRequest(url=url, method="POST", **kwargs))

    def put(self, url: str, **kwargs) -> HTTPResponse:
        """Make a PUT request."""
        return self.request(HTTPRequest(url=url, method="PUT", **kwargs))

    def delete(self, url: str, **kwargs) -> HTTPResponse:
        """Make a DELETE request."""
        return self.request(HTTPRequest(url=url, method="DELETE", **kwargs))


def format_json(data: Any, indent: int = 2) -> str:
    """Format JSON data for display."""
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str)

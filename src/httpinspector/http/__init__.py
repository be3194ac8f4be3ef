"""
HTTP request execution.

Provides request building and execution with support for:
- Custom headers and query parameters
- JSON request bodies
- Basic and bearer authentication
- Response timing and JSON decoding

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

from httpinspector.http.client import (
    HTTPClient,
    HTTPRequest,
    HTTPResponse,
    build_url_with_params,
    merge_bearer_token,
)
from httpinspector.http.options import build_request

__all__ = [
    "HTTPClient",
    "HTTPRequest",
    "HTTPResponse",
    "build_request",
    "build_url_with_params",
    "merge_bearer_token",
]

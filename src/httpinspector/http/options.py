"""
Parsing of JSON-typed command-line options into an HTTPRequest.

All validation happens here, before any network call is made.
"""

import json
from typing import Any

from httpinspector.errors import ParseError
from httpinspector.http.client import SUPPORTED_METHODS, HTTPRequest

# Methods that carry a request body
BODY_METHODS = ("POST", "PUT")


def parse_json_option(name: str, raw: str | None) -> Any:
    """Decode a JSON option value. Returns None when the option was not given."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(name, f"malformed JSON ({e})") from e


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def parse_string_map(name: str, raw: str | None) -> dict[str, str]:
    """Decode a JSON object option whose values are used as strings."""
    data = parse_json_option(name, raw)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(name, "expected a JSON object")
    return {str(k): _stringify(v) for k, v in data.items()}


def parse_basic_auth(raw: str | None, name: str = "--auth") -> tuple[str, str] | None:
    """Decode basic auth credentials given as {"username": ..., "password": ...}."""
    data = parse_json_option(name, raw)
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ParseError(name, 'expected {"username": ..., "password": ...}')

    username = data.get("username")
    password = data.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        raise ParseError(name, "username and password must both be strings")
    return username, password


def parse_headers(raw: str | None, token: str | None = None) -> dict[str, str]:
    """Decode the headers option. Header names and values must be ASCII."""
    headers = parse_string_map("--headers", raw)
    for h_name, h_value in headers.items():
        if not (h_name.isascii() and h_value.isascii()):
            raise ParseError("--headers", f"header {h_name!r} must contain only ASCII characters")
    if token is not None and not token.isascii():
        raise ParseError("--token", "must contain only ASCII characters")
    return headers


def build_request(
    method: str,
    url: str,
    headers: str | None = None,
    data: str | None = None,
    query_params: str | None = None,
    auth: str | None = None,
    token: str | None = None,
) -> HTTPRequest:
    """Build an HTTPRequest from raw command-line option strings."""
    method = method.upper()
    if method not in SUPPORTED_METHODS:
        raise ParseError("method", f"{method} is not one of {', '.join(SUPPORTED_METHODS)}")
    if not url:
        raise ParseError("URL", "must not be empty")

    header_map = parse_headers(headers, token)
    params = parse_string_map("--queryParams", query_params)
    credentials = parse_basic_auth(auth)

    body = parse_json_option("--data", data)
    if body is not None and method not in BODY_METHODS:
        raise ParseError("--data", f"a request body is not supported for {method}")

    return HTTPRequest(
        url=url,
        method=method,
        headers=header_map,
        params=params,
        json_body=body,
        auth=credentials,
        bearer_token=token or None,
    )

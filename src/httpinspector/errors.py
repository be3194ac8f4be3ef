"""
Error taxonomy for HTTP Inspector.

Each error carries the process exit code the CLI maps it to.
"""


class InspectorError(Exception):
    """Base exception for HTTP Inspector errors."""
    exit_code = 1


class ParseError(InspectorError):
    """A command-line option could not be parsed."""
    exit_code = 2

    def __init__(self, option: str, message: str):
        self.option = option
        super().__init__(f"Invalid {option}: {message}")


class TransportError(InspectorError):
    """The request never produced a response."""
    exit_code = 3


class ExportError(InspectorError):
    """The response body could not be exported."""
    exit_code = 4


class HTTPStatusError(InspectorError):
    """A non-2xx response when the caller asked for status checking."""
    exit_code = 5

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Request failed with status code {status_code}")

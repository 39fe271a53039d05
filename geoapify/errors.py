import json
from typing import Optional


class GeoapifyError(Exception):
    """Base class for every error raised by the client itself."""


class ConfigError(GeoapifyError):
    """Raised when client configuration is missing or invalid."""


class APIError(GeoapifyError):
    """Raised for any non-2xx response from the API.

    Attributes:
        status_code (int): HTTP status code of the response.
        message (str): Best-effort message extracted from the body.
        raw_body (bytes): The unmodified response body.
    """

    def __init__(self, status_code: int, message: str = "", raw_body: bytes = b""):
        self.status_code = status_code
        self.message = message
        self.raw_body = raw_body
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.message:
            return f"geoapify: API error {self.status_code}: {self.message}"
        return f"geoapify: API error {self.status_code}"

    @classmethod
    def from_response(cls, status_code: int, body: bytes) -> "APIError":
        """Builds an APIError, pulling the message out of the body.

        The message is the JSON `message` field, else the JSON `error` field,
        else the body as text. A body whose `message` or `error` is not a
        string is treated as text.
        """
        message = ""
        try:
            data = json.loads(body)
        except ValueError:
            data = None

        fields = ("message", "error")
        if isinstance(data, dict) and all(
            data.get(key) is None or isinstance(data[key], str) for key in fields
        ):
            message = data.get("message") or data.get("error") or ""

        if not message:
            message = body.decode("utf-8", errors="replace")
        return cls(status_code, message, body)


class RequestError(GeoapifyError):
    """Raised for failures that are not API responses (never retried).

    Attributes:
        phase (str): Which step of the call failed.
    """

    phase = "request"

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{self.phase}{detail}")


class RequestBuildError(RequestError):
    phase = "building request"


class TransportError(RequestError):
    phase = "executing request"


class ResponseReadError(RequestError):
    phase = "reading response"


class DecodeError(RequestError):
    phase = "decoding response"


class RetryableError(GeoapifyError):
    """Raised by a single attempt that failed with a retryable status (429 or 5xx).

    Internal to a call: the client unwraps it and surfaces `error` once no
    further attempt will be made.

    Attributes:
        error (APIError): The failure from this attempt.
        retry_after (str, optional): Raw `Retry-After` header value, if any.
    """

    def __init__(self, error: APIError, retry_after: Optional[str] = None):
        self.error = error
        self.retry_after = retry_after
        super().__init__(str(error))


class PollTimeoutError(GeoapifyError):
    """Raised when a polling loop runs past its timeout."""


def as_api_error(exc: BaseException) -> Optional[APIError]:
    """Returns the APIError behind `exc`, following the cause chain."""
    seen = set()
    while exc is not None and id(exc) not in seen:
        if isinstance(exc, APIError):
            return exc
        seen.add(id(exc))
        exc = exc.__cause__
    return None

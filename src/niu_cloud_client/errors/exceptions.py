"""Structured exceptions for NIU cloud errors."""

from typing import TYPE_CHECKING, Any

from niu_cloud_client.errors.models import ErrorDebug, message_detail

if TYPE_CHECKING:
    import httpx


class NiuCloudError(Exception):
    """Base exception for every failure surfaced by the client.

    Attributes:
        client: The client instance the failing call was made on.
        debug: Capture timestamp and name of the originating operation.
        detail: ``{"message": ...}`` for plain errors, the upstream body for
            domain errors, the underlying exception for transport errors.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        client: Any = None,
        detail: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.client = client
        self.debug = ErrorDebug(operation=operation)
        self.detail = detail if detail is not None else message_detail(message)


class InputValidationError(NiuCloudError):
    """A required input field is missing or has the wrong type."""

    def __init__(self, message: str, field: str, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class UnknownEndpointError(NiuCloudError, LookupError):
    """No endpoint descriptor is registered under the requested name."""

    pass


class PreconditionError(NiuCloudError):
    """The operation needs a session token but none is set."""

    pass


class TransportError(NiuCloudError):
    """Network or protocol failure reported by the HTTP transport."""

    def __init__(self, message: str, cause: Exception, **kwargs):
        kwargs.setdefault("detail", cause)
        super().__init__(message, **kwargs)
        self.cause = cause


class ProtocolError(NiuCloudError):
    """The HTTP response is malformed or its status code is not 200."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.response = response


class ClientError(ProtocolError):
    """4xx responses."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ServerError(ProtocolError):
    """5xx responses."""

    pass


class DomainError(NiuCloudError):
    """HTTP 200, but the body's ``status`` field reports a failure.

    The full upstream body is kept as ``detail`` (and ``body``) because it
    carries the vendor-specific error code and description.
    """

    def __init__(self, message: str, body: dict[str, Any], **kwargs):
        kwargs.setdefault("detail", body)
        super().__init__(message, **kwargs)
        self.body = body
        self.status = body.get("status")
        self.desc = body.get("desc")
        self.trace = body.get("trace")


class InvalidCredentialsError(DomainError):
    """The login endpoint rejected the account, password or country code."""

    def __init__(self, message: str, body: dict[str, Any], **kwargs):
        kwargs.setdefault("detail", message_detail(message))
        super().__init__(message, body, **kwargs)


class MalformedResponseError(NiuCloudError):
    """A successful response lacks a field the operation depends on."""

    def __init__(self, message: str, body: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.body = body

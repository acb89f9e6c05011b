"""Translation of HTTP responses into results or classified errors."""

from typing import Any

import httpx

from niu_cloud_client.errors.exceptions import (
    ClientError,
    DomainError,
    ForbiddenError,
    InvalidCredentialsError,
    MalformedResponseError,
    NotFoundError,
    ProtocolError,
    ServerError,
    UnauthorizedError,
)


def parse_body(response: httpx.Response) -> Any:
    """Decode a JSON response body, or return None if it is not JSON."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def raise_for_status(response: Any, *, operation: str, client: Any = None) -> None:
    """Raise the matching ProtocolError unless ``response`` is a usable 200.

    Args:
        response: HTTP response object (or whatever the transport produced)
        operation: Name of the calling operation, for the error context
        client: Client instance to attach to the error

    Raises:
        ProtocolError subclass based on status code
    """
    if not isinstance(response, httpx.Response):
        raise ProtocolError("Invalid response.", operation=operation, client=client)

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        raise ProtocolError("Status code is missing.", operation=operation, client=client)

    if status_code == 200:
        return

    exception_map = {
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
    }

    if status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = ProtocolError

    raise exc_class(
        f"Bad request: {status_code}",
        status_code=status_code,
        response=response,
        operation=operation,
        client=client,
    )


def has_failure_status(body: dict[str, Any]) -> bool:
    """True if the body carries a numeric, non-zero ``status`` field.

    A body without ``status`` counts as success.
    """
    status = body.get("status")
    if isinstance(status, bool) or not isinstance(status, (int, float)):
        return False
    return status != 0


def interpret_response(response: Any, body: Any, *, operation: str, client: Any = None) -> dict[str, Any]:
    """Return the parsed body of a successful call, or raise.

    Checks run in order and the first failing one wins: response shape,
    status code presence, HTTP status, body presence, then the body's own
    ``status`` field.

    Raises:
        ProtocolError: The response is unusable or its status is not 200
        DomainError: The body reports an application-level failure
    """
    raise_for_status(response, operation=operation, client=client)

    if not isinstance(body, dict):
        raise ProtocolError(
            "No body received.",
            status_code=response.status_code,
            response=response,
            operation=operation,
            client=client,
        )

    if has_failure_status(body):
        desc = body.get("desc") or body.get("message")
        message = f"Request failed with status {body['status']}"
        if desc:
            message += f": {desc}"
        raise DomainError(message, body, operation=operation, client=client)

    return body


def extract_token(response: Any, body: Any, *, operation: str, client: Any = None) -> str:
    """Return the session token from a login response, or raise.

    Raises:
        ProtocolError: The response is unusable or its status is not 200
        InvalidCredentialsError: The service rejected the login data
        MalformedResponseError: The body has no usable ``data.token``
    """
    raise_for_status(response, operation=operation, client=client)

    if not isinstance(body, dict):
        raise ProtocolError(
            "No body received.",
            status_code=response.status_code,
            response=response,
            operation=operation,
            client=client,
        )

    if has_failure_status(body):
        raise InvalidCredentialsError("Invalid login data.", body, operation=operation, client=client)

    data = body.get("data")
    if not isinstance(data, dict):
        raise MalformedResponseError("Data is missing in response.", body, operation=operation, client=client)

    token = data.get("token")
    if not isinstance(token, str):
        raise MalformedResponseError("Token is missing in response.", body, operation=operation, client=client)
    if not token:
        raise MalformedResponseError("Token is empty in response.", body, operation=operation, client=client)

    return token

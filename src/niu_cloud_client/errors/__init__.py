"""Error taxonomy and response interpretation for the NIU cloud client."""

from niu_cloud_client.errors.exceptions import (
    ClientError,
    DomainError,
    ForbiddenError,
    InputValidationError,
    InvalidCredentialsError,
    MalformedResponseError,
    NiuCloudError,
    NotFoundError,
    PreconditionError,
    ProtocolError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownEndpointError,
)
from niu_cloud_client.errors.handler import (
    extract_token,
    has_failure_status,
    interpret_response,
    parse_body,
    raise_for_status,
)
from niu_cloud_client.errors.models import ErrorDebug

__all__ = [
    "ClientError",
    "DomainError",
    "ErrorDebug",
    "ForbiddenError",
    "InputValidationError",
    "InvalidCredentialsError",
    "MalformedResponseError",
    "NiuCloudError",
    "NotFoundError",
    "PreconditionError",
    "ProtocolError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnknownEndpointError",
    "extract_token",
    "has_failure_status",
    "interpret_response",
    "parse_body",
    "raise_for_status",
]

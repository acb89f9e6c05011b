"""Tests for the NiuCloudError hierarchy."""

from datetime import datetime

import httpx
import pytest

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


@pytest.mark.unit
def test_plain_message_is_wrapped_as_detail():
    """Test that a plain error carries its message as a structured detail."""
    client = object()

    error = NiuCloudError("No valid token available.", operation="get_vehicles()", client=client)

    assert str(error) == "No valid token available."
    assert error.detail == {"message": "No valid token available."}
    assert error.client is client
    assert error.debug.operation == "get_vehicles()"
    assert isinstance(error.debug.timestamp, datetime)


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    for exc_class in (
        InputValidationError,
        PreconditionError,
        TransportError,
        ProtocolError,
        DomainError,
        MalformedResponseError,
        UnknownEndpointError,
    ):
        assert issubclass(exc_class, NiuCloudError)

    assert issubclass(ClientError, ProtocolError)
    assert issubclass(UnauthorizedError, ClientError)
    assert issubclass(ForbiddenError, ClientError)
    assert issubclass(NotFoundError, ClientError)
    assert issubclass(ServerError, ProtocolError)
    assert not issubclass(ServerError, ClientError)
    assert issubclass(InvalidCredentialsError, DomainError)
    assert issubclass(UnknownEndpointError, LookupError)


@pytest.mark.unit
def test_input_validation_error_names_field():
    error = InputValidationError("Vehicle serial number is missing.", field="sn", operation="get_tracks()")

    assert error.field == "sn"


@pytest.mark.unit
def test_transport_error_detail_is_cause():
    cause = httpx.ConnectError("connection refused")

    error = TransportError("Transport error: connection refused", cause=cause, operation="get_vehicles()")

    assert error.cause is cause
    assert error.detail is cause


@pytest.mark.unit
def test_protocol_error_attributes():
    response = httpx.Response(status_code=500)

    error = ServerError("Bad request: 500", status_code=500, response=response, operation="get_vehicles()")

    assert error.status_code == 500
    assert error.response is response


@pytest.mark.unit
def test_domain_error_detail_is_body():
    body = {"status": 1, "desc": "failed", "trace": "t"}

    error = DomainError("Request failed", body, operation="get_vehicles()")

    assert error.detail is body
    assert (error.status, error.desc, error.trace) == (1, "failed", "t")


@pytest.mark.unit
def test_malformed_response_error_keeps_body():
    body = {"status": 0, "data": {"token": ""}}

    error = MalformedResponseError("Token is empty in response.", body, operation="create_session_token()")

    assert error.body is body
    assert error.detail == {"message": "Token is empty in response."}


@pytest.mark.unit
def test_errors_are_stamped_independently():
    """Test that each error gets its own capture context."""
    first = PreconditionError("No valid token available.", operation="get_vehicles()")
    second = PreconditionError("No valid token available.", operation="get_tracks()")

    assert first.debug.operation != second.debug.operation

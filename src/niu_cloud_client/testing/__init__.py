"""Testing utilities for code built on the NIU cloud client.

Example:
    ```python
    from niu_cloud_client.testing import create_mock_client, success_body


    async def test_position():
        client, calls = create_mock_client(lambda request: success_body({"lat": 1.0, "lng": 2.0}), token="T123")
        result = await client.get_vehicle_position(sn="N1")
        assert result.parsed().lat == 1.0
        assert calls[0].headers["token"] == "T123"
    ```
"""

from collections.abc import Callable
from typing import Any

import httpx

from niu_cloud_client.client import NiuCloudClient
from niu_cloud_client.config import ClientSettings

Handler = Callable[[httpx.Request], httpx.Response | dict[str, Any]]


def success_body(data: Any = None, **extra: Any) -> dict[str, Any]:
    """A body shaped like a successful app API response."""
    return {"status": 0, "data": data, **extra}


def error_body(status: int, desc: str = "error", **extra: Any) -> dict[str, Any]:
    """A body reporting an application-level failure."""
    return {"status": status, "desc": desc, "trace": desc, **extra}


def login_body(token: str) -> dict[str, Any]:
    return {"status": 0, "data": {"token": token}}


def create_mock_transport(handler: Handler, calls: list[httpx.Request] | None = None) -> httpx.MockTransport:
    """Wrap ``handler`` in an httpx.MockTransport that records every request.

    ``handler`` may return an httpx.Response, or a dict that is sent back as
    a 200 JSON body.
    """

    def _handle(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        result = handler(request)
        if isinstance(result, httpx.Response):
            return result
        return httpx.Response(200, json=result)

    return httpx.MockTransport(_handle)


def create_mock_client(
    handler: Handler,
    *,
    token: str = "",
    settings: ClientSettings | None = None,
) -> tuple[NiuCloudClient, list[httpx.Request]]:
    """Create a NiuCloudClient backed by a mock transport.

    Returns:
        The client and the list the transport appends requests to.
    """
    calls: list[httpx.Request] = []
    client = NiuCloudClient(settings, token=token, transport=create_mock_transport(handler, calls))
    return client, calls


def form_fields(request: httpx.Request) -> dict[str, str]:
    """Decode the form body of a recorded request."""
    return dict(httpx.QueryParams(request.content.decode()))

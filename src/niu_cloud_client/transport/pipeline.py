"""Request pipeline: build, send and interpret one NIU API call.

```python
pipeline = RequestPipeline(http_client, store, base_url="https://app-api.niu.com")
result = await pipeline.dispatch("/motoinfo/currentpos", {"sn": "N1"}, operation="get_vehicle_position()")
```

Outcomes are never retried. A transport failure, an unusable or non-200
response, and a 200 response whose body reports an error are each raised as
a distinct NiuCloudError subclass.
"""

import logging
from typing import Any

import httpx

from niu_cloud_client.auth.session import SessionCredentialStore
from niu_cloud_client.errors.exceptions import TransportError
from niu_cloud_client.errors.handler import interpret_response, parse_body
from niu_cloud_client.models import ApiResult

logger = logging.getLogger(__name__)

LANGUAGE_HEADER = "accept-language"
TOKEN_HEADER = "token"


class RequestPipeline:
    """Sends requests for one client and normalizes their outcome.

    Args:
        http_client: The httpx client used as transport.
        store: Session token store, read at request build time.
        base_url: Base URL prepended to every path.
        language: Value of the ``accept-language`` header.
        owner: Object attached to results and errors (the NiuCloudClient).
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        store: SessionCredentialStore,
        *,
        base_url: str,
        language: str = "en-US",
        owner: Any = None,
    ) -> None:
        self._http_client = http_client
        self._store = store
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.owner = owner

    def build_request(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        *,
        params: dict[str, Any] | None = None,
        with_token: bool = True,
    ) -> httpx.Request:
        """Assemble the request; a dict payload (even empty) makes it a form POST."""
        headers = {LANGUAGE_HEADER: self.language}
        if with_token:
            headers[TOKEN_HEADER] = self._store.get()
        url = self.base_url + path

        if isinstance(payload, dict):
            return self._http_client.build_request(
                "POST", url, headers=headers, params=params, data=payload
            )
        return self._http_client.build_request("GET", url, headers=headers, params=params)

    async def send(self, request: httpx.Request, *, operation: str) -> tuple[httpx.Response, Any]:
        """Send a request and decode its body.

        Raises:
            TransportError: If httpx reports a network or protocol failure.
        """
        logger.debug(f"{operation} {request.method} {request.url}")
        try:
            response = await self._http_client.send(request)
        except httpx.HTTPError as e:
            raise TransportError(
                f"Transport error: {e}" if str(e) else f"Transport error: {type(e).__name__}",
                cause=e,
                operation=operation,
                client=self.owner,
            ) from e

        return response, parse_body(response)

    async def dispatch(
        self,
        path: str,
        payload: dict[str, Any] | None = None,
        *,
        params: dict[str, Any] | None = None,
        operation: str,
        endpoint: Any = None,
    ) -> ApiResult:
        """Send one call and return its body wrapped in an ApiResult.

        Args:
            path: Endpoint path relative to ``base_url``.
            payload: Form fields; when given the call is a POST.
            params: Query parameters.
            operation: Name of the calling operation, stamped on errors.
            endpoint: Descriptor attached to the result for typed parsing.

        Raises:
            TransportError, ProtocolError, DomainError
        """
        request = self.build_request(path, payload, params=params)
        response, body = await self.send(request, operation=operation)
        body = interpret_response(response, body, operation=operation, client=self.owner)
        return ApiResult(client=self.owner, data=body, endpoint=endpoint)

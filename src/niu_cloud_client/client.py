"""NIU cloud client: authentication plus one method per API endpoint."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from niu_cloud_client.auth.credentials import CredentialResolver
from niu_cloud_client.auth.session import SessionCredentialStore
from niu_cloud_client.config import ClientSettings
from niu_cloud_client.endpoints import (
    ENDPOINTS,
    LOGIN_FIELDS,
    TOKEN_FIELDS,
    EndpointDescriptor,
    PayloadStyle,
    validate_fields,
)
from niu_cloud_client.errors.exceptions import PreconditionError, UnknownEndpointError
from niu_cloud_client.errors.handler import extract_token
from niu_cloud_client.models import ApiResult
from niu_cloud_client.transport.pipeline import RequestPipeline

logger = logging.getLogger(__name__)

LOGIN_PATH = "/appv2/login"


def _endpoint_operation(descriptor: EndpointDescriptor):
    async def operation(self: "NiuCloudClient", **options: Any) -> ApiResult:
        return await self._execute(descriptor, options)

    field_names = ", ".join(spec.name for spec in descriptor.fields) or "none"
    operation.__name__ = descriptor.name
    operation.__qualname__ = f"NiuCloudClient.{descriptor.name}"
    operation.__doc__ = f"{descriptor.doc}\n\nRequired fields: {field_names}. Calls ``{descriptor.path}``."
    return operation


class NiuCloudClient:
    """Async client for the NIU cloud API.

    Each client owns its session token. Log in with
    :meth:`create_session_token`, or restore a saved token with
    :meth:`set_session_token`; every other operation needs one.

    Args:
        settings: Service URLs, language and timeout. Defaults to the public
            NIU endpoints.
        token: Session token to start with.
        http_client: Shared httpx client. The caller keeps ownership of it.
        transport: httpx transport for the client created internally
            (e.g. ``httpx.MockTransport`` in tests).

    Example:
        ```python
        async with NiuCloudClient() as client:
            await client.create_session_token(account="me@example.com", password="secret", country_code="49")
            result = await client.get_vehicles()
            for vehicle in result.parsed():
                print(vehicle.sn, vehicle.name)
        ```
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        token: str = "",
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self._store = SessionCredentialStore(token)
        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=self.settings.timeout, transport=transport)

        self._account_pipeline = RequestPipeline(
            self._http_client,
            self._store,
            base_url=self.settings.account_base_url,
            language=self.settings.language,
            owner=self,
        )
        self._app_pipeline = RequestPipeline(
            self._http_client,
            self._store,
            base_url=self.settings.app_api_base_url,
            language=self.settings.language,
            owner=self,
        )

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None, **kwargs: Any) -> "NiuCloudClient":
        """Create a client configured from ``NIU_*`` environment variables.

        A token saved in ``NIU_TOKEN`` (or the file named by
        ``NIU_TOKEN_FILE``) is installed right away.
        """
        resolver = resolver or CredentialResolver()
        settings = ClientSettings.from_env(resolver)
        token = resolver.resolve_token() or ""
        return cls(settings, token=token, **kwargs)

    async def __aenter__(self) -> "NiuCloudClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the internal httpx client (a shared one is left open)."""
        if self._owns_http_client:
            await self._http_client.aclose()

    @property
    def session_token(self) -> str:
        """The current session token, ``""`` when not logged in."""
        return self._store.get()

    @property
    def is_authenticated(self) -> bool:
        return self._store.is_authenticated

    async def create_session_token(self, **options: Any) -> ApiResult:
        """Log in and store the returned session token.

        Args:
            account: Email address, phone number or user name.
            password: Account password.
            country_code: Telephone country code without leading zeros or
                ``+``, e.g. ``"49"``.

        Returns:
            ApiResult whose ``data`` is the token.

        Raises:
            InputValidationError: A login field is missing or not a string.
            InvalidCredentialsError: The service rejected the login data.
            MalformedResponseError: The response carries no usable token.
            TransportError, ProtocolError
        """
        operation = "create_session_token()"
        form = validate_fields(LOGIN_FIELDS, options, operation=operation, client=self)

        request = self._account_pipeline.build_request(LOGIN_PATH, form, with_token=False)
        response, body = await self._account_pipeline.send(request, operation=operation)
        token = extract_token(response, body, operation=operation, client=self)

        self._store.set(token)
        logger.debug("Session token created (***)")
        return ApiResult(client=self, data=token)

    async def login_from_env(self, resolver: CredentialResolver | None = None) -> ApiResult:
        """Log in with ``NIU_ACCOUNT``, ``NIU_PASSWORD`` and ``NIU_COUNTRY_CODE``.

        Raises:
            CredentialNotFoundError: If one of the variables is not set.
        """
        credentials = (resolver or CredentialResolver()).resolve_account()
        return await self.create_session_token(
            account=credentials.account,
            password=credentials.password,
            country_code=credentials.country_code,
        )

    async def set_session_token(self, **options: Any) -> ApiResult:
        """Install a previously obtained session token without a network call.

        The token is not checked; an expired one shows up as an error on
        the next call.

        Args:
            token: The session token.
        """
        values = validate_fields(TOKEN_FIELDS, options, operation="set_session_token()", client=self)
        self._store.set(values["token"])
        return ApiResult(client=self, data=None)

    async def call(self, name: str, **options: Any) -> ApiResult:
        """Call the endpoint registered under ``name`` in ENDPOINTS.

        Raises:
            UnknownEndpointError: If no endpoint has that name.
        """
        try:
            descriptor = ENDPOINTS[name]
        except KeyError:
            raise UnknownEndpointError(f"Unknown endpoint: {name}", operation="call()", client=self) from None
        return await self._execute(descriptor, options)

    async def _execute(self, descriptor: EndpointDescriptor, options: Mapping[str, Any]) -> ApiResult:
        values = descriptor.validate(options, client=self)

        if descriptor.requires_auth and not self._store.is_authenticated:
            raise PreconditionError("No valid token available.", operation=descriptor.operation, client=self)

        if descriptor.payload is PayloadStyle.FORM:
            payload, params = values, None
        elif descriptor.payload is PayloadStyle.QUERY:
            payload, params = None, values
        else:
            payload, params = None, None

        return await self._app_pipeline.dispatch(
            descriptor.path,
            payload,
            params=params,
            operation=descriptor.operation,
            endpoint=descriptor,
        )

    # /motoinfo
    get_vehicles = _endpoint_operation(ENDPOINTS["get_vehicles"])
    get_vehicle_position = _endpoint_operation(ENDPOINTS["get_vehicle_position"])
    get_overall_tally = _endpoint_operation(ENDPOINTS["get_overall_tally"])
    get_track_detail = _endpoint_operation(ENDPOINTS["get_track_detail"])

    # /v3/motor_data
    get_battery_info = _endpoint_operation(ENDPOINTS["get_battery_info"])
    get_battery_health = _endpoint_operation(ENDPOINTS["get_battery_health"])
    get_motor_info = _endpoint_operation(ENDPOINTS["get_motor_info"])
    get_tracks = _endpoint_operation(ENDPOINTS["get_tracks"])

    # /motorota
    get_firmware_version = _endpoint_operation(ENDPOINTS["get_firmware_version"])
    get_update_info = _endpoint_operation(ENDPOINTS["get_update_info"])

"""NIU Cloud Client - async client for the NIU scooter cloud API.

- Session token handling (login, or restore a saved token)
- One awaitable method per endpoint, generated from a descriptor table
- Uniform ApiResult on success, classified NiuCloudError on failure

Example:
    ```python
    from niu_cloud_client import NiuCloudClient

    async with NiuCloudClient() as client:
        await client.create_session_token(account="me@example.com", password="secret", country_code="49")
        position = await client.get_vehicle_position(sn="N1GXXXXXXXXXXXXX")
        print(position.parsed().lat)
    ```
"""

from niu_cloud_client.client import NiuCloudClient
from niu_cloud_client.config import ClientSettings
from niu_cloud_client.errors import (
    DomainError,
    InputValidationError,
    InvalidCredentialsError,
    MalformedResponseError,
    NiuCloudError,
    PreconditionError,
    ProtocolError,
    TransportError,
)
from niu_cloud_client.models import ApiResult

__version__ = "0.1.0"

__all__ = [
    "ApiResult",
    "ClientSettings",
    "DomainError",
    "InputValidationError",
    "InvalidCredentialsError",
    "MalformedResponseError",
    "NiuCloudClient",
    "NiuCloudError",
    "PreconditionError",
    "ProtocolError",
    "TransportError",
    "__version__",
]

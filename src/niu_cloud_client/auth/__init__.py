"""Session token storage and account credential resolution.

Example:
    ```python
    from niu_cloud_client.auth import CredentialResolver

    resolver = CredentialResolver()
    credentials = resolver.resolve_account()
    ```
"""

from niu_cloud_client.auth.credentials import AccountCredentials, CredentialResolver
from niu_cloud_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from niu_cloud_client.auth.session import SessionCredentialStore

__all__ = [
    "AccountCredentials",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "SessionCredentialStore",
]

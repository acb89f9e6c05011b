"""Exceptions raised while resolving configuration and account credentials.

These are configuration-time failures (nothing was sent to the cloud yet),
so they sit outside the NiuCloudError hierarchy.

Example:
    ```python
    from niu_cloud_client.auth.exceptions import CredentialNotFoundError

    if not password:
        raise CredentialNotFoundError("Password not found", env_var_name="NIU_PASSWORD")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a token file cannot be read."""

    pass

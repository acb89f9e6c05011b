"""Client settings: service URLs, language header and timeout."""

from dataclasses import dataclass

from niu_cloud_client.auth.credentials import CredentialResolver

ACCOUNT_BASE_URL = "https://account.niu.com"
APP_API_BASE_URL = "https://app-api.niu.com"
DEFAULT_LANGUAGE = "en-US"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class ClientSettings:
    """Connection settings for NiuCloudClient.

    Attributes:
        account_base_url: Base URL of the login service.
        app_api_base_url: Base URL of every other endpoint.
        language: Value of the ``accept-language`` header.
        timeout: Request timeout in seconds, enforced by httpx.
    """

    account_base_url: str = ACCOUNT_BASE_URL
    app_api_base_url: str = APP_API_BASE_URL
    language: str = DEFAULT_LANGUAGE
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None) -> "ClientSettings":
        """Build settings from ``NIU_*`` environment variables (or .env)."""
        resolver = resolver or CredentialResolver()

        def _resolve(env_var_name: str, default: str) -> str:
            return resolver.resolve(env_var_name=env_var_name, default=default, mask_in_logs=False)

        timeout = _resolve("NIU_TIMEOUT", str(DEFAULT_TIMEOUT))
        try:
            timeout_value = float(timeout)
        except ValueError:
            raise ValueError(f"NIU_TIMEOUT must be a number of seconds, got {timeout!r}") from None

        return cls(
            account_base_url=_resolve("NIU_ACCOUNT_BASE_URL", ACCOUNT_BASE_URL).rstrip("/"),
            app_api_base_url=_resolve("NIU_APP_API_BASE_URL", APP_API_BASE_URL).rstrip("/"),
            language=_resolve("NIU_LANGUAGE", DEFAULT_LANGUAGE),
            timeout=timeout_value,
        )

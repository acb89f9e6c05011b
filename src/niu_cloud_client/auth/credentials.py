"""Resolution of NIU account credentials and settings from the environment.

Values are looked up in this order (first match wins):
1. Explicitly provided value
2. Environment variable (including values loaded from a .env file)
3. Default value

Example:
    ```python
    from niu_cloud_client.auth import CredentialResolver

    resolver = CredentialResolver()
    account = resolver.resolve_account()
    token = resolver.resolve_from_file(env_var_name="NIU_TOKEN_FILE")
    ```

Secret values are never logged; only the source they came from is.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from niu_cloud_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

ACCOUNT_ENV_VAR = "NIU_ACCOUNT"
PASSWORD_ENV_VAR = "NIU_PASSWORD"
COUNTRY_CODE_ENV_VAR = "NIU_COUNTRY_CODE"
TOKEN_ENV_VAR = "NIU_TOKEN"
TOKEN_FILE_ENV_VAR = "NIU_TOKEN_FILE"


@dataclass(frozen=True)
class AccountCredentials:
    """Login fields accepted by the account service."""

    account: str
    password: str
    country_code: str

    def __repr__(self) -> str:
        return f"AccountCredentials(account={self.account!r}, password='***', country_code={self.country_code!r})"


class CredentialResolver:
    """Resolve credentials and settings from explicit values, env vars and .env.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Set to False to skip .env loading entirely.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single value.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to check.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when unresolved.
            mask_in_logs: Log ``***`` instead of the value.

        Returns:
            The resolved value, or None if not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved credential from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a value (typically a saved session token) from a file.

        The path may come from ``file_path`` or from the environment variable
        ``env_var_name``; ``~`` and ``$VAR`` are expanded and the contents
        are stripped of surrounding whitespace.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = None

        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_account(
        self,
        *,
        account: str | None = None,
        password: str | None = None,
        country_code: str | None = None,
    ) -> AccountCredentials:
        """Resolve the login fields, falling back to ``NIU_ACCOUNT`` and friends.

        Raises:
            CredentialNotFoundError: If any of the three fields is unresolved.
        """
        return AccountCredentials(
            account=self.resolve(value=account, env_var_name=ACCOUNT_ENV_VAR, required=True),
            password=self.resolve(value=password, env_var_name=PASSWORD_ENV_VAR, required=True),
            country_code=self.resolve(
                value=country_code,
                env_var_name=COUNTRY_CODE_ENV_VAR,
                required=True,
                mask_in_logs=False,
            ),
        )

    def resolve_token(self, *, token: str | None = None) -> str | None:
        """Resolve a previously saved session token from ``NIU_TOKEN`` or ``NIU_TOKEN_FILE``."""
        resolved = self.resolve(value=token, env_var_name=TOKEN_ENV_VAR)
        if resolved:
            return resolved
        return self.resolve_from_file(env_var_name=TOKEN_FILE_ENV_VAR) or None

"""Process configuration from environment variables."""

import os
from dataclasses import dataclass

from registry_add.core.errors import InitializationError

TOKEN_ENV_VARS = ("GH_TOKEN", "GITHUB_TOKEN")


@dataclass(frozen=True)
class AppConfig:
    """Configuration loaded once per invocation."""

    github_token: str
    debug: bool

    @staticmethod
    def from_env() -> "AppConfig":
        """Load configuration from environment variables.

        Raises:
            InitializationError: If no GitHub token is set
        """
        token = next((os.environ[name] for name in TOKEN_ENV_VARS if os.environ.get(name)), None)
        if token is None:
            names = " or ".join(TOKEN_ENV_VARS)
            raise InitializationError(f"GitHub token not found, set {names}")

        return AppConfig(
            github_token=token,
            debug=os.environ.get("REGISTRY_ADD_DEBUG", "false").lower() in ("1", "true"),
        )

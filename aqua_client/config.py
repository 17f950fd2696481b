"""Client configuration loaded from the environment.

Environment Variables:
- AQUA_API_ENDPOINT: Base URL of the Aqua server (required)
- AQUA_API_TOKEN: Bearer token for the session (default: empty)
- AQUA_API_TIMEOUT: Request timeout in seconds (default: 30.0)

A ``.env`` file in the working directory is loaded first if present.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from aqua_client.errors import ConfigError

ENDPOINT_ENV = "AQUA_API_ENDPOINT"
TOKEN_ENV = "AQUA_API_TOKEN"
TIMEOUT_ENV = "AQUA_API_TIMEOUT"

DEFAULT_TIMEOUT_SECONDS = 30.0


def _timeout_from_env() -> float:
    """Seconds from AQUA_API_TIMEOUT, or the default when unset or non-numeric."""
    raw = os.environ.get(TIMEOUT_ENV, "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one Aqua API session.

    Attributes:
        endpoint: Base URL of the Aqua server.
        token: Bearer token sent with every request.
        timeout_seconds: Transport-level deadline for each request.
    """

    endpoint: str
    token: str = ""
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Reject timeouts httpx cannot use as a deadline."""
        if not math.isfinite(self.timeout_seconds) or self.timeout_seconds <= 0:
            raise ConfigError(
                self.endpoint,
                f"timeout_seconds must be positive, got {self.timeout_seconds}",
            )

    @classmethod
    def from_environment(cls, env_file: Path | None = None) -> "ClientConfig":
        """Create config from environment variables with defaults.

        Args:
            env_file: Optional dotenv file to load. Defaults to ``.env``
                in the working directory when it exists.

        Returns:
            ClientConfig with values from environment or defaults.

        Raises:
            ConfigError: If AQUA_API_ENDPOINT is not set or AQUA_API_TIMEOUT
                is zero or negative.
        """
        env_path = env_file or Path(".env")
        if env_path.exists():
            load_dotenv(env_path)

        endpoint = os.environ.get(ENDPOINT_ENV, "").strip()
        if not endpoint:
            raise ConfigError(endpoint, f"{ENDPOINT_ENV} is not set")

        return cls(
            endpoint=endpoint,
            token=os.environ.get(TOKEN_ENV, ""),
            timeout_seconds=_timeout_from_env(),
        )

"""Connection settings for a Bitbucket Server instance."""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_ENDPOINT = "http://127.0.0.1:7990"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class BitbucketConfig:
    """
    Where the server lives and how to authenticate against it.

    ``credentials`` is either ``"user:password"`` (HTTP basic auth) or a
    personal access token sent as a bearer token.
    """

    endpoint: str = DEFAULT_ENDPOINT
    credentials: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(
        cls,
        endpoint: Optional[str] = None,
        credentials: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> "BitbucketConfig":
        """
        Build a config, letting explicit arguments override the environment.

        Args:
            endpoint: Base URL of the server. Falls back to BITBUCKET_REST_ENDPOINT.
            credentials: ``user:password`` or token. Falls back to BITBUCKET_REST_CREDENTIALS.
            timeout: Request timeout in seconds. Falls back to BITBUCKET_REST_TIMEOUT.
        """
        if endpoint is None:
            endpoint = os.getenv("BITBUCKET_REST_ENDPOINT", DEFAULT_ENDPOINT)
        if credentials is None:
            credentials = os.getenv("BITBUCKET_REST_CREDENTIALS") or None
        if timeout is None:
            timeout = float(os.getenv("BITBUCKET_REST_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))

        return cls(endpoint=endpoint.rstrip("/"), credentials=credentials, timeout=timeout)

    @property
    def basic_auth(self) -> Optional[Tuple[str, str]]:
        if self.credentials and ":" in self.credentials:
            user, password = self.credentials.split(":", 1)
            return user, password
        return None

    @property
    def token(self) -> Optional[str]:
        if self.credentials and ":" not in self.credentials:
            return self.credentials
        return None

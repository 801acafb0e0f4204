"""Bitbucket Server REST transport with authentication and retry logic."""

import time
import logging
from typing import Any, Dict, List, Optional

import requests

from bitbucket_rest.domain.common import Error, parse_errors
from bitbucket_rest.infrastructure.config import BitbucketConfig

logger = logging.getLogger(__name__)


class BitbucketError(Exception):
    """Base class for failures the client raises instead of reporting as data."""
    pass


class BitbucketAuthenticationError(BitbucketError):
    """Raised when the server rejects the configured credentials."""
    pass


def decode_json(response: requests.Response) -> Dict[str, Any]:
    """Decode a response body, treating empty or non-JSON bodies as ``{}``."""
    if not response.content:
        return {}
    try:
        data = response.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def response_errors(response: requests.Response) -> List[Error]:
    """
    Turn a failed response into a list of errors.

    Bitbucket normally answers with ``{"errors": [...]}``; when it does not,
    the status line becomes the single error message.
    """
    errors = parse_errors(decode_json(response))
    if errors:
        return errors
    return [Error(context=None, message=f"{response.status_code} {response.reason}", exception_name=None)]


class BitbucketHttpClient:
    """Session-backed client for the Bitbucket Server core REST API."""

    API_PATH = "rest/api/1.0/"
    MAX_RETRIES = 5
    RETRY_DELAY_SECONDS = 1
    RETRY_STATUS_CODES = (502, 503, 504)
    IDEMPOTENT_METHODS = ("GET", "PUT", "DELETE")  # only these are resent after a gateway error

    def __init__(
        self,
        endpoint: Optional[str] = None,
        credentials: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the transport.

        Args:
            endpoint: Server base URL. If None, uses BITBUCKET_REST_ENDPOINT env var.
            credentials: ``user:password`` or a token. If None, uses BITBUCKET_REST_CREDENTIALS.
            timeout: Per-request timeout in seconds.
        """
        self.config = BitbucketConfig.from_env(endpoint, credentials, timeout)
        self.base_url = f"{self.config.endpoint}/{self.API_PATH}"

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "Content-Type": "application/json",
        })

        if self.config.basic_auth:
            self.session.auth = self.config.basic_auth
        elif self.config.token:
            self.session.headers["Authorization"] = f"Bearer {self.config.token}"
        else:
            logger.debug("No credentials configured, using anonymous access")

    def close(self):
        self.session.close()

    def _execute_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Send a request with retry logic.

        Client errors are returned as-is so callers can report them as data.

        Raises:
            BitbucketAuthenticationError: If the server answers 401
            requests.RequestException: If the request fails after retries
        """
        url = self.base_url + path.lstrip("/")

        for attempt in range(self.MAX_RETRIES):
            try:
                response = self.session.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    timeout=self.config.timeout,
                )
            except requests.exceptions.RequestException as e:
                if attempt < self.MAX_RETRIES - 1:
                    delay = self.RETRY_DELAY_SECONDS * (2 ** attempt)  # Exponential backoff
                    logger.warning(f"{method} {url} failed (attempt {attempt + 1}/{self.MAX_RETRIES}): {e}. Retrying in {delay}s...")
                    time.sleep(delay)
                    continue
                logger.error(f"{method} {url} failed after {self.MAX_RETRIES} attempts: {e}")
                raise

            if response.status_code == 401:
                raise BitbucketAuthenticationError("Authentication failed. Check your Bitbucket credentials.")

            if (response.status_code in self.RETRY_STATUS_CODES
                    and method in self.IDEMPOTENT_METHODS
                    and attempt < self.MAX_RETRIES - 1):
                delay = self.RETRY_DELAY_SECONDS * (2 ** attempt)
                logger.warning(f"{method} {url} returned {response.status_code}. Retrying in {delay}s...")
                time.sleep(delay)
                continue

            if not response.ok:
                logger.warning(f"{method} {url} returned {response.status_code} {response.reason}")
            return response

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self._execute_request("GET", path, params=params)

    def post(self, path: str, json: Optional[Dict[str, Any]] = None,
             params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self._execute_request("POST", path, params=params, json=json)

    def put(self, path: str, json: Optional[Dict[str, Any]] = None,
            params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self._execute_request("PUT", path, params=params, json=json)

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        return self._execute_request("DELETE", path, params=params)

"""Shared response handling for the Bitbucket API wrappers."""

import logging
from typing import Any, Dict, Optional

import requests
from requests.utils import quote

from bitbucket_rest.infrastructure.http_client import BitbucketHttpClient, decode_json, response_errors

logger = logging.getLogger(__name__)


def quote_segment(value: str) -> str:
    """Percent-encode one URL path segment; ``:`` stays literal for hook keys."""
    return quote(str(value), safe=":")


class BaseApi:
    """
    Converts HTTP responses into entities or booleans.

    Expected failures (unknown repository, illegal name, missing principal)
    never raise: they come back as an entity with ``errors`` filled in, or
    as ``False`` for mutations.
    """

    def __init__(self, client: BitbucketHttpClient):
        self.client = client

    def _entity(self, response: requests.Response, entity_cls: Any) -> Any:
        if response.ok:
            return entity_cls.from_json(decode_json(response))
        return entity_cls.on_error(response_errors(response))

    def _succeeded(self, response: requests.Response) -> bool:
        if response.ok:
            return True
        for err in response_errors(response):
            logger.warning(f"Request rejected: {err.message}")
        return False

    @staticmethod
    def _page_params(start: Optional[int], limit: Optional[int]) -> Dict[str, Any]:
        params = {}
        if start is not None:
            params["start"] = start
        if limit is not None:
            params["limit"] = limit
        return params

"""Entry point tying the Bitbucket API wrappers to one transport."""

import logging
from typing import Iterator, Optional

from bitbucket_rest.domain.repository import Repository
from bitbucket_rest.infrastructure.http_client import BitbucketHttpClient
from bitbucket_rest.infrastructure.project_api import ProjectApi
from bitbucket_rest.infrastructure.repository_api import RepositoryApi

logger = logging.getLogger(__name__)


class BitbucketApi:
    """Facade over the project and repository APIs of one Bitbucket Server."""

    PAGE_SIZE = 100  # Bitbucket caps most paged endpoints at 1000

    def __init__(
        self,
        endpoint: Optional[str] = None,
        credentials: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the API facade.

        Args:
            endpoint: Server base URL. If None, uses BITBUCKET_REST_ENDPOINT env var.
            credentials: ``user:password`` or a token. If None, uses BITBUCKET_REST_CREDENTIALS.
            timeout: Per-request timeout in seconds.
        """
        self.client = BitbucketHttpClient(endpoint=endpoint, credentials=credentials, timeout=timeout)
        self._project_api = ProjectApi(self.client)
        self._repository_api = RepositoryApi(self.client)

    def project_api(self) -> ProjectApi:
        return self._project_api

    def repository_api(self) -> RepositoryApi:
        return self._repository_api

    def close(self):
        self.client.close()

    def iter_repositories(self, project_key: str) -> Iterator[Repository]:
        """
        Yield every repository in a project, following pagination.

        Stops early, logging the errors, if a page comes back with errors.
        """
        start = 0
        fetched = 0

        while True:
            page = self._repository_api.list(project_key, start=start, limit=self.PAGE_SIZE)
            if page.errors:
                messages = [err.message for err in page.errors]
                logger.warning(f"Listing repositories in {project_key} failed: {messages}")
                return

            for repository in page.values:
                yield repository
            fetched += len(page.values)

            logger.debug(f"Fetched {fetched} repositories from {project_key}")

            if page.is_last_page or page.next_page_start is None:
                break
            start = page.next_page_start

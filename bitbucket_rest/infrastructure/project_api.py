"""Project endpoints of the Bitbucket Server REST API."""

import logging
from typing import Optional

from bitbucket_rest.domain.options import CreateProject
from bitbucket_rest.domain.project import Project, ProjectPage
from bitbucket_rest.infrastructure.base_api import BaseApi, quote_segment

logger = logging.getLogger(__name__)


class ProjectApi(BaseApi):
    """Create, fetch, list and delete projects."""

    def create(self, create_project: CreateProject) -> Project:
        logger.info(f"Creating project {create_project.key}")
        response = self.client.post("projects", json=create_project.to_json())
        return self._entity(response, Project)

    def get(self, project_key: str) -> Project:
        logger.info(f"Getting project {project_key}")
        return self._entity(self.client.get(f"projects/{quote_segment(project_key)}"), Project)

    def delete(self, project_key: str) -> bool:
        logger.info(f"Deleting project {project_key}")
        return self._succeeded(self.client.delete(f"projects/{quote_segment(project_key)}"))

    def list(
        self,
        name: Optional[str] = None,
        permission: Optional[str] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ProjectPage:
        """
        List projects visible to the current user.

        Args:
            name: Only projects whose name contains this text
            permission: Only projects where the user holds this permission
            start: Index of the first project to return
            limit: Maximum number of projects to return
        """
        params = self._page_params(start, limit)
        if name is not None:
            params["name"] = name
        if permission is not None:
            params["permission"] = permission
        return self._entity(self.client.get("projects", params=params), ProjectPage)

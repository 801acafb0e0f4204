"""Repository endpoints of the Bitbucket Server REST API."""

import logging
from typing import Optional, Union

from bitbucket_rest.domain.hook import Hook, HookPage
from bitbucket_rest.domain.options import CreatePullRequestSettings, CreateRepository
from bitbucket_rest.domain.permissions import Permission, PermissionsPage
from bitbucket_rest.domain.pull_request_settings import PullRequestSettings
from bitbucket_rest.domain.repository import Repository, RepositoryPage
from bitbucket_rest.infrastructure.base_api import BaseApi, quote_segment

logger = logging.getLogger(__name__)


def _permission_name(permission: Union[Permission, str]) -> str:
    if isinstance(permission, Permission):
        return permission.value
    return permission


def _repo_path(project_key: str, repo_slug: str) -> str:
    return f"projects/{quote_segment(project_key)}/repos/{quote_segment(repo_slug)}"


class RepositoryApi(BaseApi):
    """Manage repositories, their pull request settings, permissions and hooks."""

    def create(self, project_key: str, create_repository: CreateRepository) -> Repository:
        """
        Create a repository in a project.

        Returns:
            The new repository, or one carrying ``errors`` when the name is
            rejected or the project does not exist
        """
        logger.info(f"Creating repository {project_key}/{create_repository.name}")
        response = self.client.post(f"projects/{quote_segment(project_key)}/repos", json=create_repository.to_json())
        return self._entity(response, Repository)

    def get(self, project_key: str, repo_slug: str) -> Repository:
        logger.info(f"Getting repository {project_key}/{repo_slug}")
        return self._entity(self.client.get(_repo_path(project_key, repo_slug)), Repository)

    def delete(self, project_key: str, repo_slug: str) -> bool:
        """
        Schedule a repository for deletion.

        Deleting a repository that does not exist also returns True.
        """
        logger.info(f"Deleting repository {project_key}/{repo_slug}")
        response = self.client.delete(_repo_path(project_key, repo_slug))
        if response.status_code == 404:
            logger.info(f"Repository {project_key}/{repo_slug} does not exist")
            return True
        return self._succeeded(response)

    def list(self, project_key: str, start: Optional[int] = None, limit: Optional[int] = None) -> RepositoryPage:
        logger.info(f"Listing repositories in {project_key} (start={start}, limit={limit})")
        response = self.client.get(f"projects/{quote_segment(project_key)}/repos", params=self._page_params(start, limit))
        return self._entity(response, RepositoryPage)

    def get_pull_request_settings(self, project_key: str, repo_slug: str) -> PullRequestSettings:
        logger.info(f"Getting pull request settings for {project_key}/{repo_slug}")
        response = self.client.get(f"{_repo_path(project_key, repo_slug)}/settings/pull-requests")
        return self._entity(response, PullRequestSettings)

    def update_pull_request_settings(
        self,
        project_key: str,
        repo_slug: str,
        settings: CreatePullRequestSettings,
    ) -> PullRequestSettings:
        logger.info(f"Updating pull request settings for {project_key}/{repo_slug}")
        response = self.client.post(
            f"{_repo_path(project_key, repo_slug)}/settings/pull-requests",
            json=settings.to_json(),
        )
        return self._entity(response, PullRequestSettings)

    def list_permissions_by_user(
        self,
        project_key: str,
        repo_slug: str,
        start: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PermissionsPage:
        response = self.client.get(
            f"{_repo_path(project_key, repo_slug)}/permissions/users",
            params=self._page_params(start, limit),
        )
        return self._entity(response, PermissionsPage)

    def list_permissions_by_group(
        self,
        project_key: str,
        repo_slug: str,
        start: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PermissionsPage:
        response = self.client.get(
            f"{_repo_path(project_key, repo_slug)}/permissions/groups",
            params=self._page_params(start, limit),
        )
        return self._entity(response, PermissionsPage)

    def create_permissions_by_user(
        self,
        project_key: str,
        repo_slug: str,
        permission: Union[Permission, str],
        user_slug: str,
    ) -> bool:
        """
        Grant a repository permission to a user.

        Returns:
            True if applied, False if the user does not exist or the grant was rejected
        """
        logger.info(f"Granting {_permission_name(permission)} on {project_key}/{repo_slug} to user {user_slug}")
        response = self.client.put(
            f"{_repo_path(project_key, repo_slug)}/permissions/users",
            params={"permission": _permission_name(permission), "name": user_slug},
        )
        return self._succeeded(response)

    def delete_permissions_by_user(self, project_key: str, repo_slug: str, user_slug: str) -> bool:
        logger.info(f"Revoking permissions on {project_key}/{repo_slug} from user {user_slug}")
        response = self.client.delete(
            f"{_repo_path(project_key, repo_slug)}/permissions/users",
            params={"name": user_slug},
        )
        return self._succeeded(response)

    def create_permissions_by_group(
        self,
        project_key: str,
        repo_slug: str,
        permission: Union[Permission, str],
        group_name: str,
    ) -> bool:
        logger.info(f"Granting {_permission_name(permission)} on {project_key}/{repo_slug} to group {group_name}")
        response = self.client.put(
            f"{_repo_path(project_key, repo_slug)}/permissions/groups",
            params={"permission": _permission_name(permission), "name": group_name},
        )
        return self._succeeded(response)

    def delete_permissions_by_group(self, project_key: str, repo_slug: str, group_name: str) -> bool:
        # Bitbucket answers 204 even when the group holds no permission here.
        logger.info(f"Revoking permissions on {project_key}/{repo_slug} from group {group_name}")
        response = self.client.delete(
            f"{_repo_path(project_key, repo_slug)}/permissions/groups",
            params={"name": group_name},
        )
        return self._succeeded(response)

    def list_hooks(
        self,
        project_key: str,
        repo_slug: str,
        start: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> HookPage:
        logger.info(f"Listing hooks for {project_key}/{repo_slug}")
        response = self.client.get(
            f"{_repo_path(project_key, repo_slug)}/settings/hooks",
            params=self._page_params(start, limit),
        )
        return self._entity(response, HookPage)

    def get_hook(self, project_key: str, repo_slug: str, hook_key: str) -> Hook:
        """
        Get a single hook.

        Args:
            hook_key: Composite ``pluginKey:moduleKey`` identifier,
                e.g. ``com.atlassian.bitbucket.server.bitbucket-bundled-hooks:force-push-hook``
        """
        logger.info(f"Getting hook {hook_key} for {project_key}/{repo_slug}")
        response = self.client.get(f"{_repo_path(project_key, repo_slug)}/settings/hooks/{quote_segment(hook_key)}")
        return self._entity(response, Hook)

    def enable_hook(self, project_key: str, repo_slug: str, hook_key: str) -> Hook:
        logger.info(f"Enabling hook {hook_key} for {project_key}/{repo_slug}")
        response = self.client.put(f"{_repo_path(project_key, repo_slug)}/settings/hooks/{quote_segment(hook_key)}/enabled")
        return self._entity(response, Hook)

    def disable_hook(self, project_key: str, repo_slug: str, hook_key: str) -> Hook:
        logger.info(f"Disabling hook {hook_key} for {project_key}/{repo_slug}")
        response = self.client.delete(f"{_repo_path(project_key, repo_slug)}/settings/hooks/{quote_segment(hook_key)}/enabled")
        return self._entity(response, Hook)

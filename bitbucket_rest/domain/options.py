"""Request payloads for the create and update calls."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bitbucket_rest.domain.pull_request_settings import MergeConfig


@dataclass(frozen=True)
class CreateProject:
    key: str
    name: str
    description: Optional[str] = None
    avatar: Optional[str] = None

    @classmethod
    def create(
        cls,
        key: str,
        name: Optional[str],
        description: Optional[str],
        avatar: Optional[str],
    ) -> "CreateProject":
        """Build project options; ``name`` falls back to ``key`` when omitted."""
        return cls(key=key, name=name if name is not None else key,
                   description=description, avatar=avatar)

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"key": self.key, "name": self.name}
        if self.description is not None:
            payload["description"] = self.description
        if self.avatar is not None:
            payload["avatar"] = self.avatar
        return payload


@dataclass(frozen=True)
class CreateRepository:
    name: str
    forkable: bool = True
    scm_id: str = "git"

    @classmethod
    def create(cls, name: str, forkable: bool) -> "CreateRepository":
        return cls(name=name, forkable=forkable)

    def to_json(self) -> Dict[str, Any]:
        return {"name": self.name, "scmId": self.scm_id, "forkable": self.forkable}


@dataclass(frozen=True)
class CreatePullRequestSettings:
    merge_config: MergeConfig
    required_all_approvers: bool = False
    required_all_tasks_complete: bool = False
    required_approvers: int = 0
    required_successful_builds: int = 0

    @classmethod
    def create(
        cls,
        merge_config: MergeConfig,
        required_all_approvers: bool,
        required_all_tasks_complete: bool,
        required_approvers: int,
        required_successful_builds: int,
    ) -> "CreatePullRequestSettings":
        return cls(
            merge_config=merge_config,
            required_all_approvers=required_all_approvers,
            required_all_tasks_complete=required_all_tasks_complete,
            required_approvers=required_approvers,
            required_successful_builds=required_successful_builds,
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "mergeConfig": self.merge_config.to_json(),
            "requiredAllApprovers": self.required_all_approvers,
            "requiredAllTasksComplete": self.required_all_tasks_complete,
            "requiredApprovers": self.required_approvers,
            "requiredSuccessfulBuilds": self.required_successful_builds,
        }

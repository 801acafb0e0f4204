"""Pull request merge settings for a repository."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from bitbucket_rest.domain.common import Error, parse_errors


class MergeStrategyId(str, Enum):
    """Merge strategies known to Bitbucket Server, keyed by their wire id."""

    NO_FF = "no-ff"
    FF = "ff"
    FF_ONLY = "ff-only"
    REBASE_NO_FF = "rebase-no-ff"
    REBASE_FF_ONLY = "rebase-ff-only"
    SQUASH = "squash"
    SQUASH_FF_ONLY = "squash-ff-only"

    @classmethod
    def from_wire(cls, value: Optional[str]) -> Optional["MergeStrategyId"]:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class MergeConfigType(str, Enum):
    """Where the effective merge config comes from."""

    DEFAULT = "DEFAULT"
    PROJECT = "PROJECT"
    REPOSITORY = "REPOSITORY"

    @classmethod
    def from_wire(cls, value: Optional[str]) -> Optional["MergeConfigType"]:
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class MergeStrategy:
    id: Optional[MergeStrategyId] = None
    description: Optional[str] = None
    enabled: Optional[bool] = None
    flag: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def create(
        cls,
        description: Optional[str],
        enabled: Optional[bool],
        flag: Optional[str],
        id: Optional[MergeStrategyId],
        name: Optional[str],
    ) -> "MergeStrategy":
        return cls(id=id, description=description, enabled=enabled, flag=flag, name=name)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "MergeStrategy":
        return cls(
            id=MergeStrategyId.from_wire(data.get("id")),
            description=data.get("description"),
            enabled=data.get("enabled"),
            flag=data.get("flag"),
            name=data.get("name"),
        )

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {}
        if self.id is not None:
            payload["id"] = self.id.value
        if self.description is not None:
            payload["description"] = self.description
        if self.enabled is not None:
            payload["enabled"] = self.enabled
        if self.flag is not None:
            payload["flag"] = self.flag
        if self.name is not None:
            payload["name"] = self.name
        return payload


@dataclass(frozen=True)
class MergeConfig:
    """Default merge strategy plus the strategies a pull request may choose from."""

    default_strategy: Optional[MergeStrategy] = None
    strategies: List[MergeStrategy] = field(default_factory=list)
    type: Optional[MergeConfigType] = None

    @classmethod
    def create(
        cls,
        default_strategy: MergeStrategy,
        strategies: List[MergeStrategy],
        type: MergeConfigType,
    ) -> "MergeConfig":
        return cls(default_strategy=default_strategy, strategies=list(strategies), type=type)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "MergeConfig":
        default_strategy = data.get("defaultStrategy")
        return cls(
            default_strategy=MergeStrategy.from_json(default_strategy) if default_strategy else None,
            strategies=[MergeStrategy.from_json(s) for s in data.get("strategies") or []],
            type=MergeConfigType.from_wire(data.get("type")),
        )

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "strategies": [s.to_json() for s in self.strategies],
        }
        if self.default_strategy is not None:
            payload["defaultStrategy"] = self.default_strategy.to_json()
        if self.type is not None:
            payload["type"] = self.type.value
        return payload


@dataclass(frozen=True)
class PullRequestSettings:
    merge_config: Optional[MergeConfig] = None
    required_all_approvers: bool = False
    required_all_tasks_complete: bool = False
    required_approvers: int = 0
    required_successful_builds: int = 0
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PullRequestSettings":
        merge_config = data.get("mergeConfig")
        return cls(
            merge_config=MergeConfig.from_json(merge_config) if merge_config else None,
            required_all_approvers=data.get("requiredAllApprovers", False),
            required_all_tasks_complete=data.get("requiredAllTasksComplete", False),
            required_approvers=data.get("requiredApprovers", 0),
            required_successful_builds=data.get("requiredSuccessfulBuilds", 0),
            errors=parse_errors(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "PullRequestSettings":
        return cls(errors=errors)
